"""External collaborators used by the panel."""
