"""Core panel logic: balance formatting and connection-state reconciliation.

Nothing in this package performs I/O except the controller, which talks
to a wallet bridge.
"""
