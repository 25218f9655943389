"""Gradio user interface."""

from walletpanel.ui.app import create_app

__all__ = ["create_app"]
