"""UI components."""

from walletpanel.ui.components.wallet_panel import create_wallet_panel, render_panel

__all__ = ["create_wallet_panel", "render_panel"]
