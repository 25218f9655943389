"""Configuration module for WalletPanel.

Usage:
    from walletpanel.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.currency_symbol)
"""

from walletpanel.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
