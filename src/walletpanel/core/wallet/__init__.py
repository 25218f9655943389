"""Wallet helpers."""

from walletpanel.core.wallet.utils import truncate_address

__all__ = ["truncate_address"]
