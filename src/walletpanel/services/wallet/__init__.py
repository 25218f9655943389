"""Wallet bridge interface and implementations."""

from walletpanel.services.wallet.bridge import WalletBridge
from walletpanel.services.wallet.factory import get_bridge
from walletpanel.services.wallet.simulated import SimulatedWalletBridge

__all__ = ["SimulatedWalletBridge", "WalletBridge", "get_bridge"]
