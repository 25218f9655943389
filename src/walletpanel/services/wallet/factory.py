"""Wallet bridge selection from settings."""

import structlog

from walletpanel.config.settings import Settings, get_settings
from walletpanel.services.wallet.bridge import WalletBridge
from walletpanel.services.wallet.simulated import SimulatedWalletBridge

log = structlog.get_logger(__name__)


def get_bridge(settings: Settings | None = None) -> WalletBridge:
    """Build the wallet bridge configured by ``wallet_mode``.

    ``wallet_mode`` is validated by Settings, so only supported modes reach here.
    """
    settings = settings or get_settings()
    log.debug("wallet_bridge_selected", mode=settings.wallet_mode)
    return SimulatedWalletBridge(settings)
