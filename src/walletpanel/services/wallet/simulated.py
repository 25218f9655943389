"""In-process wallet bridge for simulation mode.

Answers every bridge call from settings, so the panel can run without a
browser wallet. Mirrors what an injected provider reports: a connect call
flips the connection on, eth_getBalance returns the configured hex string.
"""

import structlog

from walletpanel.config.settings import Settings, get_settings
from walletpanel.core.wallet.utils import truncate_address
from walletpanel.models.balance import BalanceResponse
from walletpanel.models.connection import ConnectionSnapshot

log = structlog.get_logger(__name__)


class SimulatedWalletBridge:
    """Wallet bridge backed by the ``simulated_*`` settings.

    Example:
        bridge = SimulatedWalletBridge()
        await bridge.connect_wallet()
        snapshot = await bridge.get_connection()
        response = await bridge.get_balance(snapshot.address)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._connected = False

    async def connect_wallet(self) -> None:
        self._connected = True
        log.info(
            "simulated_wallet_connected",
            wallet_address=truncate_address(self._settings.simulated_address),
            network=self._settings.simulated_network_name,
        )

    async def disconnect_wallet(self) -> None:
        self._connected = False
        log.info("simulated_wallet_disconnected")

    async def get_connection(self) -> ConnectionSnapshot:
        if not self._connected:
            return ConnectionSnapshot.disconnected()
        return ConnectionSnapshot(
            connected=True,
            address=self._settings.simulated_address,
            network_name=self._settings.simulated_network_name,
        )

    async def get_balance(self, address: str) -> BalanceResponse:
        if not self._connected:
            return BalanceResponse(error="Wallet not connected")

        if address.lower() != self._settings.simulated_address.lower():
            log.warning(
                "simulated_balance_unknown_address",
                wallet_address=truncate_address(address),
            )
            return BalanceResponse(error=f"Unknown account {truncate_address(address)}")

        return BalanceResponse(balance_hex=self._settings.simulated_balance_hex)
