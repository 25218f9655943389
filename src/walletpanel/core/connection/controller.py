"""Panel controller.

Feeds wallet bridge results through the reconciler and keeps the panel's
DisplayState. UI callbacks call into this class and render ``state``.
"""

import structlog

from walletpanel.config.settings import Settings, get_settings
from walletpanel.core.balance.formatter import format_balance
from walletpanel.core.connection.reconciler import apply_actions, reconcile
from walletpanel.core.exceptions import BalanceFormatError, WalletConnectionError
from walletpanel.core.wallet.utils import truncate_address
from walletpanel.models.connection import (
    STATUS_ERROR,
    ConnectionSnapshot,
    DisplayAction,
    DisplayActionKind,
    DisplayState,
    show_balance,
    show_status,
)
from walletpanel.services.wallet.bridge import WalletBridge

log = structlog.get_logger(__name__)


class WalletPanelController:
    """Keeps one panel's display in line with a wallet bridge.

    Attributes:
        bridge: Wallet bridge the panel talks to.

    Example:
        controller = WalletPanelController(SimulatedWalletBridge())
        state = await controller.connect()
        print(state.balance)  # "1 SepoliaETH"
    """

    def __init__(self, bridge: WalletBridge, settings: Settings | None = None) -> None:
        self.bridge = bridge
        self._settings = settings or get_settings()
        self._state = DisplayState()

    @property
    def state(self) -> DisplayState:
        """What the panel currently shows."""
        return self._state

    def _apply(self, actions: list[DisplayAction]) -> DisplayState:
        self._state = apply_actions(self._state, actions)
        return self._state

    async def connect(self) -> DisplayState:
        """Connect through the bridge and sync the display."""
        try:
            await self.bridge.connect_wallet()
        except WalletConnectionError as e:
            log.warning("wallet_connect_failed", error=str(e))
            if self._state.shows_connected:
                return self._state
            return self._apply([show_status(STATUS_ERROR)])

        return await self.sync(await self.bridge.get_connection())

    async def disconnect(self) -> DisplayState:
        """Disconnect through the bridge and sync the display."""
        await self.bridge.disconnect_wallet()
        return await self.sync(await self.bridge.get_connection())

    async def sync(self, snapshot: ConnectionSnapshot) -> DisplayState:
        """Reconcile the display against a bridge snapshot.

        Runs at most one balance refresh, and only when the reconciler
        asks for it.
        """
        actions = reconcile(snapshot, self._state)
        if not actions:
            return self._state

        log.info(
            "wallet_display_reconciled",
            connected=snapshot.connected,
            wallet_address=truncate_address(snapshot.address),
            action_count=len(actions),
        )
        self._apply(actions)

        if any(a.kind is DisplayActionKind.REQUEST_BALANCE_REFRESH for a in actions):
            await self.refresh_balance()
        return self._state

    async def refresh_balance(self) -> DisplayState:
        """Fetch the balance and show it.

        Does nothing while the panel shows the wallet as disconnected, and
        drops the answer if the panel changed account or disconnected while
        the request was in flight.
        """
        if not self._state.shows_connected:
            log.debug("balance_refresh_skipped_disconnected")
            return self._state

        address = self._state.address
        response = await self.bridge.get_balance(address)

        # A disconnect or account switch may have landed while the request was in flight
        if not self._state.shows_connected or self._state.address != address:
            log.info(
                "balance_response_discarded",
                wallet_address=truncate_address(address),
                shows_connected=self._state.shows_connected,
            )
            return self._state

        if not response.ok:
            log.warning(
                "balance_request_failed",
                wallet_address=truncate_address(address),
                error=response.error,
            )
            return self._apply([show_balance(f"Error: {response.error or 'empty response'}")])

        try:
            text = format_balance(
                response.balance_hex or "",
                self._settings.token_decimals,
                self._settings.currency_symbol,
            )
        except BalanceFormatError as e:
            log.warning(
                "balance_parse_failed",
                wallet_address=truncate_address(address),
                kind=e.kind.value,
                balance_hex=e.hex_amount,
            )
            text = self._settings.balance_error_message

        log.info("balance_received", wallet_address=truncate_address(address), balance=text)
        return self._apply([show_balance(text)])
