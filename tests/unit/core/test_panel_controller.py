"""Tests for WalletPanelController."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from walletpanel.config.settings import Settings
from walletpanel.core.connection.controller import WalletPanelController
from walletpanel.core.exceptions import WalletConnectionError
from walletpanel.models.balance import BalanceResponse
from walletpanel.models.connection import (
    STATUS_CONNECTED,
    STATUS_DISCONNECTED,
    STATUS_ERROR,
    ConnectionSnapshot,
    DisplayState,
)


@pytest.fixture
def controller(mock_wallet_bridge: MagicMock, settings: Settings) -> WalletPanelController:
    return WalletPanelController(mock_wallet_bridge, settings)


class TestConnect:
    """Tests for WalletPanelController.connect()."""

    @pytest.mark.asyncio
    async def test_connect_shows_wallet_and_balance(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        """
        Given: A bridge that connects and reports 1 ETH
        When: connect() is called
        Then: The panel shows the address, network and formatted balance
        """
        state = await controller.connect()

        assert state.status == STATUS_CONNECTED
        assert state.address == "0x71C7656EC7ab88b098defB751B7401B5f6d8976F"
        assert state.network == "Sepolia"
        assert state.balance == "1 SepoliaETH"
        assert state.controls_enabled is True
        mock_wallet_bridge.connect_wallet.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connect_fetches_balance_once(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        await controller.connect()

        mock_wallet_bridge.get_balance.assert_awaited_once_with(
            "0x71C7656EC7ab88b098defB751B7401B5f6d8976F"
        )

    @pytest.mark.asyncio
    async def test_second_connect_does_not_refetch(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        await controller.connect()
        await controller.connect()

        assert mock_wallet_bridge.get_balance.await_count == 1

    @pytest.mark.asyncio
    async def test_connect_error_shows_error_status(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        mock_wallet_bridge.connect_wallet = AsyncMock(
            side_effect=WalletConnectionError("User rejected the request")
        )

        state = await controller.connect()

        assert state.status == STATUS_ERROR
        assert state.controls_enabled is False
        mock_wallet_bridge.get_balance.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connect_error_keeps_existing_connection(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        before = await controller.connect()
        mock_wallet_bridge.connect_wallet = AsyncMock(
            side_effect=WalletConnectionError("Request already pending")
        )

        after = await controller.connect()

        assert after == before


class TestDisconnect:
    """Tests for WalletPanelController.disconnect()."""

    @pytest.mark.asyncio
    async def test_disconnect_clears_panel(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        await controller.connect()
        mock_wallet_bridge.get_connection = AsyncMock(
            return_value=ConnectionSnapshot.disconnected()
        )

        state = await controller.disconnect()

        assert state == DisplayState(status=STATUS_DISCONNECTED)
        mock_wallet_bridge.disconnect_wallet.assert_awaited_once()


class TestSync:
    """Tests for WalletPanelController.sync()."""

    @pytest.mark.asyncio
    async def test_unchanged_snapshot_is_noop(
        self,
        controller: WalletPanelController,
        mock_wallet_bridge: MagicMock,
        connected_snapshot: ConnectionSnapshot,
    ) -> None:
        first = await controller.sync(connected_snapshot)
        second = await controller.sync(connected_snapshot)

        assert second is first
        assert mock_wallet_bridge.get_balance.await_count == 1


class TestRefreshBalance:
    """Tests for WalletPanelController.refresh_balance()."""

    @pytest.mark.asyncio
    async def test_skipped_while_disconnected(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        state = await controller.refresh_balance()

        assert state == DisplayState()
        mock_wallet_bridge.get_balance.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_shows_updated_balance(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        await controller.connect()
        mock_wallet_bridge.get_balance = AsyncMock(
            return_value=BalanceResponse(balance_hex="0x6f05b59d3b20000")
        )

        state = await controller.refresh_balance()

        assert state.balance == "0.5 SepoliaETH"

    @pytest.mark.asyncio
    async def test_malformed_hex_shows_parse_error(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        mock_wallet_bridge.get_balance = AsyncMock(
            return_value=BalanceResponse(balance_hex="0xzz")
        )

        state = await controller.connect()

        assert state.balance == "Error parsing balance"
        assert state.status == STATUS_CONNECTED

    @pytest.mark.asyncio
    async def test_empty_hex_shows_zero(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        mock_wallet_bridge.get_balance = AsyncMock(return_value=BalanceResponse(balance_hex="0x"))

        state = await controller.connect()

        assert state.balance == "0 SepoliaETH"

    @pytest.mark.asyncio
    async def test_rpc_error_message_is_shown(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        mock_wallet_bridge.get_balance = AsyncMock(
            return_value=BalanceResponse(error="header not found")
        )

        state = await controller.connect()

        assert state.balance == "Error: header not found"

    @pytest.mark.asyncio
    async def test_uses_configured_symbol_and_decimals(self, mock_wallet_bridge: MagicMock) -> None:
        settings = Settings(_env_file=None, currency_symbol="USDC", token_decimals=6)  # type: ignore[call-arg]
        mock_wallet_bridge.get_balance = AsyncMock(
            return_value=BalanceResponse(balance_hex=hex(2_500_000))
        )
        controller = WalletPanelController(mock_wallet_bridge, settings)

        state = await controller.connect()

        assert state.balance == "2.5 USDC"

    @pytest.mark.asyncio
    async def test_uses_configured_error_message(self, mock_wallet_bridge: MagicMock) -> None:
        settings = Settings(_env_file=None, balance_error_message="Balance unavailable")  # type: ignore[call-arg]
        mock_wallet_bridge.get_balance = AsyncMock(
            return_value=BalanceResponse(balance_hex="not-hex")
        )
        controller = WalletPanelController(mock_wallet_bridge, settings)

        state = await controller.connect()

        assert state.balance == "Balance unavailable"

    @pytest.mark.asyncio
    async def test_disconnect_during_request_keeps_balance_cleared(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        """
        Given: A connected panel with a balance request in flight
        When: Disconnect completes before the bridge answers
        Then: The late answer is dropped and the balance label stays empty
        """
        await controller.connect()
        release = asyncio.Event()

        async def slow_balance(address: str) -> BalanceResponse:
            await release.wait()
            return BalanceResponse(balance_hex="0xde0b6b3a7640000")

        mock_wallet_bridge.get_balance = AsyncMock(side_effect=slow_balance)
        pending = asyncio.create_task(controller.refresh_balance())
        await asyncio.sleep(0)

        mock_wallet_bridge.get_connection = AsyncMock(
            return_value=ConnectionSnapshot.disconnected()
        )
        await controller.disconnect()
        release.set()
        state = await pending

        assert state == DisplayState(status=STATUS_DISCONNECTED)
        assert controller.state.balance == ""
        mock_wallet_bridge.get_balance.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_account_switch_during_request_drops_stale_balance(
        self, controller: WalletPanelController, mock_wallet_bridge: MagicMock
    ) -> None:
        """A late answer for the previous account never lands on the new one."""
        first = await controller.connect()
        other = ConnectionSnapshot(connected=True, address="0x" + "b" * 40, network_name="Sepolia")
        release = asyncio.Event()

        async def balance_for(address: str) -> BalanceResponse:
            if address == first.address:
                await release.wait()
                return BalanceResponse(balance_hex="0xde0b6b3a7640000")
            return BalanceResponse(balance_hex="0x6f05b59d3b20000")

        mock_wallet_bridge.get_balance = AsyncMock(side_effect=balance_for)
        pending = asyncio.create_task(controller.refresh_balance())
        await asyncio.sleep(0)

        await controller.sync(ConnectionSnapshot.disconnected())
        await controller.sync(other)
        release.set()
        state = await pending

        assert state.address == other.address
        assert state.balance == "0.5 SepoliaETH"
