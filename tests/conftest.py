"""Shared pytest fixtures for WalletPanel tests.

This module provides fixtures for:
- Test environment variables and settings cache reset
- Wallet bridge doubles
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(snapshot_factory):
        snapshot = snapshot_factory()
        assert snapshot.connected
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.factories.connection import ConnectionSnapshotFactory, DisplayStateFactory
from walletpanel.config.settings import Settings, get_settings
from walletpanel.models.balance import BalanceResponse
from walletpanel.models.connection import ConnectionSnapshot

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ["CURRENCY_SYMBOL"] = "SepoliaETH"
    os.environ["TOKEN_DECIMALS"] = "18"

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, ignoring any .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def snapshot_factory() -> type[ConnectionSnapshotFactory]:
    """Provide connection snapshot factory."""
    return ConnectionSnapshotFactory


@pytest.fixture
def display_state_factory() -> type[DisplayStateFactory]:
    """Provide display state factory."""
    return DisplayStateFactory


# =============================================================================
# Mock Wallet Bridge
# =============================================================================


@pytest.fixture
def connected_snapshot() -> ConnectionSnapshot:
    """A connected snapshot with a fixed address."""
    return ConnectionSnapshot(
        connected=True,
        address="0x71C7656EC7ab88b098defB751B7401B5f6d8976F",
        network_name="Sepolia",
    )


@pytest.fixture
def mock_wallet_bridge(connected_snapshot: ConnectionSnapshot) -> MagicMock:
    """Mock wallet bridge.

    Connects successfully and reports 1 ETH (0xde0b6b3a7640000 wei).
    """
    mock = MagicMock()
    mock.connect_wallet = AsyncMock(return_value=None)
    mock.disconnect_wallet = AsyncMock(return_value=None)
    mock.get_connection = AsyncMock(return_value=connected_snapshot)
    mock.get_balance = AsyncMock(
        return_value=BalanceResponse(balance_hex="0xde0b6b3a7640000")
    )
    return mock
