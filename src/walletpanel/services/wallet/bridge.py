"""Wallet bridge interface.

The bridge is the external collaborator that owns the wallet connection
and the JSON-RPC transport (MetaMask or any other injected provider). The
panel only talks to it through this protocol.
"""

from typing import Protocol

from walletpanel.models.balance import BalanceResponse
from walletpanel.models.connection import ConnectionSnapshot


class WalletBridge(Protocol):
    """Operations the panel needs from a wallet bridge."""

    async def connect_wallet(self) -> None:
        """Ask the wallet to connect.

        Raises:
            WalletConnectionError: If the wallet refuses or is unavailable.
        """
        ...

    async def disconnect_wallet(self) -> None:
        """Drop the current wallet connection."""
        ...

    async def get_connection(self) -> ConnectionSnapshot:
        """Return the current connection state."""
        ...

    async def get_balance(self, address: str) -> BalanceResponse:
        """Call ``eth_getBalance(address, "latest")``.

        RPC failures are returned as ``BalanceResponse(error=...)``.
        """
        ...
