"""WalletPanel exception hierarchy.

This module defines the base exception class and specialized exceptions
for the error categories the panel distinguishes.
"""

from enum import Enum


class WalletPanelError(Exception):
    """Base exception for all WalletPanel errors.

    All custom exceptions in WalletPanel should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class FormatErrorKind(str, Enum):
    """Why a hex balance could not be formatted."""

    EMPTY = "empty"  # Nothing left after stripping the 0x prefix
    INVALID_HEX = "invalid_hex"  # Non hex-digit characters present


class BalanceFormatError(WalletPanelError):
    """Raised when a hex balance string cannot be parsed.

    Attributes:
        kind: FormatErrorKind describing the failure.
        hex_amount: The raw input that failed to parse.

    Example:
        raise BalanceFormatError(FormatErrorKind.INVALID_HEX, "0xzz")
    """

    def __init__(self, kind: FormatErrorKind, hex_amount: str) -> None:
        self.kind = kind
        self.hex_amount = hex_amount
        super().__init__(f"{kind.value}: {hex_amount!r}")


class WalletConnectionError(WalletPanelError):
    """Raised when a wallet bridge fails to connect or answer.

    Attributes:
        wallet_address: The wallet address involved (if available).

    Example:
        raise WalletConnectionError("User rejected the request", wallet_address="0x71C7...")
    """

    def __init__(self, message: str, wallet_address: str | None = None) -> None:
        super().__init__(message)
        self.wallet_address = wallet_address
