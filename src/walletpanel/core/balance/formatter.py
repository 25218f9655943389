"""Hex wei balance formatting.

Wallet bridges answer eth_getBalance with a hex string of wei. This module
turns that string into a display label such as ``"0.5 SepoliaETH"``:

- Optional ``0x``/``0X`` prefix and surrounding whitespace are ignored
- Parsing uses Python's arbitrary-precision int (balances exceed 64 bits)
- Scaling by ``10**decimals`` is exact integer arithmetic, truncated to
  6 fractional digits
"""

import string
from decimal import Decimal

import structlog

from walletpanel.core.exceptions import BalanceFormatError, FormatErrorKind
from walletpanel.models.balance import DISPLAY_FRACTION_DIGITS, TokenAmount

log = structlog.get_logger(__name__)

WEI_DECIMALS = 18
HEX_DIGITS = frozenset(string.hexdigits)


def strip_hex_prefix(hex_amount: str) -> str:
    """Remove surrounding whitespace and an optional 0x/0X prefix.

    Example:
        >>> strip_hex_prefix("0xde0b6b3a7640000")
        'de0b6b3a7640000'
    """
    digits = hex_amount.strip()
    if digits[:2] in ("0x", "0X"):
        return digits[2:]
    return digits


def parse_hex_amount(hex_amount: str) -> int:
    """Parse a hex balance string into an unsigned integer.

    Args:
        hex_amount: Hex string, optionally 0x-prefixed.

    Returns:
        The parsed non-negative integer.

    Raises:
        BalanceFormatError: EMPTY when no digits remain after stripping
            the prefix, INVALID_HEX when any character is not a hex digit.
    """
    digits = strip_hex_prefix(hex_amount)
    if not digits:
        raise BalanceFormatError(FormatErrorKind.EMPTY, hex_amount)

    # int(..., 16) alone would also accept signs and underscores
    if not HEX_DIGITS.issuperset(digits):
        raise BalanceFormatError(FormatErrorKind.INVALID_HEX, hex_amount)

    return int(digits, 16)


def wei_to_token_amount(wei: int, decimals: int = WEI_DECIMALS, symbol: str = "ETH") -> TokenAmount:
    """Scale a raw integer amount down by ``10**decimals``.

    The fractional part keeps 6 digits, rounded toward zero.

    Raises:
        ValueError: If ``wei`` or ``decimals`` is negative.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    if wei < 0:
        raise ValueError(f"wei must be >= 0, got {wei}")

    whole, remainder = divmod(wei, 10**decimals)
    fraction = remainder * 10**DISPLAY_FRACTION_DIGITS // 10**decimals

    # Built from a string so the Decimal is exact regardless of context precision
    value = Decimal(f"{whole}.{fraction:0{DISPLAY_FRACTION_DIGITS}d}")
    return TokenAmount(value=value, symbol=symbol)


def format_balance(hex_amount: str, decimals: int = WEI_DECIMALS, symbol: str = "ETH") -> str:
    """Format a hex wei balance for display.

    An empty balance (``""`` or ``"0x"``) is shown as zero.

    Args:
        hex_amount: Raw balance from eth_getBalance.
        decimals: Token decimals (18 for ETH).
        symbol: Unit symbol appended after the amount.

    Returns:
        Display string, e.g. ``"1 ETH"`` or ``"0.5 SepoliaETH"``.

    Raises:
        BalanceFormatError: INVALID_HEX for malformed input.
        ValueError: If ``decimals`` is negative.

    Example:
        >>> format_balance("0x6f05b59d3b20000", 18, "ETH")
        '0.5 ETH'
    """
    try:
        wei = parse_hex_amount(hex_amount)
    except BalanceFormatError as e:
        if e.kind is not FormatErrorKind.EMPTY:
            raise
        log.debug("balance_empty_treated_as_zero", hex_amount=hex_amount)
        wei = 0

    return wei_to_token_amount(wei, decimals, symbol).display()
