"""Balance formatting module."""

from walletpanel.core.balance.formatter import (
    WEI_DECIMALS,
    format_balance,
    parse_hex_amount,
    strip_hex_prefix,
    wei_to_token_amount,
)

__all__ = [
    "WEI_DECIMALS",
    "format_balance",
    "parse_hex_amount",
    "strip_hex_prefix",
    "wei_to_token_amount",
]
