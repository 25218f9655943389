"""Wallet utility functions.

Shared utilities for wallet operations used across UI and core modules.
"""


def truncate_address(address: str) -> str:
    """Truncate wallet address for logs: 0x71C7...976F.

    Args:
        address: Full wallet address.

    Returns:
        Truncated address (first 6 + last 4 chars) when longer than 12 chars.

    Example:
        >>> truncate_address("0x71C7656EC7ab88b098defB751B7401B5f6d8976F")
        '0x71C7...976F'
    """
    if len(address) > 12:
        return f"{address[:6]}...{address[-4:]}"
    return address
