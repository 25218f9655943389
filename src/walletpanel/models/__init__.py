"""Pydantic models shared across the panel."""

from walletpanel.models.balance import BalanceResponse, TokenAmount, format_token_amount
from walletpanel.models.connection import (
    STATUS_CONNECTED,
    STATUS_DISCONNECTED,
    STATUS_ERROR,
    ConnectionSnapshot,
    DisplayAction,
    DisplayActionKind,
    DisplayState,
)

__all__ = [
    "STATUS_CONNECTED",
    "STATUS_DISCONNECTED",
    "STATUS_ERROR",
    "BalanceResponse",
    "ConnectionSnapshot",
    "DisplayAction",
    "DisplayActionKind",
    "DisplayState",
    "TokenAmount",
    "format_token_amount",
]
