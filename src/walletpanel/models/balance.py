"""Balance models.

TokenAmount is the decimal result of scaling a raw wei balance, and
BalanceResponse is what a wallet bridge returns for eth_getBalance.
"""

from decimal import ROUND_DOWN, Decimal, localcontext

from pydantic import BaseModel, ConfigDict, Field

DISPLAY_FRACTION_DIGITS = 6


def format_token_amount(value: Decimal) -> str:
    """Render a decimal amount with at most 6 fractional digits.

    Digits beyond the sixth are truncated, trailing zeros and a trailing
    decimal point are stripped, and zero renders as ``"0"``.

    Example:
        >>> format_token_amount(Decimal("0.500000"))
        '0.5'
    """
    if value < 0:
        raise ValueError(f"Token amount cannot be negative: {value}")

    quantum = Decimal(1).scaleb(-DISPLAY_FRACTION_DIGITS)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + DISPLAY_FRACTION_DIGITS + 2)
        truncated = value.copy_abs().quantize(quantum, rounding=ROUND_DOWN)

    text = f"{truncated:f}".rstrip("0").rstrip(".")
    return text or "0"


class TokenAmount(BaseModel):
    """A non-negative token amount with its unit symbol.

    Attributes:
        value: Amount in whole token units.
        symbol: Unit symbol, e.g. ``SepoliaETH``.
    """

    model_config = ConfigDict(frozen=True)

    value: Decimal = Field(ge=0, description="Amount in whole token units")
    symbol: str = Field(description="Unit symbol")

    def display(self) -> str:
        """Return ``"<amount> <symbol>"`` for UI labels."""
        return f"{format_token_amount(self.value)} {self.symbol}"


class BalanceResponse(BaseModel):
    """Answer to an eth_getBalance request.

    Exactly one of ``balance_hex`` and ``error`` is expected to be set.
    The error path is a plain message string.

    Example:
        BalanceResponse(balance_hex="0xde0b6b3a7640000")
        BalanceResponse(error="execution reverted")
    """

    model_config = ConfigDict(frozen=True)

    balance_hex: str | None = Field(default=None, description="Raw hex balance in wei")
    error: str | None = Field(default=None, description="Error message from the bridge")

    @property
    def ok(self) -> bool:
        """True when the bridge returned a balance."""
        return self.error is None and self.balance_hex is not None
