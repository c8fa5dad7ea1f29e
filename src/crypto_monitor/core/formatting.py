"""Text formatting for ticker values."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext
from typing import Optional

import pytz

from crypto_monitor.core.timezone import from_epoch_seconds

CURRENCY_SYMBOL = "R$"
DATE_PATTERN = "%d/%m/%Y %H:%M:%S"

# Prices with more integer digits than this are treated as malformed
MAX_INTEGER_DIGITS = 30

_CENTS = Decimal("0.01")


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    """
    Parse a price string.

    Returns None when absent, not a finite number, or too large to display.
    """
    if value is None:
        return None
    try:
        number = Decimal(value.strip())
    except (InvalidOperation, AttributeError):
        return None
    if not number.is_finite():
        return None
    if number and number.adjusted() >= MAX_INTEGER_DIGITS:
        return None
    return number


def format_currency(value: Decimal) -> str:
    """
    Format a value as Brazilian real, e.g. R$ 65.000,50.

    Rounds half-even to two decimals.
    """
    with localcontext() as ctx:
        # Room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        amount = value.quantize(_CENTS, rounding=ROUND_HALF_EVEN)
    sign = "-" if amount < 0 else ""
    # Swap separators from 1,234.56 to 1.234,56
    digits = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {digits}"


def format_timestamp(seconds: int, tz: Optional[pytz.BaseTzInfo] = None) -> str:
    """Format epoch seconds as dd/MM/yyyy HH:mm:ss in the display timezone."""
    return from_epoch_seconds(seconds, tz).strftime(DATE_PATTERN)


def format_timestamp_or_none(seconds: Optional[int], tz: Optional[pytz.BaseTzInfo] = None) -> Optional[str]:
    """Like format_timestamp, but None for a missing or unrepresentable epoch."""
    if seconds is None:
        return None
    try:
        return format_timestamp(seconds, tz)
    except (OverflowError, OSError, ValueError):
        return None
