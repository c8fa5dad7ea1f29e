"""Core utilities and shared functionality."""

from crypto_monitor.core.timezone import (
    display_timezone,
    from_epoch_seconds,
    is_representable_epoch,
    UTC,
)
from crypto_monitor.core.formatting import (
    parse_decimal,
    format_currency,
    format_timestamp,
    format_timestamp_or_none,
    DATE_PATTERN,
)
from crypto_monitor.core.exceptions import (
    AppError,
    TickerError,
    TickerHttpError,
    TickerFetchError,
)

__all__ = [
    "display_timezone",
    "from_epoch_seconds",
    "is_representable_epoch",
    "UTC",
    "parse_decimal",
    "format_currency",
    "format_timestamp",
    "format_timestamp_or_none",
    "DATE_PATTERN",
    "AppError",
    "TickerError",
    "TickerHttpError",
    "TickerFetchError",
]
