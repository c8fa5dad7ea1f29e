"""Timezone utilities for rendering ticker timestamps."""

from datetime import datetime
from typing import Optional

import pytz

from crypto_monitor.config.settings import get_settings

UTC = pytz.utc


def display_timezone() -> pytz.BaseTzInfo:
    """Return the configured display timezone."""
    return pytz.timezone(get_settings().display_timezone)


def from_epoch_seconds(seconds: int, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Convert Unix epoch seconds to an aware datetime.

    Uses the configured display timezone unless one is given.
    """
    dt = datetime.fromtimestamp(seconds, UTC)
    return dt.astimezone(tz or display_timezone())


def is_representable_epoch(seconds: int) -> bool:
    """Whether epoch seconds convert to a datetime in the display timezone."""
    try:
        from_epoch_seconds(seconds)
    except (OverflowError, OSError, ValueError):
        return False
    return True
