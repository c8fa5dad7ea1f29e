"""Ticker snapshot returned by the price provider."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from crypto_monitor.core.formatting import parse_decimal


@dataclass(frozen=True)
class TickerSnapshot:
    """
    Last traded price and the time it was recorded.

    Either field may be missing from the remote payload; rendering treats a
    missing field as "leave that region alone".
    """

    last: Optional[str] = None
    date: Optional[int] = None

    @property
    def last_price(self) -> Optional[Decimal]:
        """Parsed price, or None when `last` is absent or malformed."""
        return parse_decimal(self.last)
