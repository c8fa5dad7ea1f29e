"""Persisted form of the last known ticker."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from crypto_monitor.core.formatting import parse_decimal

CACHE_KEY_LAST = "btc_last"
CACHE_KEY_DATE = "btc_date"


@dataclass(frozen=True)
class CacheRecord:
    """
    Last successfully fetched ticker, read back only when a live fetch fails.

    IMPORTANT: Only construct through the cache repository, which guarantees
    a parseable price and a positive timestamp.
    """

    last: str
    date: int

    @property
    def last_price(self) -> Optional[Decimal]:
        """Parsed price; never None for a record returned by the repository."""
        return parse_decimal(self.last)
