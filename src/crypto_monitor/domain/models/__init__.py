"""Domain models package."""

from crypto_monitor.domain.models.ticker import TickerSnapshot
from crypto_monitor.domain.models.cache import CacheRecord, CACHE_KEY_LAST, CACHE_KEY_DATE

__all__ = [
    "TickerSnapshot",
    "CacheRecord",
    "CACHE_KEY_LAST",
    "CACHE_KEY_DATE",
]
