"""Domain layer - ticker models and screen view models."""

from crypto_monitor.domain.models import (
    TickerSnapshot,
    CacheRecord,
)

__all__ = [
    "TickerSnapshot",
    "CacheRecord",
]
