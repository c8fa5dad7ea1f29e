"""Cache repository protocol for the last known ticker."""

from typing import Protocol, Optional

from crypto_monitor.domain.models import CacheRecord, TickerSnapshot


class CacheRepository(Protocol):
    """Interface for persisting and reading the last known ticker."""

    def save(self, snapshot: TickerSnapshot) -> None:
        """Overwrite the cached price and timestamp."""
        ...

    def load(self) -> Optional[CacheRecord]:
        """Return the cached record, or None when nothing usable is stored."""
        ...
