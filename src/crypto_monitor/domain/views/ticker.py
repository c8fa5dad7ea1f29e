"""View models for the ticker screen."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from crypto_monitor.core.formatting import (
    format_currency,
    format_timestamp,
    format_timestamp_or_none,
)
from crypto_monitor.domain.models import CacheRecord, TickerSnapshot

CRYPTO_LABEL = "Bitcoin (BTC)"
OFFLINE_CRYPTO_LABEL = "Bitcoin (BTC) - Offline"
CACHE_DATE_SUFFIX = " (cache)"


class ControllerState(str, Enum):
    """Observable states of the display controller."""

    IDLE = "IDLE"
    LOADING = "LOADING"


@dataclass(frozen=True)
class Notification:
    """Transient message shown to the user."""

    message: str
    long: bool = True


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one background fetch: a snapshot, a status code, or an error text."""

    snapshot: Optional[TickerSnapshot] = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.snapshot is not None


@dataclass
class TickerDisplay:
    """
    Render instruction for the ticker screen.

    A region whose text is None keeps whatever it currently shows.
    """

    crypto_label: Optional[str] = None
    price_text: Optional[str] = None
    date_text: Optional[str] = None
    offline: bool = False
    notifications: list[Notification] = field(default_factory=list)

    @classmethod
    def live(cls, snapshot: TickerSnapshot) -> "TickerDisplay":
        """Build the display for a freshly fetched snapshot."""
        price = snapshot.last_price
        return cls(
            crypto_label=CRYPTO_LABEL,
            price_text=format_currency(price) if price is not None else None,
            date_text=format_timestamp_or_none(snapshot.date),
        )

    @classmethod
    def from_cache(cls, record: CacheRecord) -> "TickerDisplay":
        """Build the display for a cached record, always marked offline."""
        return cls(
            crypto_label=OFFLINE_CRYPTO_LABEL,
            price_text=format_currency(record.last_price),
            date_text=format_timestamp(record.date) + CACHE_DATE_SUFFIX,
            offline=True,
        )

    @property
    def updates_regions(self) -> bool:
        """Whether any of the label/price/date regions change."""
        return any(
            text is not None
            for text in (self.crypto_label, self.price_text, self.date_text)
        )
