"""SQLAlchemy implementation of CacheRepository."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from crypto_monitor.core.formatting import parse_decimal
from crypto_monitor.core.timezone import is_representable_epoch
from crypto_monitor.domain.models import (
    CacheRecord,
    TickerSnapshot,
    CACHE_KEY_LAST,
    CACHE_KEY_DATE,
)
from crypto_monitor.repositories.sqlalchemy.preference_repo import SqlAlchemyPreferenceRepository

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "crypto_cache"


class SqlAlchemyCacheRepository:
    """Last known ticker stored as two preference entries under one namespace."""

    def __init__(self, db: Session, namespace: str = DEFAULT_NAMESPACE):
        self._preferences = SqlAlchemyPreferenceRepository(db)
        self._namespace = namespace

    def save(self, snapshot: TickerSnapshot) -> None:
        """Overwrite the cached price and timestamp."""
        self._preferences.put_many(
            self._namespace,
            {
                CACHE_KEY_LAST: snapshot.last if snapshot.last is not None else "",
                CACHE_KEY_DATE: str(snapshot.date or 0),
            },
        )
        logger.debug(f"Cached ticker last={snapshot.last} date={snapshot.date}")

    def load(self) -> Optional[CacheRecord]:
        """
        Return the cached record.

        None when no price was saved, the price does not parse, or the
        timestamp is zero, missing or outside the datetime range.
        """
        last = self._preferences.get(self._namespace, CACHE_KEY_LAST)
        if last is None or parse_decimal(last) is None:
            return None

        date = self._parse_date(self._preferences.get(self._namespace, CACHE_KEY_DATE))
        if date is None or date <= 0 or not is_representable_epoch(date):
            return None

        return CacheRecord(last=last, date=date)

    @staticmethod
    def _parse_date(value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None
