"""
Integration tests for SQLAlchemy repositories with SQLite.

Tests cover:
- Preference repository reads and overwrites
- Cache repository save/load round trip
- Cache validity rules (missing price, zero timestamp)
- Data persistence across sessions and engines
"""

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from crypto_monitor.repositories.sqlalchemy import (
    Base,
    SqlAlchemyCacheRepository,
    SqlAlchemyPreferenceRepository,
)
from crypto_monitor.domain.models import (
    CacheRecord,
    TickerSnapshot,
    CACHE_KEY_LAST,
    CACHE_KEY_DATE,
)

from tests.conftest import FIXED_EPOCH


# =============================================================================
# PREFERENCE REPOSITORY TESTS
# =============================================================================


class TestPreferenceRepository:
    """Tests for SqlAlchemyPreferenceRepository."""

    def test_missing_key_returns_none(self, preference_repo: SqlAlchemyPreferenceRepository):
        assert preference_repo.get("crypto_cache", "btc_last") is None

    def test_put_then_get(self, preference_repo: SqlAlchemyPreferenceRepository):
        preference_repo.put_many("crypto_cache", {"a": "1", "b": "2"})

        assert preference_repo.get("crypto_cache", "a") == "1"
        assert preference_repo.get("crypto_cache", "b") == "2"

    def test_put_overwrites(self, preference_repo: SqlAlchemyPreferenceRepository):
        preference_repo.put_many("crypto_cache", {"a": "1"})
        preference_repo.put_many("crypto_cache", {"a": "2"})

        assert preference_repo.get("crypto_cache", "a") == "2"

    def test_namespaces_are_isolated(self, preference_repo: SqlAlchemyPreferenceRepository):
        preference_repo.put_many("one", {"a": "1"})

        assert preference_repo.get("two", "a") is None


# =============================================================================
# CACHE REPOSITORY TESTS
# =============================================================================


class TestCacheRepository:
    """Tests for SqlAlchemyCacheRepository."""

    def test_load_empty_returns_none(self, cache_repo: SqlAlchemyCacheRepository):
        assert cache_repo.load() is None

    def test_save_then_load_round_trips(self, cache_repo: SqlAlchemyCacheRepository):
        """
        GIVEN snapshot last="65000.50", date=1700000000
        WHEN saved and loaded
        THEN the same two values come back
        """
        cache_repo.save(TickerSnapshot(last="65000.50", date=FIXED_EPOCH))

        record = cache_repo.load()

        assert record == CacheRecord(last="65000.50", date=FIXED_EPOCH)
        assert record.last_price == Decimal("65000.50")

    def test_save_overwrites(self, cache_repo: SqlAlchemyCacheRepository):
        cache_repo.save(TickerSnapshot(last="1.00", date=FIXED_EPOCH))
        cache_repo.save(TickerSnapshot(last="2.00", date=FIXED_EPOCH + 10))

        assert cache_repo.load() == CacheRecord(last="2.00", date=FIXED_EPOCH + 10)

    def test_uses_fixed_keys(self, test_session, preference_repo):
        SqlAlchemyCacheRepository(test_session).save(
            TickerSnapshot(last="65000.50", date=FIXED_EPOCH)
        )

        assert preference_repo.get("crypto_cache", CACHE_KEY_LAST) == "65000.50"
        assert preference_repo.get("crypto_cache", CACHE_KEY_DATE) == str(FIXED_EPOCH)

    @pytest.mark.parametrize(
        "snapshot",
        [
            TickerSnapshot(last="65000.50", date=None),
            TickerSnapshot(last="65000.50", date=0),
            TickerSnapshot(last=None, date=FIXED_EPOCH),
            TickerSnapshot(last="not-a-number", date=FIXED_EPOCH),
            TickerSnapshot(last="1e30", date=FIXED_EPOCH),
            TickerSnapshot(last="65000.50", date=10**15),
        ],
    )
    def test_unusable_record_loads_as_none(self, cache_repo, snapshot):
        cache_repo.save(snapshot)

        assert cache_repo.load() is None

    def test_non_numeric_date_loads_as_none(self, cache_repo, preference_repo):
        preference_repo.put_many("crypto_cache", {CACHE_KEY_LAST: "1.00", CACHE_KEY_DATE: "yesterday"})

        assert cache_repo.load() is None

    def test_price_without_date_loads_as_none(self, cache_repo, preference_repo):
        preference_repo.put_many("crypto_cache", {CACHE_KEY_LAST: "1.00"})

        assert cache_repo.load() is None

    def test_custom_namespace(self, test_session):
        first = SqlAlchemyCacheRepository(test_session, namespace="first")
        second = SqlAlchemyCacheRepository(test_session, namespace="second")

        first.save(TickerSnapshot(last="1.00", date=FIXED_EPOCH))

        assert first.load() is not None
        assert second.load() is None


# =============================================================================
# PERSISTENCE TESTS
# =============================================================================


class TestSessionPersistence:
    """Tests that the cache survives a restart."""

    def test_cache_persists_across_engines(self, tmp_path):
        """
        GIVEN a ticker saved through one engine
        WHEN a new engine opens the same database file
        THEN the ticker loads unchanged
        """
        url = f"sqlite:///{tmp_path / 'crypto_monitor.db'}"

        engine = create_engine(url)
        Base.metadata.create_all(bind=engine)
        session = sessionmaker(bind=engine)()
        SqlAlchemyCacheRepository(session).save(TickerSnapshot(last="65000.50", date=FIXED_EPOCH))
        session.close()
        engine.dispose()

        engine = create_engine(url)
        session = sessionmaker(bind=engine)()
        try:
            record = SqlAlchemyCacheRepository(session).load()
        finally:
            session.close()
            engine.dispose()

        assert record == CacheRecord(last="65000.50", date=FIXED_EPOCH)
