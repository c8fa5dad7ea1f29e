"""
Pytest configuration and fixtures for crypto monitor tests.

This module provides:
- In-memory SQLite database fixtures
- Cache and preference repository fixtures
- Deterministic, failing and HTTP-error ticker providers
- A recording screen and manual dispatcher for driving the controller
  without a display
- Fake `requests` sessions for the Mercado Bitcoin provider
"""

from concurrent.futures import Future
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
import pytz
import requests
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from crypto_monitor.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from crypto_monitor.repositories.sqlalchemy import orm_models  # noqa: F401
from crypto_monitor.repositories.sqlalchemy import (
    SqlAlchemyCacheRepository,
    SqlAlchemyPreferenceRepository,
)
from crypto_monitor.core.exceptions import TickerFetchError, TickerHttpError
from crypto_monitor.domain.models import TickerSnapshot
from crypto_monitor.domain.views import TickerDisplay
from crypto_monitor.services import TickerService
from crypto_monitor.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def utc_settings(tmp_path):
    """Render timestamps in UTC and keep data out of the home directory."""
    set_settings(Settings(data_dir=tmp_path / "data", display_timezone="UTC"))
    yield
    reset_settings()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def preference_repo(test_session) -> SqlAlchemyPreferenceRepository:
    """Provide test PreferenceRepository."""
    return SqlAlchemyPreferenceRepository(test_session)


@pytest.fixture
def cache_repo(test_session) -> SqlAlchemyCacheRepository:
    """Provide test CacheRepository."""
    return SqlAlchemyCacheRepository(test_session)


# =============================================================================
# TICKER PROVIDER FIXTURES
# =============================================================================

# 2023-11-14 22:13:20 UTC
FIXED_EPOCH = 1700000000


class DeterministicTickerProvider:
    """Ticker provider returning a fixed snapshot."""

    def __init__(self, last: Optional[str] = "65000.50", date: Optional[int] = FIXED_EPOCH):
        self.snapshot = TickerSnapshot(last=last, date=date)
        self.calls = 0

    def fetch(self) -> TickerSnapshot:
        self.calls += 1
        return self.snapshot


class FailingTickerProvider:
    """Ticker provider that always fails as if offline."""

    def __init__(self, message: str = "Network unavailable"):
        self.message = message

    def fetch(self) -> TickerSnapshot:
        raise TickerFetchError(ConnectionError(self.message))


class HttpErrorTickerProvider:
    """Ticker provider that always answers with a given status."""

    def __init__(self, status_code: int):
        self.status_code = status_code

    def fetch(self) -> TickerSnapshot:
        raise TickerHttpError(self.status_code)


class SequenceTickerProvider:
    """Ticker provider replaying a list of snapshots or exceptions."""

    def __init__(self, results: list):
        self._results = list(results)

    def fetch(self) -> TickerSnapshot:
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def deterministic_provider() -> DeterministicTickerProvider:
    return DeterministicTickerProvider()


@pytest.fixture
def failing_provider() -> FailingTickerProvider:
    return FailingTickerProvider()


@pytest.fixture
def ticker_service(deterministic_provider, cache_repo) -> TickerService:
    """Provide test TickerService backed by the deterministic provider."""
    return TickerService(provider=deterministic_provider, cache_repo=cache_repo)


# =============================================================================
# HTTP FIXTURES
# =============================================================================


def fake_response(status_code: int = 200, body=None, json_error: Optional[Exception] = None):
    """Build a MagicMock standing in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def fake_session() -> MagicMock:
    """MagicMock standing in for requests.Session."""
    return MagicMock(spec=requests.Session)


# =============================================================================
# UI FIXTURES
# =============================================================================


class RecordingScreen:
    """TickerScreen that records every call and applies displays like the real window."""

    def __init__(self):
        self.events: list[str] = []
        self.crypto_label = ""
        self.price = "--"
        self.date = ""
        self.notifications: list[str] = []
        self.loading = False

    def show_loading(self) -> None:
        self.events.append("show_loading")
        self.loading = True

    def hide_loading(self) -> None:
        self.events.append("hide_loading")
        self.loading = False

    def render(self, display: TickerDisplay) -> None:
        self.events.append("render")
        if display.crypto_label is not None:
            self.crypto_label = display.crypto_label
        if display.price_text is not None:
            self.price = display.price_text
        if display.date_text is not None:
            self.date = display.date_text
        self.notifications.extend(n.message for n in display.notifications)


class ManualDispatcher:
    """Dispatcher that holds callbacks until the test drains them."""

    def __init__(self):
        self.pending: list[Callable[[], None]] = []

    def post(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def drain(self) -> int:
        count = 0
        while self.pending:
            self.pending.pop(0)()
            count += 1
        return count


class InlineExecutor:
    """Executor running submitted work immediately on the calling thread."""

    def submit(self, fn, *args, **kwargs) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        pass


@pytest.fixture
def screen() -> RecordingScreen:
    return RecordingScreen()


@pytest.fixture
def dispatcher() -> ManualDispatcher:
    return ManualDispatcher()


@pytest.fixture
def inline_executor() -> InlineExecutor:
    return InlineExecutor()


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_epoch(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """Epoch seconds for a UTC wall-clock time."""
    from datetime import datetime

    return int(pytz.utc.localize(datetime(year, month, day, hour, minute, second)).timestamp())
