"""Ticker service: live fetch with cache fallback."""

import logging

from crypto_monitor.core.exceptions import TickerFetchError, TickerHttpError
from crypto_monitor.domain.views import FetchOutcome, Notification, TickerDisplay
from crypto_monitor.providers.ticker_provider import TickerProvider
from crypto_monitor.repositories.protocols import CacheRepository

logger = logging.getLogger(__name__)

HTTP_ERROR_MESSAGES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
}
CACHE_LOADED_MESSAGE = "Data loaded from cache"


def http_error_message(status_code: int) -> str:
    """Human-readable phrase for a non-2xx status."""
    return HTTP_ERROR_MESSAGES.get(status_code, f"Unknown error: {status_code}")


def failure_message(error: str) -> str:
    """Message for a fetch that raised instead of answering."""
    return f"Request failed: {error}"


class TickerService:
    """
    Service for the fetch-display-cache flow.

    `fetch_outcome` runs on a worker thread and only touches the provider.
    `resolve` runs on the UI thread and owns every cache read and write.
    """

    def __init__(self, provider: TickerProvider, cache_repo: CacheRepository):
        self._provider = provider
        self._cache_repo = cache_repo

    def fetch_outcome(self) -> FetchOutcome:
        """Call the provider once and capture the result. Never raises."""
        try:
            return FetchOutcome(snapshot=self._provider.fetch())
        except TickerHttpError as e:
            return FetchOutcome(status_code=e.status_code)
        except TickerFetchError as e:
            return FetchOutcome(error=e.message)
        except Exception as e:
            logger.exception("Unexpected error while fetching ticker")
            return FetchOutcome(error=str(e) or type(e).__name__)

    def resolve(self, outcome: FetchOutcome) -> TickerDisplay:
        """
        Turn a fetch outcome into what the screen should show.

        Success writes through to the cache. Any failure produces a
        notification followed by the cached record, if one exists.
        """
        if outcome.is_success:
            display = TickerDisplay.live(outcome.snapshot)
            try:
                self._cache_repo.save(outcome.snapshot)
            except Exception:
                # The live value is still shown; only the offline copy is stale
                logger.exception("Failed to cache ticker")
            return display

        if outcome.status_code is not None:
            message = http_error_message(outcome.status_code)
        else:
            message = failure_message(outcome.error or "")

        try:
            display = self.load_cached()
        except Exception:
            # The failure message is still shown without a fallback
            logger.exception("Failed to read cached ticker")
            display = TickerDisplay()
        display.notifications.insert(0, Notification(message, long=True))
        return display

    def load_cached(self) -> TickerDisplay:
        """Display for the cached record, or an empty display on a cache miss."""
        record = self._cache_repo.load()
        if record is None:
            logger.info("Ticker fetch failed and no cached value is available")
            return TickerDisplay()

        logger.info(f"Falling back to cached ticker from epoch {record.date}")
        display = TickerDisplay.from_cache(record)
        display.notifications.append(Notification(CACHE_LOADED_MESSAGE, long=False))
        return display
