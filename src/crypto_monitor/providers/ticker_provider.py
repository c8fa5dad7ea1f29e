"""Ticker provider protocol."""

from typing import Protocol

from crypto_monitor.domain.models import TickerSnapshot


class TickerProvider(Protocol):
    """
    Protocol for price ticker providers.

    Implementations issue a single request per call and never retry.
    """

    def fetch(self) -> TickerSnapshot:
        """
        Fetch the current ticker.

        Raises TickerHttpError for a non-2xx status and TickerFetchError for
        network, timeout or parse failures.
        """
        ...
