"""Mercado Bitcoin public ticker provider."""

import logging
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from crypto_monitor.core.exceptions import TickerFetchError, TickerHttpError
from crypto_monitor.domain.models import TickerSnapshot

logger = logging.getLogger(__name__)


class TickerFields(BaseModel):
    """The `ticker` object of the response; only `last` and `date` are used."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    last: Optional[str] = None
    date: Optional[int] = None
    # Present in the payload, not displayed
    high: Optional[str] = None
    low: Optional[str] = None
    vol: Optional[str] = None
    buy: Optional[str] = None
    sell: Optional[str] = None
    open: Optional[str] = None


class TickerResponse(BaseModel):
    """Response body of GET /api/BTC/ticker/."""

    ticker: TickerFields


class MercadoBitcoinProvider:
    """
    Fetches the BTC/BRL ticker from the Mercado Bitcoin public API.

    One GET per call, no parameters and no authentication.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def fetch(self) -> TickerSnapshot:
        """Fetch and parse the current ticker."""
        logger.debug(f"GET {self._url}")
        try:
            response = self._session.get(self._url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning(f"Ticker request failed: {e}")
            raise TickerFetchError(e) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"Ticker request returned HTTP {response.status_code}")
            raise TickerHttpError(response.status_code)

        return self._parse(response)

    @staticmethod
    def _parse(response: requests.Response) -> TickerSnapshot:
        """Validate the body into a snapshot; absent fields stay None."""
        try:
            payload = TickerResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # requests' JSONDecodeError is a ValueError
            logger.warning(f"Malformed ticker body: {e}")
            raise TickerFetchError(e) from e
        return TickerSnapshot(last=payload.ticker.last, date=payload.ticker.date)

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
