"""Ticker providers module."""

from crypto_monitor.providers.ticker_provider import TickerProvider
from crypto_monitor.providers.mercado_bitcoin import (
    MercadoBitcoinProvider,
    TickerResponse,
    TickerFields,
)

__all__ = [
    "TickerProvider",
    "MercadoBitcoinProvider",
    "TickerResponse",
    "TickerFields",
]
