"""View models for service outputs."""

from crypto_monitor.domain.views.ticker import (
    ControllerState,
    Notification,
    FetchOutcome,
    TickerDisplay,
    CRYPTO_LABEL,
    OFFLINE_CRYPTO_LABEL,
    CACHE_DATE_SUFFIX,
)

__all__ = [
    "ControllerState",
    "Notification",
    "FetchOutcome",
    "TickerDisplay",
    "CRYPTO_LABEL",
    "OFFLINE_CRYPTO_LABEL",
    "CACHE_DATE_SUFFIX",
]
