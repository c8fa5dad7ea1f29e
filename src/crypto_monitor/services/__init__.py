"""Service layer - business logic orchestration."""

from crypto_monitor.services.ticker_service import (
    TickerService,
    http_error_message,
    failure_message,
    HTTP_ERROR_MESSAGES,
    CACHE_LOADED_MESSAGE,
)

__all__ = [
    "TickerService",
    "http_error_message",
    "failure_message",
    "HTTP_ERROR_MESSAGES",
    "CACHE_LOADED_MESSAGE",
]
