"""Application context for in-process service management.

Wires settings, database, ticker provider and cache together for the
desktop UI.
"""

from pathlib import Path
from typing import Optional

from crypto_monitor.config.settings import Settings, set_settings, get_settings
from crypto_monitor.repositories.sqlalchemy.database import (
    init_db,
    reset_database,
    get_session,
)
from crypto_monitor.repositories.sqlalchemy import SqlAlchemyCacheRepository
from crypto_monitor.providers import MercadoBitcoinProvider
from crypto_monitor.services import TickerService


class AppContext:
    """
    Application context providing access to the ticker service.

    This is the main entry point for the desktop UI to reach the provider
    and the persisted cache.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize application context.

        Args:
            data_dir: Optional data directory. If not provided, uses default.
        """
        self._data_dir = data_dir
        self._session = None
        self._initialized = False

        # Lazily created
        self._provider: Optional[MercadoBitcoinProvider] = None
        self._ticker_service: Optional[TickerService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        # Update global settings, keeping env overrides
        settings = Settings(data_dir=self._data_dir) if self._data_dir else Settings()
        set_settings(settings)

        # Reset and reinitialize database
        self.close()
        reset_database()
        init_db()

        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _get_session(self):
        """Get or create database session."""
        if self._session is None:
            self._session = get_session()
        return self._session

    def _get_cache_repo(self) -> SqlAlchemyCacheRepository:
        return SqlAlchemyCacheRepository(
            self._get_session(),
            namespace=get_settings().cache_namespace,
        )

    @property
    def provider(self) -> MercadoBitcoinProvider:
        """Get the ticker provider."""
        if self._provider is None:
            settings = get_settings()
            self._provider = MercadoBitcoinProvider(
                url=settings.ticker_url,
                timeout_seconds=settings.request_timeout_seconds,
            )
        return self._provider

    @property
    def ticker(self) -> TickerService:
        """Get the TickerService instance."""
        if self._ticker_service is None:
            self._ticker_service = TickerService(
                provider=self.provider,
                cache_repo=self._get_cache_repo(),
            )
        return self._ticker_service

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None
        if self._provider:
            self._provider.close()
            self._provider = None
        self._ticker_service = None


# Global application context (singleton for desktop app)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: AppContext) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
