"""SQLAlchemy repository implementations."""

from crypto_monitor.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_session,
    init_db,
    reset_database,
    Base,
)
from crypto_monitor.repositories.sqlalchemy.preference_repo import SqlAlchemyPreferenceRepository
from crypto_monitor.repositories.sqlalchemy.cache_repo import SqlAlchemyCacheRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyPreferenceRepository",
    "SqlAlchemyCacheRepository",
]
