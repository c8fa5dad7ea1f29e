"""Repository protocol definitions (interfaces)."""

from crypto_monitor.repositories.protocols.cache_repo import CacheRepository
from crypto_monitor.repositories.protocols.preference_repo import PreferenceRepository

__all__ = [
    "CacheRepository",
    "PreferenceRepository",
]
