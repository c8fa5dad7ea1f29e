"""Repository layer - data access abstractions and implementations."""

from crypto_monitor.repositories.protocols import (
    CacheRepository,
    PreferenceRepository,
)

__all__ = [
    "CacheRepository",
    "PreferenceRepository",
]
