"""Preference repository protocol (namespaced key-value storage)."""

from typing import Protocol, Optional


class PreferenceRepository(Protocol):
    """Interface for namespaced string key-value storage."""

    def get(self, namespace: str, key: str) -> Optional[str]:
        """Get the stored value, or None if the key was never written."""
        ...

    def put_many(self, namespace: str, values: dict[str, str]) -> None:
        """Write several keys in one commit, overwriting existing values."""
        ...
