"""Store interfaces (repository pattern).

Storage backends must be swappable. They only move text in and out under a
key; decoding into domain models happens in PersistedStore.
"""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Interface for a synchronous key-value text store."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the text stored under key, or None if the key is absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing whatever was there."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        ...
