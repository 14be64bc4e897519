"""
Key-value store interface.

The onboarding data lives in a synchronous key-value store holding
JSON-serializable values. Domain services receive a store instance
instead of reaching for a global, so tests can hand them an in-memory one.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class StoreError(Exception):
    """Raised when the backing store cannot complete an operation."""


class KeyValueStore(ABC):
    """Synchronous JSON key-value store without expiry or transactions."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the decoded value stored under key, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def set_many(self, mapping: Dict[str, Any]) -> bool:
        """Store several keys in a single write."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete key. Returns True if something was removed."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether key holds a value."""
