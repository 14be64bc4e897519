"""
In-Memory Store

In-process implementation of the key-value store for testing and
development. Values are kept as JSON text so that callers never share
references with what is stored.
"""

import json
import logging
from typing import Any, Dict, Optional

from onboarding_tracker.core.store import KeyValueStore

logger = logging.getLogger(__name__)


class MemoryStore(KeyValueStore):
    """Dictionary-backed key-value store."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        # In-memory storage
        self._data: Dict[str, str] = {}

        # Metrics
        self._operations = 0
        self._hits = 0
        self._misses = 0

        for key, value in (initial or {}).items():
            self._data[key] = json.dumps(value)

        logger.info("MemoryStore initialized")

    def get(self, key: str) -> Optional[Any]:
        """Get value by key."""
        self._operations += 1

        if key in self._data:
            self._hits += 1
            return json.loads(self._data[key])
        else:
            self._misses += 1
            return None

    def set(self, key: str, value: Any) -> bool:
        """Set key-value pair."""
        self._operations += 1
        self._data[key] = json.dumps(value)
        return True

    def set_many(self, mapping: Dict[str, Any]) -> bool:
        """Set several keys; all values are encoded before any is stored."""
        self._operations += 1
        encoded = {key: json.dumps(value) for key, value in mapping.items()}
        self._data.update(encoded)
        return True

    def delete(self, key: str) -> bool:
        """Delete key."""
        self._operations += 1

        if key in self._data:
            del self._data[key]
            return True
        return False

    def exists(self, key: str) -> bool:
        """Check if key is present."""
        return key in self._data

    def keys(self):
        """Return the stored keys."""
        return list(self._data.keys())

    def get_metrics(self) -> Dict[str, Any]:
        """Get store metrics."""
        reads = self._hits + self._misses
        hit_rate = (self._hits / reads) if reads > 0 else 0

        return {
            "total_operations": self._operations,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": hit_rate,
            "keys_stored": len(self._data)
        }
