"""
Redis-backed key-value store.

This module provides the Redis connection setup used when the tracker
runs with store_backend="redis". Values are stored as JSON strings
without expiry.
"""

import json
import logging
from typing import Any, Dict, Optional

import redis

from onboarding_tracker.config.settings import settings
from onboarding_tracker.core.store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


class RedisStore(KeyValueStore):
    """
    Redis connection manager implementing the key-value store interface.

    Every value is JSON serialized on write and decoded on read, so the
    stored layout is the same as the in-memory store's.
    """

    def __init__(self, redis_url: Optional[str] = None, client: Optional[redis.Redis] = None):
        """Initialize Redis connection pool."""
        self.redis_client = client or redis.from_url(
            redis_url or settings.redis_url,
            decode_responses=True,  # Automatically decode responses to strings
            socket_connect_timeout=5,
            socket_timeout=5
        )

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from Redis.

        Args:
            key: Key to retrieve

        Returns:
            Decoded value if found, None if not found
        """
        try:
            value = self.redis_client.get(key)
        except redis.RedisError as e:
            logger.error(f"Redis GET failed for {key}: {e}")
            raise StoreError(f"Failed to read {key}") from e

        if value is None:
            return None
        try:
            return json.loads(value)
        except (json.JSONDecodeError, TypeError):
            # Plain strings written by other clients
            return value

    def set(self, key: str, value: Any) -> bool:
        """
        Set value in Redis.

        Args:
            key: Key to write
            value: Value to store (JSON serialized)

        Returns:
            True if successful
        """
        try:
            return bool(self.redis_client.set(key, json.dumps(value)))
        except redis.RedisError as e:
            logger.error(f"Redis SET failed for {key}: {e}")
            raise StoreError(f"Failed to write {key}") from e

    def set_many(self, mapping: Dict[str, Any]) -> bool:
        """
        Write several keys inside one MULTI/EXEC transaction.

        Args:
            mapping: Keys and the values to store under them

        Returns:
            True if every write was applied
        """
        try:
            pipe = self.redis_client.pipeline(transaction=True)
            for key, value in mapping.items():
                pipe.set(key, json.dumps(value))
            return all(pipe.execute())
        except redis.RedisError as e:
            logger.error(f"Redis transaction failed for {sorted(mapping)}: {e}")
            raise StoreError("Failed to write keys atomically") from e

    def delete(self, key: str) -> bool:
        """
        Delete key from Redis.

        Args:
            key: Key to delete

        Returns:
            True if key was deleted, False otherwise
        """
        try:
            return bool(self.redis_client.delete(key))
        except redis.RedisError as e:
            logger.error(f"Redis DELETE failed for {key}: {e}")
            raise StoreError(f"Failed to delete {key}") from e

    def exists(self, key: str) -> bool:
        """
        Check if key exists in Redis.

        Args:
            key: Key to check

        Returns:
            True if key exists, False otherwise
        """
        try:
            return bool(self.redis_client.exists(key))
        except redis.RedisError as e:
            logger.error(f"Redis EXISTS failed for {key}: {e}")
            raise StoreError(f"Failed to check {key}") from e

    def ping(self) -> bool:
        """Check whether the Redis server answers."""
        try:
            return bool(self.redis_client.ping())
        except redis.RedisError:
            return False
