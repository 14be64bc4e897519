"""
Tests for the Redis-backed store, using a mocked client
"""
import json
from unittest.mock import MagicMock

import pytest
import redis

from onboarding_tracker.core.redis import RedisStore
from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.core.store import StoreError


@pytest.fixture
def redis_client():
    return MagicMock()


@pytest.fixture
def redis_store(redis_client):
    return RedisStore(client=redis_client)


def test_get_decodes_json(redis_store, redis_client):
    redis_client.get.return_value = '{"a": [1, 2]}'
    assert redis_store.get("k") == {"a": [1, 2]}
    redis_client.get.assert_called_once_with("k")


def test_get_missing_key(redis_store, redis_client):
    redis_client.get.return_value = None
    assert redis_store.get("k") is None


def test_get_plain_string(redis_store, redis_client):
    redis_client.get.return_value = "dark"
    assert redis_store.get("onboarding_theme") == "dark"


def test_set_encodes_json(redis_store, redis_client):
    redis_client.set.return_value = True
    assert redis_store.set("k", {"a": 1}) is True
    redis_client.set.assert_called_once_with("k", json.dumps({"a": 1}))


def test_set_many_uses_transaction(redis_store, redis_client):
    pipe = redis_client.pipeline.return_value
    pipe.execute.return_value = [True, True]

    assert redis_store.set_many({"a": 1, "b": [2]}) is True

    redis_client.pipeline.assert_called_once_with(transaction=True)
    pipe.set.assert_any_call("a", "1")
    pipe.set.assert_any_call("b", "[2]")
    pipe.execute.assert_called_once()
    redis_client.set.assert_not_called()


def test_delete_and_exists(redis_store, redis_client):
    redis_client.delete.return_value = 1
    redis_client.exists.return_value = 0
    assert redis_store.delete("k") is True
    assert redis_store.exists("k") is False


@pytest.mark.parametrize("method,args", [
    ("get", ("k",)),
    ("set", ("k", 1)),
    ("delete", ("k",)),
    ("exists", ("k",)),
])
def test_redis_errors_become_store_errors(redis_store, redis_client, method, args):
    getattr(redis_client, method).side_effect = redis.ConnectionError("refused")
    with pytest.raises(StoreError):
        getattr(redis_store, method)(*args)


def test_failed_transaction_raises(redis_store, redis_client):
    redis_client.pipeline.return_value.execute.side_effect = redis.ConnectionError("refused")
    with pytest.raises(StoreError):
        redis_store.set_many({"a": 1})


def test_ping(redis_store, redis_client):
    redis_client.ping.return_value = True
    assert redis_store.ping() is True

    redis_client.ping.side_effect = redis.ConnectionError("refused")
    assert redis_store.ping() is False


def test_storage_reads_through_redis(redis_store, redis_client):
    redis_client.get.return_value = json.dumps({
        "id": "user-1",
        "email": "it.user@company.com",
        "role": "it",
        "name": "It User",
        "loginAt": "2024-03-10T12:00:00Z",
    })
    user = OnboardingStorage(redis_store).get_user()

    redis_client.get.assert_called_once_with("onboarding_user")
    assert user.name == "It User"
