from unittest.mock import MagicMock

import pytest
import redis
from pymongo.errors import ServerSelectionTimeoutError

from tweets.domain.errors import StorageUnavailable
from tweets.infrastructure import mongo_client
from tweets.infrastructure.mongo_client import MongoClientFactory, mask_url
from tweets.infrastructure.redis_client import RedisClientFactory


@pytest.fixture(autouse=True)
def reset_factories():
    MongoClientFactory._client = None
    RedisClientFactory._client = None
    RedisClientFactory._pool = None
    yield
    MongoClientFactory._client = None
    RedisClientFactory._client = None
    RedisClientFactory._pool = None


@pytest.mark.parametrize("url, expected", [
    ("mongodb://alice:secret@db:27017/tweets", "mongodb://alice:***@db:27017/tweets"),
    ("redis://:secret@cache:6379/0", "redis://:***@cache:6379/0"),
    ("mongodb://localhost:27017", "mongodb://localhost:27017"),
])
def test_mask_url(url, expected):
    assert mask_url(url) == expected


def test_mongo_connection_failure_is_fatal(monkeypatch):
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
    monkeypatch.setattr(mongo_client, "MongoClient", MagicMock(return_value=client))

    with pytest.raises(StorageUnavailable):
        MongoClientFactory.get_client("mongodb://localhost:1/tweets", timeout_ms=10)

    assert MongoClientFactory._client is None
    assert client.admin.command.call_count == 1


def test_mongo_client_is_shared(monkeypatch):
    factory = MagicMock()
    monkeypatch.setattr(mongo_client, "MongoClient", factory)

    first = MongoClientFactory.get_client("mongodb://localhost/tweets")
    second = MongoClientFactory.get_client()

    assert first is second
    factory.assert_called_once()


def test_redis_invalid_scheme():
    with pytest.raises(StorageUnavailable):
        RedisClientFactory.get_client("http://localhost:6379")


def test_redis_connection_failure_is_fatal(monkeypatch):
    monkeypatch.setattr(redis.Redis, "ping", MagicMock(side_effect=redis.ConnectionError("refused")))

    with pytest.raises(StorageUnavailable):
        RedisClientFactory.get_client("redis://localhost:1/0")

    assert RedisClientFactory._client is None
