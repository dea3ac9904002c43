from unittest.mock import MagicMock

import pytest
import redis

from tweets.domain.entities import User
from tweets.domain.errors import StorageUnavailable
from tweets.infrastructure.mappers import UserDocumentMapper, UserMapper
from tweets.infrastructure.repositories import RedisUserRepository


def test_save_and_get(user_repository):
    user_repository.save(User(name="alice", display_name="Alice"))

    assert user_repository.get("alice") == User(name="alice", display_name="Alice")


def test_save_replaces_profile(user_repository):
    user_repository.save(User(name="alice", display_name="Alice"))
    user_repository.save(User(name="alice", display_name="Alice B."))

    assert user_repository.get("alice").display_name == "Alice B."


def test_get_missing_user(user_repository):
    assert user_repository.get("nobody") is None


def test_profile_is_stored_under_user_name(user_repository, redis_client):
    user_repository.save(User(name="bob"))

    assert redis_client.exists("bob") == 1


def test_corrupt_document_reads_as_missing(user_repository, redis_client):
    redis_client.set("bob", "not json")

    assert user_repository.get("bob") is None


def test_redis_errors_become_storage_unavailable():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("refused")
    client.set.side_effect = redis.ConnectionError("refused")
    repository = RedisUserRepository(client, UserDocumentMapper(), UserMapper())

    with pytest.raises(StorageUnavailable):
        repository.get("alice")
    with pytest.raises(StorageUnavailable):
        repository.save(User(name="alice"))


@pytest.mark.parametrize("raw", ["123", '"bob"', "[1, 2]", "null"])
def test_non_object_document_reads_as_missing(user_repository, redis_client, raw):
    redis_client.set("bob", raw)

    assert user_repository.get("bob") is None


def test_ping(user_repository):
    user_repository.ping()


def test_ping_failure_becomes_storage_unavailable():
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("refused")

    with pytest.raises(StorageUnavailable):
        RedisUserRepository(client, UserDocumentMapper(), UserMapper()).ping()
