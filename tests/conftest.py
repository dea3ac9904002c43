"""Shared fixtures: in-memory MongoDB and Redis behind the real repositories."""
from datetime import datetime, timedelta, timezone

import fakeredis
import mongomock
import pytest

from tweets import create_app
from tweets.config.settings import TestingConfig
from tweets.domain.entities import Message, User
from tweets.infrastructure.documents import MESSAGES_COLLECTION
from tweets.infrastructure.mappers import MessageDocumentMapper, UserDocumentMapper, UserMapper
from tweets.infrastructure.repositories import MongoMessageRepository, RedisUserRepository
from tweets.infrastructure.service_container import ServiceContainer

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def collection():
    return mongomock.MongoClient().db[MESSAGES_COLLECTION]


@pytest.fixture
def message_repository(collection):
    return MongoMessageRepository(collection, MessageDocumentMapper())


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def user_repository(redis_client):
    return RedisUserRepository(redis_client, UserDocumentMapper(), UserMapper())


@pytest.fixture(autouse=True)
def reset_container():
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


@pytest.fixture
def app(message_repository, user_repository):
    container = ServiceContainer()
    container.register(message_repository=message_repository, user_repository=user_repository)
    return create_app(TestingConfig, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_message(message_repository):
    """Save a message by author, created `minutes` after BASE_TIME."""
    def _post(author: str, text: str = "hello", minutes: int = 0) -> Message:
        message = Message(
            user=User(name=author),
            text=text,
            create_date=BASE_TIME + timedelta(minutes=minutes),
        )
        message_repository.save(message)
        return message
    return _post


@pytest.fixture
def like_n_times(message_repository):
    """Like a message from n distinct users."""
    def _like(message: Message, n: int) -> None:
        for i in range(n):
            message_repository.like(message.id, User(name=f"fan{i}"))
    return _like
