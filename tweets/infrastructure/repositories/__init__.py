"""Repository implementations (Infrastructure Layer).

Repository implementations for data persistence.
These implement domain interfaces defined in tweets.domain.interfaces.
"""
from tweets.infrastructure.repositories.like_coordinator import LikeCoordinator
from tweets.infrastructure.repositories.popularity_aggregator import PopularityAggregator
from tweets.infrastructure.repositories.message_repository import MongoMessageRepository
from tweets.infrastructure.repositories.user_repository import RedisUserRepository

__all__ = [
    "LikeCoordinator",
    "PopularityAggregator",
    "MongoMessageRepository",
    "RedisUserRepository",
]
