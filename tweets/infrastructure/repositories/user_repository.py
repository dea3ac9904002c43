"""Repository for user profiles using Redis (Repository Pattern)."""
import logging
from typing import Optional
import redis

from tweets.domain.entities import User
from tweets.domain.errors import StorageUnavailable
from tweets.domain.interfaces.mapper import IMapper
from tweets.domain.interfaces.user_repository import IUserRepository
from tweets.infrastructure.documents import UserDocument


class RedisUserRepository(IUserRepository):
    """
    Repository for user profiles using Redis.
    
    Follows Repository Pattern and Single Responsibility Principle.
    Each profile is a JSON document stored under the user name.
    """
    
    def __init__(
        self,
        redis_client: redis.Redis,
        user_document_mapper: IMapper[User, UserDocument],
        user_mapper: IMapper[UserDocument, User]
    ):
        """
        Initialize the user repository.
        
        Args:
            redis_client: Redis client instance (Dependency Injection)
            user_document_mapper: User -> UserDocument mapper
            user_mapper: UserDocument -> User mapper
        """
        self.redis = redis_client
        self.user_document_mapper = user_document_mapper
        self.user_mapper = user_mapper
        self._logger = logging.getLogger(__name__)
    
    def save(self, user: User) -> None:
        """Store a user profile under its name."""
        document = self.user_document_mapper.map(user)
        
        try:
            self.redis.set(document.id, document.to_json())
        except redis.RedisError as e:
            self._logger.error(f"Error storing user {document.id}: {e}")
            raise StorageUnavailable(f"Redis unavailable: {e}") from e
        
        self._logger.info(f"Saved user {document.id}")
    
    def get(self, user_name: str) -> Optional[User]:
        """Retrieve a user profile, or None if not found."""
        try:
            raw = self.redis.get(user_name)
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving user {user_name}: {e}")
            raise StorageUnavailable(f"Redis unavailable: {e}") from e
        
        if raw is None:
            self._logger.debug(f"No user found for {user_name}")
            return None
        
        try:
            return self.user_mapper.map(UserDocument.from_json(raw))
        except (ValueError, KeyError) as e:
            self._logger.error(f"Corrupt user document for {user_name}: {e}")
            return None
    
    def ping(self) -> None:
        """Ping the Redis server."""
        try:
            self.redis.ping()
        except redis.RedisError as e:
            raise StorageUnavailable(f"Redis unavailable: {e}") from e
