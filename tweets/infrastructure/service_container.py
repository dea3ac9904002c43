"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from tweets.config.settings import Config
from tweets.domain.interfaces.message_repository import IMessageRepository
from tweets.domain.interfaces.user_repository import IUserRepository
from tweets.infrastructure.mappers import MessageDocumentMapper, UserDocumentMapper, UserMapper
from tweets.infrastructure.mongo_client import MongoClientFactory, get_messages_collection
from tweets.infrastructure.redis_client import RedisClientFactory
from tweets.infrastructure.repositories.message_repository import MongoMessageRepository
from tweets.infrastructure.repositories.user_repository import RedisUserRepository


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.
    
    Follows Singleton pattern and Dependency Inversion Principle.
    Configuration is read here, once; repositories receive established
    storage handles.
    """
    
    _instance: Optional['ServiceContainer'] = None
    _message_repository: Optional[IMessageRepository] = None
    _user_repository: Optional[IUserRepository] = None
    
    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __init__(self):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)
    
    def register(
        self,
        message_repository: Optional[IMessageRepository] = None,
        user_repository: Optional[IUserRepository] = None
    ) -> None:
        """Register prebuilt repositories (useful for testing)."""
        if message_repository is not None:
            ServiceContainer._message_repository = message_repository
        if user_repository is not None:
            ServiceContainer._user_repository = user_repository
    
    def get_message_repository(self) -> IMessageRepository:
        """Get or create message repository instance."""
        if self._message_repository is None:
            try:
                database = MongoClientFactory.get_database()
                collection = get_messages_collection(database, Config.MESSAGES_COLLECTION)
                ServiceContainer._message_repository = MongoMessageRepository(
                    collection=collection,
                    message_document_mapper=MessageDocumentMapper()
                )
                self._logger.info(f"MessageRepository created on {database.name}.{collection.name}")
            except Exception as e:
                self._logger.error(f"Failed to create MessageRepository: {e}")
                raise
        return self._message_repository
    
    def get_user_repository(self) -> IUserRepository:
        """Get or create user repository instance."""
        if self._user_repository is None:
            try:
                ServiceContainer._user_repository = RedisUserRepository(
                    redis_client=RedisClientFactory.get_client(),
                    user_document_mapper=UserDocumentMapper(),
                    user_mapper=UserMapper()
                )
                self._logger.info("UserRepository created with redis")
            except Exception as e:
                self._logger.error(f"Failed to create UserRepository: {e}")
                raise
        return self._user_repository
    
    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._message_repository = None
        cls._user_repository = None
