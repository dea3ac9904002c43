"""Repository for messages and their likes using MongoDB (Repository Pattern)."""
import functools
import logging
import uuid
from typing import List

from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from tweets.domain.entities import AuthoredMessage, Message, RankedMessage, User
from tweets.domain.errors import StorageUnavailable
from tweets.domain.interfaces.mapper import IMapper
from tweets.domain.interfaces.message_repository import IMessageRepository
from tweets.infrastructure.documents import CREATE_DATE, USER_NAME, MessageDocument
from tweets.infrastructure.repositories.like_coordinator import LikeCoordinator
from tweets.infrastructure.repositories.popularity_aggregator import PopularityAggregator


def _storage_errors(method):
    """Surface driver failures as StorageUnavailable."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except PyMongoError as e:
            self._logger.error(f"MongoDB error in {method.__name__}: {e}")
            raise StorageUnavailable(f"MongoDB unavailable: {e}") from e
    return wrapper


class MongoMessageRepository(IMessageRepository):
    """
    Message store backed by a MongoDB collection.
    
    Follows Repository Pattern and Single Responsibility Principle.
    Likes are embedded in the message document, so like/unlike are single
    atomic document updates delegated to LikeCoordinator, and the ranking
    runs server-side in PopularityAggregator.
    """
    
    def __init__(
        self,
        collection: Collection,
        message_document_mapper: IMapper[Message, MessageDocument]
    ):
        """
        Initialize the message repository.
        
        Args:
            collection: Messages collection from an established client (Dependency Injection)
            message_document_mapper: Message -> MessageDocument mapper
        """
        self.collection = collection
        self.message_document_mapper = message_document_mapper
        self.like_coordinator = LikeCoordinator(collection)
        self.popularity_aggregator = PopularityAggregator(collection)
        self._logger = logging.getLogger(__name__)
    
    @_storage_errors
    def save(self, message: Message) -> None:
        """Persist a new message with an empty like set."""
        document = self.message_document_mapper.map(message)
        document.likes = []
        self.collection.insert_one(document.to_bson())
        self._logger.info(f"Saved message {document.id} by {document.user_name}")
    
    @_storage_errors
    def like(self, message_id: uuid.UUID, user: User) -> None:
        """Add a like from user. No-op if already liked or message missing."""
        self.like_coordinator.like(str(message_id), user.name)
    
    @_storage_errors
    def dislike(self, message_id: uuid.UUID, user: User) -> None:
        """Remove the like from user. No-op if absent."""
        self.like_coordinator.dislike(str(message_id), user.name)
    
    @_storage_errors
    def get_popular_messages(self) -> List[RankedMessage]:
        """Top 10 messages by like count, most liked first."""
        return self.popularity_aggregator.get_popular_messages()
    
    @_storage_errors
    def get_messages(self, user: User) -> List[AuthoredMessage]:
        """
        Get all messages authored by user, newest first.
        
        The author is also the viewer: liked tells whether the author
        liked their own message.
        """
        cursor = self.collection.find({USER_NAME: user.name}).sort(CREATE_DATE, DESCENDING)
        
        messages = []
        for data in cursor:
            document = MessageDocument.from_bson(data)
            messages.append(AuthoredMessage(
                id=uuid.UUID(document.id),
                user=User(name=document.user_name),
                text=document.text,
                create_date=document.create_date,
                liked=any(like.user_name == user.name for like in document.likes),
                likes=len(document.likes),
            ))
        
        self._logger.debug(f"Retrieved {len(messages)} messages for {user.name}")
        return messages
    
    @_storage_errors
    def ping(self) -> None:
        """Ping the server holding the messages collection."""
        self.collection.database.command("ping")
