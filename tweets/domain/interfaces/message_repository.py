"""Interface for message repository (Repository Pattern)."""
import uuid
from abc import ABC, abstractmethod
from typing import List

from tweets.domain.entities import AuthoredMessage, Message, RankedMessage, User


class IMessageRepository(ABC):
    """
    Interface for message storage following Repository Pattern.
    
    Stores messages together with their embedded likes and answers
    the popularity ranking.
    """
    
    @abstractmethod
    def save(self, message: Message) -> None:
        """
        Persist a new message with an empty like set.
        
        Args:
            message: Message to store
        """
        pass
    
    @abstractmethod
    def like(self, message_id: uuid.UUID, user: User) -> None:
        """
        Add a like from user to the message. No-op if already liked.
        
        Args:
            message_id: Message identifier
            user: User leaving the like
        """
        pass
    
    @abstractmethod
    def dislike(self, message_id: uuid.UUID, user: User) -> None:
        """
        Remove the like from user on the message. No-op if absent.
        
        Args:
            message_id: Message identifier
            user: User removing the like
        """
        pass
    
    @abstractmethod
    def get_popular_messages(self) -> List[RankedMessage]:
        """
        Get the most liked messages, most liked first.
        
        Returns:
            Up to 10 ranked messages
        """
        pass
    
    @abstractmethod
    def get_messages(self, user: User) -> List[AuthoredMessage]:
        """
        Get all messages authored by user, newest first.
        
        Args:
            user: Author, also used as the viewer for the liked flag
            
        Returns:
            Authored messages annotated with liked flag and like count
        """
        pass
    
    @abstractmethod
    def ping(self) -> None:
        """
        Check that the backing storage answers.
        
        Raises:
            StorageUnavailable: If it does not
        """
        pass
