"""Interface for user repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from tweets.domain.entities import User


class IUserRepository(ABC):
    """Interface for storing and retrieving user profiles by name."""
    
    @abstractmethod
    def save(self, user: User) -> None:
        """
        Store a user profile, replacing any previous one.
        
        Args:
            user: User to store
        """
        pass
    
    @abstractmethod
    def get(self, user_name: str) -> Optional[User]:
        """
        Retrieve a user profile.
        
        Args:
            user_name: User name
            
        Returns:
            User or None if not found
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
