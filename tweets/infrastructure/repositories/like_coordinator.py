"""Idempotent like/unlike mutations on the embedded like set."""
import logging
from datetime import datetime, timezone

from pymongo.collection import Collection
from pymongo.errors import WriteError

from tweets.infrastructure.documents import ID, LIKES, USER_NAME, LikeDocument

# MongoDB BadValue: $push/$pull on a field that is not an array
_BAD_VALUE = 2


class LikeCoordinator:
    """
    Adds and removes like entries with set semantics keyed by user name.
    
    Each operation is a single server-side update of one document, so
    concurrent calls on the same message are serialized by MongoDB. A
    missing message simply matches nothing.
    """
    
    def __init__(self, collection: Collection):
        """
        Initialize the like coordinator.
        
        Args:
            collection: Messages collection (Dependency Injection)
        """
        self.collection = collection
        self._logger = logging.getLogger(__name__)
    
    def like(self, message_id: str, user_name: str) -> bool:
        """
        Add a like from user_name unless one is already present.
        
        The "not liked yet" test is part of the update filter, so the check
        and the push happen atomically.
        
        Args:
            message_id: Message document id
            user_name: User leaving the like
            
        Returns:
            True if a like was added, False if it already existed or the
            message does not exist
        """
        like = LikeDocument(user_name=user_name, create_date=datetime.now(timezone.utc))
        query = {ID: message_id, f"{LIKES}.{USER_NAME}": {"$ne": user_name}}
        update = {"$push": {LIKES: like.to_bson()}}
        
        try:
            result = self.collection.update_one(query, update)
        except WriteError as e:
            if e.code != _BAD_VALUE:
                raise
            self._reset_null_likes(message_id)
            result = self.collection.update_one(query, update)
        
        if result.modified_count:
            self._logger.debug(f"{user_name} liked message {message_id}")
        else:
            self._logger.debug(f"Like by {user_name} on {message_id} was a no-op")
        
        return bool(result.modified_count)
    
    def dislike(self, message_id: str, user_name: str) -> bool:
        """
        Remove every like entry left by user_name.
        
        Args:
            message_id: Message document id
            user_name: User removing the like
            
        Returns:
            True if a like was removed
        """
        try:
            result = self.collection.update_one(
                {ID: message_id},
                {"$pull": {LIKES: {USER_NAME: user_name}}},
            )
        except WriteError as e:
            if e.code != _BAD_VALUE:
                raise
            # A null like set holds nothing to remove
            self._reset_null_likes(message_id)
            return False
        
        if result.modified_count:
            self._logger.debug(f"{user_name} unliked message {message_id}")
        
        return bool(result.modified_count)
    
    def _reset_null_likes(self, message_id: str) -> None:
        """Replace an explicit null like set, written outside this service, with []."""
        self._logger.warning(f"Message {message_id} has a null like set, resetting it")
        self.collection.update_one({ID: message_id, LIKES: None}, {"$set": {LIKES: []}})
