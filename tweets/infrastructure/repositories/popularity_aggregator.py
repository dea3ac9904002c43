"""Popularity ranking computed by a MongoDB aggregation pipeline."""
import logging
import uuid
from typing import Any, Dict, List

from pymongo.collection import Collection

from tweets.domain.entities import RankedMessage, User
from tweets.infrastructure.documents import CREATE_DATE, ID, LIKES, TEXT, USER_NAME, as_utc

POPULAR_MESSAGES_LIMIT = 10

# Per-row contribution to the like count after $unwind
_COUNT = "count"
# Summed like count per message after $group
_TOTAL = "Likes"


def build_popularity_pipeline(limit: int = POPULAR_MESSAGES_LIMIT) -> List[Dict[str, Any]]:
    """
    Build the ranking pipeline.
    
    $unwind drops documents whose array is empty, so messages without likes
    get a one-element [null] array contributing 0 to the count. Every message
    therefore yields exactly one group whose Likes is its true like count.
    
    Args:
        limit: Number of messages to keep
        
    Returns:
        Aggregation pipeline stages
    """
    has_likes = {"$gt": [{"$size": {"$ifNull": [f"${LIKES}", []]}}, 0]}
    
    return [
        {
            "$project": {
                USER_NAME: 1,
                TEXT: 1,
                CREATE_DATE: 1,
                LIKES: {"$cond": [has_likes, f"${LIKES}", [None]]},
                _COUNT: {"$cond": [has_likes, 1, 0]},
            }
        },
        {"$unwind": f"${LIKES}"},
        {
            "$group": {
                "_id": {
                    ID: f"${ID}",
                    USER_NAME: f"${USER_NAME}",
                    TEXT: f"${TEXT}",
                    CREATE_DATE: f"${CREATE_DATE}",
                },
                _TOTAL: {"$sum": f"${_COUNT}"},
            }
        },
        {"$sort": {_TOTAL: -1}},
        {"$limit": limit},
    ]


class PopularityAggregator:
    """Ranks messages by like count without loading like lists into memory."""
    
    def __init__(self, collection: Collection):
        """
        Initialize the aggregator.
        
        Args:
            collection: Messages collection (Dependency Injection)
        """
        self.collection = collection
        self._logger = logging.getLogger(__name__)
    
    def get_popular_messages(self, limit: int = POPULAR_MESSAGES_LIMIT) -> List[RankedMessage]:
        """
        Get the most liked messages, most liked first.
        
        Args:
            limit: Number of messages to return at most
            
        Returns:
            Ranked messages
        """
        rows = self.collection.aggregate(build_popularity_pipeline(limit))
        ranked = [self._to_ranked_message(row) for row in rows]
        self._logger.debug(f"Ranked {len(ranked)} popular messages")
        return ranked
    
    @staticmethod
    def _to_ranked_message(row: Dict[str, Any]) -> RankedMessage:
        key = row["_id"]
        return RankedMessage(
            id=uuid.UUID(key[ID]),
            user=User(name=key[USER_NAME]),
            text=key[TEXT],
            create_date=as_utc(key[CREATE_DATE]),
            likes=int(row[_TOTAL]),
        )
