"""Domain entities - core business objects."""
from tweets.domain.entities.user import User
from tweets.domain.entities.message import Message, Like, RankedMessage, AuthoredMessage

__all__ = [
    "User",
    "Message",
    "Like",
    "RankedMessage",
    "AuthoredMessage",
]
