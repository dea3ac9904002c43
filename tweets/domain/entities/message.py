"""Message domain entities and read projections."""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from tweets.domain.entities.user import User


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Message:
    """Domain entity representing a message posted by a user."""
    
    user: User
    text: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    create_date: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Like:
    """A like left by a user on a message. Owned by its message."""
    
    user_name: str
    create_date: datetime


@dataclass(frozen=True)
class RankedMessage:
    """Message with its total like count, produced by the popularity ranking."""
    
    id: uuid.UUID
    user: User
    text: str
    create_date: datetime
    likes: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "user": self.user.name,
            "text": self.text,
            "create_date": self.create_date.isoformat(),
            "likes": self.likes,
        }


@dataclass(frozen=True)
class AuthoredMessage:
    """Message from an author's listing, annotated for the viewing user."""
    
    id: uuid.UUID
    user: User
    text: str
    create_date: datetime
    liked: bool
    likes: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "user": self.user.name,
            "text": self.text,
            "create_date": self.create_date.isoformat(),
            "liked": self.liked,
            "likes": self.likes,
        }
