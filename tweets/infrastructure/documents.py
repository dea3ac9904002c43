"""Stored document shapes.

Messages live in MongoDB with their likes embedded:

    {
        "_id": "<uuid>",
        "userName": "alice",
        "text": "hello",
        "createDate": <datetime>,
        "likes": [{"userName": "bob", "createDate": <datetime>}]
    }

Users live in Redis as a JSON object keyed by user name.
"""
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

MESSAGES_COLLECTION = "messages"

# Field names shared by queries, updates and the ranking pipeline
ID = "_id"
USER_NAME = "userName"
TEXT = "text"
CREATE_DATE = "createDate"
LIKES = "likes"


def as_utc(value: datetime) -> datetime:
    """MongoDB returns naive datetimes that are already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class LikeDocument:
    """Embedded like entry."""
    
    user_name: str
    create_date: datetime
    
    def to_bson(self) -> Dict[str, Any]:
        return {USER_NAME: self.user_name, CREATE_DATE: self.create_date}
    
    @classmethod
    def from_bson(cls, data: Dict[str, Any]) -> "LikeDocument":
        return cls(user_name=data[USER_NAME], create_date=as_utc(data[CREATE_DATE]))


@dataclass
class MessageDocument:
    """Stored message with its embedded like set."""
    
    id: str
    user_name: str
    text: str
    create_date: datetime
    likes: List[LikeDocument] = field(default_factory=list)
    
    def to_bson(self) -> Dict[str, Any]:
        return {
            ID: self.id,
            USER_NAME: self.user_name,
            TEXT: self.text,
            CREATE_DATE: self.create_date,
            LIKES: [like.to_bson() for like in self.likes],
        }
    
    @classmethod
    def from_bson(cls, data: Dict[str, Any]) -> "MessageDocument":
        # Documents written before likes existed may lack the field
        likes = data.get(LIKES) or []
        return cls(
            id=data[ID],
            user_name=data[USER_NAME],
            text=data[TEXT],
            create_date=as_utc(data[CREATE_DATE]),
            likes=[LikeDocument.from_bson(like) for like in likes],
        )


@dataclass
class UserDocument:
    """Stored user profile. The id is the user name."""
    
    id: str
    display_name: Optional[str] = None
    
    def to_json(self) -> str:
        return json.dumps({"id": self.id, "display_name": self.display_name})
    
    @classmethod
    def from_json(cls, raw: str) -> "UserDocument":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"User document must be a JSON object, got {type(data).__name__}")
        return cls(id=data["id"], display_name=data.get("display_name"))
