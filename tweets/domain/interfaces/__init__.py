"""Domain interfaces following Dependency Inversion Principle."""

from tweets.domain.interfaces.mapper import IMapper
from tweets.domain.interfaces.message_repository import IMessageRepository
from tweets.domain.interfaces.user_repository import IUserRepository

__all__ = [
    "IMapper",
    "IMessageRepository",
    "IUserRepository",
]
