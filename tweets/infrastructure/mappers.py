"""Mappers between domain entities and stored documents."""
from tweets.domain.entities import Message, User
from tweets.domain.interfaces.mapper import IMapper
from tweets.infrastructure.documents import MessageDocument, UserDocument


class MessageDocumentMapper(IMapper[Message, MessageDocument]):
    """Message -> MessageDocument. The like set is left to the store."""
    
    def map(self, source: Message) -> MessageDocument:
        return MessageDocument(
            id=str(source.id),
            user_name=source.user.name,
            text=source.text,
            create_date=source.create_date,
        )


class UserDocumentMapper(IMapper[User, UserDocument]):
    """User -> UserDocument."""
    
    def map(self, source: User) -> UserDocument:
        return UserDocument(id=source.name, display_name=source.display_name)


class UserMapper(IMapper[UserDocument, User]):
    """UserDocument -> User."""
    
    def map(self, source: UserDocument) -> User:
        return User(name=source.id, display_name=source.display_name)
