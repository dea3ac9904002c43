"""Request parsing helpers shared by the API blueprints."""
import uuid
from typing import Any, Dict

from flask import current_app, request

from tweets.domain.entities import User
from tweets.domain.errors import ValidationError
from tweets.infrastructure.service_container import ServiceContainer


def get_container() -> ServiceContainer:
    """Get the service container stored on the application."""
    return current_app.config["service_container"]


def json_body() -> Dict[str, Any]:
    """Request JSON object, or ValidationError."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def require_text(body: Dict[str, Any], field: str) -> str:
    """Non-empty string field from the body."""
    value = body.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Missing '{field}' field")
    return value


def require_user(body: Dict[str, Any], field: str = "user") -> User:
    """User named by a body field."""
    return User(name=require_text(body, field).strip())


def parse_message_id(raw: str) -> uuid.UUID:
    """Message id from a URL segment."""
    try:
        return uuid.UUID(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid message id: {raw}") from e
