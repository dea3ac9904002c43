"""API endpoints module.

This module contains all HTTP API endpoints organized by domain.
"""

from tweets.api.messages import messages_blueprint
from tweets.api.users import users_blueprint
from tweets.api.health import health_blueprint

__all__ = [
    "messages_blueprint",
    "users_blueprint",
    "health_blueprint",
]
