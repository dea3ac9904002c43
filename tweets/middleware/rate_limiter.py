"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from tweets.config.settings import Config

logger = logging.getLogger(__name__)

DEFAULT_LIMITS = ["1000 per hour", "100 per minute"]

# Like/unlike are cheap to call and each one is a write on a shared document
LIKE_ENDPOINTS = ("messages.like", "messages.dislike")


def create_rate_limiter(app) -> Limiter:
    """
    Create Flask-Limiter instance and apply the like/unlike route limit.
    
    Must run after the blueprints are registered.
    
    Args:
        app: Flask application instance
        
    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED", Config.RATELIMIT_ENABLED):
        # No-op limiter when rate limiting is disabled
        return Limiter(get_remote_address, app=app, default_limits=[], storage_uri="memory://")
    
    storage_uri = app.config.get("RATELIMIT_STORAGE_URL", Config.RATELIMIT_STORAGE_URL)
    try:
        limiter = Limiter(
            get_remote_address,
            app=app,
            default_limits=DEFAULT_LIMITS,
            storage_uri=storage_uri,
            strategy="fixed-window",
            headers_enabled=True
        )
    except Exception as e:
        logger.warning(f"Failed to initialize rate limiter on {storage_uri}: {e}, using memory storage")
        limiter = Limiter(get_remote_address, app=app, default_limits=DEFAULT_LIMITS, storage_uri="memory://")
    
    like_limit = app.config.get("LIKE_RATE_LIMIT", Config.LIKE_RATE_LIMIT)
    for endpoint in LIKE_ENDPOINTS:
        view = app.view_functions.get(endpoint)
        if view is not None:
            app.view_functions[endpoint] = limiter.limit(like_limit)(view)
    logger.info(f"Rate limiting enabled, like/unlike limited to {like_limit}")
    
    return limiter
