"""Monitoring and metrics middleware using Prometheus."""
import functools
import logging
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from tweets.config.settings import Config
from tweets.domain.errors import TweetsError

logger = logging.getLogger(__name__)

# Prometheus metrics
messages_saved_total = Counter(
    'tweets_messages_saved_total',
    'Total number of messages saved'
)

like_mutations_total = Counter(
    'tweets_like_mutations_total',
    'Total number of like/dislike requests',
    ['operation']
)

popular_messages_duration = Histogram(
    'tweets_popular_messages_duration_seconds',
    'Time spent ranking popular messages',
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0]
)

api_requests_total = Counter(
    'tweets_api_requests_total',
    'Total number of API requests',
    ['method', 'endpoint', 'status']
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics endpoint.
    
    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS", Config.ENABLE_METRICS):
        return
    
    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}
    
    logger.info("Prometheus metrics enabled at /metrics")


def track_api_request(endpoint: str):
    """
    Decorator to track API request metrics.
    
    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            try:
                response = f(*args, **kwargs)
            except TweetsError as e:
                api_requests_total.labels(method=request.method, endpoint=endpoint, status=e.http_status).inc()
                raise
            except Exception:
                api_requests_total.labels(method=request.method, endpoint=endpoint, status=500).inc()
                raise
            
            status_code = response[1] if isinstance(response, tuple) else 200
            api_requests_total.labels(method=request.method, endpoint=endpoint, status=status_code).inc()
            return response
        return wrapper
    return decorator


def track_like_mutation(operation: str) -> None:
    """
    Track a like or dislike request.
    
    Args:
        operation: 'like' or 'dislike'
    """
    like_mutations_total.labels(operation=operation).inc()


def track_message_saved() -> None:
    """Track a saved message."""
    messages_saved_total.inc()


def track_ranking_duration():
    """Context manager observing how long a popularity ranking takes."""
    return popular_messages_duration.time()
