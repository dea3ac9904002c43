"""Flask application factory with dependency injection."""
import logging
import sys
from typing import Optional

from flask import Flask

from tweets.config.settings import get_config
from tweets.infrastructure.service_container import ServiceContainer
from tweets.middleware.rate_limiter import create_rate_limiter
from tweets.middleware.monitoring import register_metrics_middleware
from tweets.middleware.error_handler import init_error_handlers
from tweets.api import messages_blueprint, users_blueprint, health_blueprint


def create_app(config_class=None, container: Optional[ServiceContainer] = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.
    
    Storage connections are not opened here; the service container
    creates them on first use from the loaded configuration.
    
    Args:
        config_class: Optional configuration class (for testing)
        container: Optional prebuilt service container (for testing)
        
    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)
    
    app = Flask(__name__)
    
    # Load configuration
    config = config_class or get_config()
    app.config.from_object(config)
    
    _configure_logging(app.config.get("DEBUG", False))
    
    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")
    
    app.register_blueprint(health_blueprint)
    app.register_blueprint(messages_blueprint)
    app.register_blueprint(users_blueprint)
    
    _initialize_middleware(app)
    
    app.config['service_container'] = container or ServiceContainer()
    
    _logger.info(f"Application ready - registered blueprints: {[bp.name for bp in app.blueprints.values()]}")
    return app


def _configure_logging(debug: bool) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).
    
    Args:
        app: Flask application instance
    """
    app.config['limiter'] = create_rate_limiter(app)
    register_metrics_middleware(app)
    init_error_handlers(app)
