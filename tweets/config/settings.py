"""Application configuration with environment-based settings."""
import os
from typing import Optional
from urllib.parse import urlparse
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""
    
    # Load environment variables
    load_dotenv()
    
    # MongoDB Configuration (message store)
    MONGO_URL: str = os.getenv("MONGO_URL", "mongodb://localhost:27017/tweets")
    MONGO_DB: Optional[str] = os.getenv("MONGO_DB")
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
    MESSAGES_COLLECTION: str = os.getenv("MESSAGES_COLLECTION", "messages")
    
    # Redis Configuration (user store)
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    
    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    LIKE_RATE_LIMIT: str = os.getenv("LIKE_RATE_LIMIT", "30 per minute")
    
    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"
    
    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    
    @classmethod
    def mongo_database_name(cls) -> str:
        """Database name from MONGO_DB, else from the URL path, else 'tweets'."""
        if cls.MONGO_DB:
            return cls.MONGO_DB
        path = urlparse(cls.MONGO_URL).path.lstrip("/")
        return path or "tweets"
    
    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        if not cls.MONGO_URL:
            raise ValueError("Missing required environment variables: MONGO_URL")
        
        if not cls.MONGO_URL.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGO_URL must start with mongodb:// or mongodb+srv://")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    MONGO_DB = "tweets_test"
    REDIS_URL = "redis://localhost:6379/15"  # Use different DB for tests
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()
    
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }
    
    return config_map.get(env, DevelopmentConfig)
