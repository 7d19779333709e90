"""
MongoDB configuration for the feedback collection.
"""

from typing import Any, Dict, Optional
from pydantic_settings import BaseSettings


class MongoDBConfig(BaseSettings):
    """MongoDB connection settings (MONGODB_ prefix)."""

    # Full connection string; takes precedence over HOST/PORT/credentials
    URI: Optional[str] = None

    HOST: str = "localhost"
    PORT: int = 27017
    DATABASE: str = "feedback_review"
    USERNAME: str = ""
    PASSWORD: str = ""

    COLLECTION_FEEDBACK: str = "feedbacks"

    # Connection pool settings
    MAX_POOL_SIZE: int = 50
    MIN_POOL_SIZE: int = 0
    SERVER_SELECTION_TIMEOUT: int = 5000
    CONNECT_TIMEOUT: int = 10000

    @property
    def connection_uri(self) -> str:
        """Get MongoDB connection URI."""
        if self.URI:
            return self.URI
        if self.USERNAME and self.PASSWORD:
            return f"mongodb://{self.USERNAME}:{self.PASSWORD}@{self.HOST}:{self.PORT}/{self.DATABASE}?authSource=admin"
        return f"mongodb://{self.HOST}:{self.PORT}"

    @property
    def connection_kwargs(self) -> Dict[str, Any]:
        """Get connection kwargs for the motor client."""
        return {
            "host": self.connection_uri,
            "maxPoolSize": self.MAX_POOL_SIZE,
            "minPoolSize": self.MIN_POOL_SIZE,
            "serverSelectionTimeoutMS": self.SERVER_SELECTION_TIMEOUT,
            "connectTimeoutMS": self.CONNECT_TIMEOUT,
            # createdAt is written as UTC; read it back timezone-aware
            "tz_aware": True,
        }

    class Config:
        env_file = ".env"
        env_prefix = "MONGODB_"
        extra = "ignore"


_mongodb_config: Optional[MongoDBConfig] = None


def get_mongodb_config() -> MongoDBConfig:
    """Get MongoDB configuration."""
    global _mongodb_config

    if _mongodb_config is None:
        _mongodb_config = MongoDBConfig()

    return _mongodb_config
