"""
Configuration package for the application.

Settings are organized by domain (base, security, features) and composed into
a single Settings class. MongoDB settings are kept in a separate
MongoDBConfig (MONGODB_ prefix) read by the feedback store.

Usage:
    from feedback_review.config import get_settings

    settings = get_settings()
    print(settings.APP_NAME)
"""

from pydantic_settings import BaseSettings

from feedback_review.config.base import BaseConfig
from feedback_review.config.security import SecurityConfig
from feedback_review.config.features import FeaturesConfig
from feedback_review.config.database import MongoDBConfig, get_mongodb_config


class Settings(
    BaseConfig,
    SecurityConfig,
    FeaturesConfig,
    BaseSettings
):
    """
    Unified application settings composed from modular configurations.

    - BaseConfig: Core application settings (APP_NAME, HOST, PORT, logging)
    - SecurityConfig: CORS
    - FeaturesConfig: Seed routes and metrics flags
    """

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
_settings = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton pattern).

    Returns:
        Settings: The global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


__all__ = [
    "Settings",
    "get_settings",
    "BaseConfig",
    "SecurityConfig",
    "FeaturesConfig",
    "MongoDBConfig",
    "get_mongodb_config",
]
