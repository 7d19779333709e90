"""
Feature flags.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class FeaturesConfig(BaseSettings):
    """Feature flags for optional routes and monitoring."""

    # Development bootstrapping: POST /api/seed and GET /api/seed-get
    ENABLE_SEED_ROUTES: bool = Field(
        default=True,
        description="Mount the routes that insert demonstration records."
    )

    # Prometheus request metrics served on /metrics
    ENABLE_METRICS: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
