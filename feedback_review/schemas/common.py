"""Common schemas used across the application."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response body produced by the exception handlers."""

    success: bool = False
    message: str
    error_type: str
    details: Optional[Any] = None


class HealthCheck(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)
    services: Dict[str, str] = {}
