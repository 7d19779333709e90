"""Liveness and health check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from feedback_review.config import Settings
from feedback_review.core.dependencies import get_current_settings, get_feedback_store
from feedback_review.repositories.feedback_store import FeedbackStore
from feedback_review.schemas.common import HealthCheck

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "Feedback API is running! Use /api/feedback to access data."


@router.get("/test", response_class=PlainTextResponse, include_in_schema=False)
async def test():
    return "API is working"


@router.get("/health", response_model=HealthCheck)
async def health_check(
    store: FeedbackStore = Depends(get_feedback_store),
    settings: Settings = Depends(get_current_settings),
):
    """Report MongoDB connectivity."""
    services = {
        "mongodb": "healthy" if await store.health_check() else "unhealthy",
    }
    status = "healthy" if all(s == "healthy" for s in services.values()) else "degraded"

    return HealthCheck(
        status=status,
        version=settings.APP_VERSION,
        services=services
    )
