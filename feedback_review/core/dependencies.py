"""
FastAPI dependencies resolving the store and service from application state.
"""

from fastapi import Depends, Request

from feedback_review.config import Settings, get_settings
from feedback_review.core.exceptions import PersistenceError
from feedback_review.repositories.feedback_store import FeedbackStore
from feedback_review.services.feedback.service import FeedbackService


async def get_current_settings() -> Settings:
    """Get current application settings."""
    return get_settings()


async def get_feedback_store(request: Request) -> FeedbackStore:
    """Store opened by the application lifespan (or injected by tests)."""
    store = getattr(request.app.state, "feedback_store", None)
    if store is None:
        raise PersistenceError("Feedback store is not initialized")
    return store


async def get_feedback_service(
    store: FeedbackStore = Depends(get_feedback_store)
) -> FeedbackService:
    """Per-request service around the shared store."""
    return FeedbackService(store)
