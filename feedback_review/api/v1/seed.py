"""Development-only endpoints that insert demonstration data."""

from fastapi import APIRouter, Depends

from feedback_review.core.dependencies import get_feedback_service
from feedback_review.schemas.feedback import SeedResponse, SeedSmokeTestResponse
from feedback_review.services.feedback.service import FeedbackService
from feedback_review.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.post("/seed", response_model=SeedResponse)
async def seed(service: FeedbackService = Depends(get_feedback_service)):
    """Insert the demonstration record. Not idempotent."""
    logger.info("Seed route hit")
    inserted = await service.seed()
    return SeedResponse(message="Seed data inserted successfully", count=len(inserted))


@router.get("/seed-get", response_model=SeedSmokeTestResponse)
async def seed_get(service: FeedbackService = Depends(get_feedback_service)):
    """Insert a minimal 'test' record from a browser-friendly GET."""
    await service.seed_smoke_test()
    return SeedSmokeTestResponse(success=True)
