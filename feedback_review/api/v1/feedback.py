"""Feedback listing, tagging and archiving endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from feedback_review.core.dependencies import get_feedback_service
from feedback_review.models.feedback_model import FeedbackRecord
from feedback_review.schemas.common import ErrorResponse
from feedback_review.schemas.feedback import (
    FeedbackStats,
    FeedbackUpdateRequest,
    HiddenUpdateRequest,
)
from feedback_review.services.feedback.service import FeedbackService

router = APIRouter()

UPDATE_ERRORS = {
    404: {"model": ErrorResponse, "description": "Record not found"},
    422: {"model": ErrorResponse, "description": "Invalid value"},
    500: {"model": ErrorResponse, "description": "Persistence error"},
}


@router.get("/feedback", response_model=List[FeedbackRecord])
async def list_feedback(
    schema: Optional[str] = Query(None, description="Exact schema label"),
    feedback: Optional[str] = Query(None, description="positive, negative or unset"),
    showHidden: Optional[str] = Query(None, description="'true' to include archived records"),
    search: Optional[str] = Query(None, description="Case-insensitive text in question or query"),
    limit: Optional[str] = Query(None, description="Maximum number of records (default 20)"),
    service: FeedbackService = Depends(get_feedback_service),
):
    """List feedback records, newest first."""
    # Raw strings on purpose: coercion happens in the service
    raw_params = {
        "schema": schema,
        "feedback": feedback,
        "showHidden": showHidden,
        "search": search,
        "limit": limit,
    }
    return await service.list_feedback({k: v for k, v in raw_params.items() if v is not None})


@router.get("/feedback/stats", response_model=FeedbackStats)
async def get_feedback_stats(
    showHidden: Optional[str] = Query(None, description="'true' to include archived records"),
    service: FeedbackService = Depends(get_feedback_service),
):
    """Count records per feedback tag."""
    return FeedbackStats(**await service.get_stats(showHidden))


@router.get("/schemas", response_model=List[str])
async def list_schemas(
    showHidden: Optional[str] = Query(None, description="'true' to include archived records"),
    service: FeedbackService = Depends(get_feedback_service),
):
    """Distinct schema labels, for the UI filter buttons."""
    return await service.list_schemas(showHidden)


@router.patch("/feedback/{record_id}/feedback", response_model=FeedbackRecord, responses=UPDATE_ERRORS)
async def update_feedback(
    request: FeedbackUpdateRequest,
    record_id: str = Path(..., description="Record id"),
    service: FeedbackService = Depends(get_feedback_service),
):
    """Tag a record positive/negative, or clear the tag with null."""
    return await service.set_feedback(record_id, request.feedback)


@router.patch("/feedback/{record_id}/hidden", response_model=FeedbackRecord, responses=UPDATE_ERRORS)
async def update_hidden(
    request: HiddenUpdateRequest,
    record_id: str = Path(..., description="Record id"),
    service: FeedbackService = Depends(get_feedback_service),
):
    """Archive or restore a record."""
    return await service.set_hidden(record_id, request.hidden)
