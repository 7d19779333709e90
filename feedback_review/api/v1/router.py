"""API routers."""

from fastapi import APIRouter

from feedback_review.api.v1 import feedback, health, seed
from feedback_review.config import get_settings


def build_api_router() -> APIRouter:
    """Router mounted under /api. Seed routes only when enabled."""
    api_router = APIRouter()

    api_router.include_router(
        feedback.router,
        tags=["Feedback"]
    )

    if get_settings().ENABLE_SEED_ROUTES:
        api_router.include_router(
            seed.router,
            tags=["Seed"]
        )

    return api_router


# Liveness text and health check live at the root, outside /api
root_router = health.router
