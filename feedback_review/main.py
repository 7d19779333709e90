"""
Feedback Review API - FastAPI application over the MongoDB feedback store.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from feedback_review.api.v1.router import build_api_router, root_router
from feedback_review.config import get_settings, get_mongodb_config
from feedback_review.core.exceptions import setup_exception_handlers
from feedback_review.core.middleware import (
    LoggingMiddleware,
    PrometheusMiddleware,
    TimingMiddleware,
    get_metrics_response,
)
from feedback_review.repositories.feedback_store import FeedbackStore
from feedback_review.utils.logger import setup_logging

settings = get_settings()

logger = setup_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the feedback store on startup and close it on shutdown."""
    logger.info("🚀 Starting Feedback Review API")

    store = getattr(app.state, "feedback_store", None)
    if store is None:
        store = FeedbackStore.from_config(get_mongodb_config())
        app.state.feedback_store = store

    try:
        await store.open()
        logger.info("✅ MongoDB Connected")

        yield

    except Exception as e:
        logger.error(f"❌ Failed to start application: {e}")
        raise
    finally:
        await store.close()
        logger.info("🛑 Feedback Review API stopped")


def create_application(feedback_store: Optional[FeedbackStore] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        feedback_store: Store to serve from; when omitted the lifespan builds
            one from MongoDB settings
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Review, tag and archive chatbot transcripts",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.feedback_store = feedback_store

    setup_middleware(app)

    setup_exception_handlers(app)

    app.include_router(root_router, tags=["Health"])
    app.include_router(build_api_router(), prefix="/api")

    if settings.ENABLE_METRICS:
        @app.get("/metrics", include_in_schema=False, tags=["Monitoring"])
        async def metrics():
            """Prometheus metrics endpoint."""
            return get_metrics_response()

    return app


def setup_middleware(app: FastAPI):
    """Setup application middleware."""

    # CORS middleware
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_credentials=settings.ALLOW_CREDENTIALS,
            allow_methods=settings.ALLOWED_METHODS,
            allow_headers=settings.ALLOWED_HEADERS,
        )

    # Compression middleware
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Custom middleware, last added runs first:
    # metrics -> timing (sets request id) -> logging
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    if settings.ENABLE_METRICS:
        app.add_middleware(PrometheusMiddleware)


app = create_application()


def run():
    """Run the application."""
    uvicorn.run(
        "feedback_review.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
