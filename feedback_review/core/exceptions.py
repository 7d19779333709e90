"""Custom exceptions and exception handlers."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FeedbackReviewError(Exception):
    """Base exception for feedback review errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Dict[str, Any] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class PersistenceError(FeedbackReviewError):
    """The document store is unreachable or rejected the operation."""
    pass


class NotFoundError(FeedbackReviewError):
    """The update target does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(FeedbackReviewError):
    """Malformed input that could not be coerced."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


async def feedback_review_exception_handler(request: Request, exc: FeedbackReviewError) -> JSONResponse:
    """Handle domain exceptions raised by the store and service layers."""
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__} on {request.url}: {exc.message}", extra={"details": exc.details})
    else:
        logger.warning(f"{exc.__class__.__name__} on {request.url}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "error_type": exc.__class__.__name__,
            "details": exc.details,
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "message": "Validation error",
            "error_type": "ValidationError",
            "details": [
                {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                for error in exc.errors()
            ],
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(f"HTTP error {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.detail,
            "error_type": "HTTPError",
        }
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions."""
    logger.error(f"Unexpected error on {request.url}: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Internal server error",
            "error_type": "InternalError",
        }
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup exception handlers for the application."""
    app.add_exception_handler(FeedbackReviewError, feedback_review_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
