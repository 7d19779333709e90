"""
Error handling decorators for the service and repository layers.
Log failures with operation context and re-raise for the caller.
"""

from functools import wraps
from typing import Callable, Any

from pymongo.errors import PyMongoError

from feedback_review.core.exceptions import FeedbackReviewError, PersistenceError
from feedback_review.utils.logger import get_logger

logger = get_logger(__name__)


def service_error_handler(service_name: str, operation_name: str):
    """
    Decorator for error handling in service layer.

    Domain errors (not found, validation) are logged as warnings; anything
    else is logged with a stack trace. Services don't know about HTTP, so
    the exception is always re-raised.

    Args:
        service_name: Name of the service (e.g., "FeedbackService")
        operation_name: Name of the operation (e.g., "set feedback")
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except FeedbackReviewError as e:
                logger.warning(
                    f"{service_name}.{operation_name} rejected: {e.message}",
                    extra={
                        "service": service_name,
                        "operation": operation_name,
                        "error_type": type(e).__name__,
                    }
                )
                raise
            except Exception as e:
                logger.error(
                    f"{service_name}.{operation_name} failed: {str(e)}",
                    exc_info=True,
                    extra={
                        "service": service_name,
                        "operation": operation_name,
                        "error_type": type(e).__name__,
                        "error_message": str(e)
                    }
                )
                raise

        return wrapper
    return decorator


def repository_error_handler(repository_name: str, operation_name: str):
    """
    Decorator for error handling in repository layer.

    Driver errors are logged and re-raised as PersistenceError with the
    original exception chained. Domain errors pass through untouched.

    Args:
        repository_name: Name of the repository (e.g., "FeedbackStore")
        operation_name: Name of the operation (e.g., "find")
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except FeedbackReviewError:
                raise
            except PyMongoError as e:
                logger.error(
                    f"{repository_name}.{operation_name} failed: {str(e)}",
                    exc_info=True,
                    extra={
                        "repository": repository_name,
                        "operation": operation_name,
                        "error_type": type(e).__name__,
                        "error_message": str(e),
                        "layer": "repository"
                    }
                )
                raise PersistenceError(
                    f"{operation_name.capitalize()} failed",
                    details={"error": str(e)}
                ) from e

        return wrapper
    return decorator
