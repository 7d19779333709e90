"""
Repository layer for database access.
"""

from feedback_review.repositories.feedback_store import FeedbackStore
from feedback_review.repositories.filters import FeedbackFilter

__all__ = [
    "FeedbackStore",
    "FeedbackFilter",
]
