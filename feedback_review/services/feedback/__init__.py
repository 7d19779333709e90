from feedback_review.services.feedback.service import FeedbackService

__all__ = ["FeedbackService"]
