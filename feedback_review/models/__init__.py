from feedback_review.models.feedback_model import (
    ConversationRole,
    ConversationTurn,
    FeedbackRecord,
    FeedbackValue,
)

__all__ = [
    "ConversationRole",
    "ConversationTurn",
    "FeedbackRecord",
    "FeedbackValue",
]
