"""Fixed demonstration records inserted by the development seed routes."""

from typing import List

from feedback_review.models.feedback_model import (
    ConversationRole,
    ConversationTurn,
    FeedbackRecord,
    FeedbackValue,
)


def demo_records() -> List[FeedbackRecord]:
    """The 'mesai' (working hours) sample transcript, in Turkish."""
    return [
        FeedbackRecord(
            schema_name="mesai",
            question="bu haftaki çalışma süremi getir",
            query="Bu hafta toplamda 35.3 saat çalıştınız",
            feedback=FeedbackValue.UNSET,
            hidden=False,
            conversation=[
                ConversationTurn(role=ConversationRole.USER, message="bu haftaki çalışma süremi getir"),
                ConversationTurn(role=ConversationRole.ASSISTANT, message="isteğinizi işleme alıyorum. "),
                ConversationTurn(role=ConversationRole.ASSISTANT, message="Bu hafta toplamda 35.3 saat çalıştınız."),
            ],
        )
    ]


def smoke_test_records() -> List[FeedbackRecord]:
    """Minimal record used to check that writes reach the store."""
    return [
        FeedbackRecord(
            schema_name="test",
            question="test",
            query="test",
            conversation=[ConversationTurn(role=ConversationRole.USER, message="test")],
        )
    ]
