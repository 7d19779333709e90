"""
Pytest configuration for feedback review tests.
Uses an in-memory motor client so the store's real queries run.
"""

import os

# Must be set before any feedback_review imports
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENABLE_SEED_ROUTES"] = "true"

from datetime import datetime, timedelta, timezone

import pytest
from mongomock_motor import AsyncMongoMockClient

from feedback_review.models.feedback_model import (
    ConversationRole,
    ConversationTurn,
    FeedbackRecord,
    FeedbackValue,
)
from feedback_review.repositories.feedback_store import FeedbackStore
from feedback_review.services.feedback.service import FeedbackService

BASE_TIME = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def store(mongo_client):
    return FeedbackStore(mongo_client, "feedback_review_test", "feedbacks", owns_client=False)


@pytest.fixture
def service(store):
    return FeedbackService(store)


@pytest.fixture
def make_record():
    """Build a record whose createdAt is BASE_TIME + `minutes`."""

    def _make(
        schema="mesai",
        question="bu haftaki çalışma süremi getir",
        query="Bu hafta toplamda 35.3 saat çalıştınız",
        feedback=FeedbackValue.UNSET,
        hidden=False,
        minutes=0,
    ):
        return FeedbackRecord(
            schema_name=schema,
            question=question,
            query=query,
            feedback=feedback,
            hidden=hidden,
            conversation=[
                ConversationTurn(role=ConversationRole.USER, message=question),
                ConversationTurn(role=ConversationRole.ASSISTANT, message=query),
            ],
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )

    return _make
