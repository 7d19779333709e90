"""
Feedback record model (pydantic).
Maps between the persisted MongoDB document and the API representation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from feedback_review.utils.logger import get_logger

logger = get_logger(__name__)


class FeedbackValue(str, Enum):
    """Review tag on a record. UNSET is stored and serialized as null."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    UNSET = "unset"

    @property
    def stored_value(self) -> Optional[str]:
        return None if self is FeedbackValue.UNSET else self.value


class ConversationRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """One message in a transcript."""

    role: ConversationRole
    message: str = ""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedbackRecord(BaseModel):
    """One reviewed chatbot interaction."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, description="Store-assigned ObjectId as a hex string")
    schema_name: str = Field("", alias="schema", description="Free-text category label")
    question: str = ""
    query: str = ""
    feedback: FeedbackValue = FeedbackValue.UNSET
    hidden: bool = False
    conversation: List[ConversationTurn] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    @field_validator("feedback", mode="before")
    @classmethod
    def null_feedback_is_unset(cls, v: Any) -> Any:
        if v is None:
            return FeedbackValue.UNSET
        return v

    @field_validator("schema_name", "question", "query", mode="before")
    @classmethod
    def null_text_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("created_at", mode="after")
    @classmethod
    def naive_time_is_utc(cls, v: datetime) -> datetime:
        # Drivers without tz_aware hand back naive UTC values
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_serializer("feedback")
    def serialize_feedback(self, value: FeedbackValue) -> Optional[str]:
        return value.stored_value

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "FeedbackRecord":
        """
        Build a record from a raw MongoDB document.

        Stored feedback values outside FeedbackValue (written by other
        ingestion paths) are read as UNSET instead of failing the read.
        """
        data = dict(doc)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))

        stored = data.get("feedback")
        if stored is not None and stored not in (FeedbackValue.POSITIVE.value, FeedbackValue.NEGATIVE.value):
            logger.warning(f"Feedback {data.get('id')} has unknown stored feedback {stored!r}, reading as unset")
            data["feedback"] = None

        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        """Document to insert; the store assigns `_id`."""
        doc = self.model_dump(mode="json", by_alias=True, exclude={"id", "created_at"})
        doc["createdAt"] = self.created_at
        return doc
