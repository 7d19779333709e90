"""
List filter for feedback records and its translation to a MongoDB query.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from feedback_review.constants import (
    FIELD_FEEDBACK,
    FIELD_HIDDEN,
    FIELD_QUERY,
    FIELD_QUESTION,
    FIELD_SCHEMA,
)
from feedback_review.models.feedback_model import FeedbackValue


@dataclass(frozen=True)
class FeedbackFilter:
    """
    Conjunction of optional constraints on a record listing.

    A term left as None places no constraint on its field, with one
    exception: hidden records are excluded unless include_hidden is set.
    `search` is a case-insensitive literal substring matched against
    question OR query.
    """

    schema_name: Optional[str] = None
    feedback: Optional[FeedbackValue] = None
    include_hidden: bool = False
    search: Optional[str] = None

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = {}

        if self.schema_name is not None:
            query[FIELD_SCHEMA] = self.schema_name

        if self.feedback is not None:
            # null also matches documents missing the field
            query[FIELD_FEEDBACK] = self.feedback.stored_value

        if not self.include_hidden:
            # Documents without the field count as visible (default false)
            query[FIELD_HIDDEN] = {"$ne": True}

        if self.search:
            pattern = {"$regex": re.escape(self.search), "$options": "i"}
            query["$or"] = [
                {FIELD_QUESTION: pattern},
                {FIELD_QUERY: pattern},
            ]

        return query
