"""Request, response and query-parameter schemas for the feedback API."""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from feedback_review.constants import DEFAULT_LIST_LIMIT, TRUTHY_PARAM_VALUES
from feedback_review.models.feedback_model import FeedbackValue

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class FeedbackQueryParams(BaseModel):
    """
    Parsed GET /api/feedback parameters.

    Request input is loosely typed (query strings); every field is coerced
    deterministically:
    - empty strings mean "absent"
    - showHidden is true only for true/1/yes (any case) or a real boolean
    - limit takes the leading integer of the value and falls back to
      DEFAULT_LIST_LIMIT when absent, non-numeric or below 1
    - feedback must name a FeedbackValue
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_name: Optional[str] = Field(None, alias="schema")
    feedback: Optional[FeedbackValue] = None
    show_hidden: bool = Field(False, alias="showHidden")
    search: Optional[str] = None
    limit: int = DEFAULT_LIST_LIMIT

    @field_validator("schema_name", "search", "feedback", mode="before")
    @classmethod
    def blank_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v

    @field_validator("show_hidden", mode="before")
    @classmethod
    def parse_show_hidden(cls, v: Any) -> bool:
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.strip().lower() in TRUTHY_PARAM_VALUES
        return False

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v: Any) -> int:
        if isinstance(v, bool) or v is None:
            return DEFAULT_LIST_LIMIT
        if isinstance(v, int):
            parsed = v
        elif isinstance(v, float):
            parsed = int(v)
        else:
            match = _LEADING_INT.match(str(v))
            if not match:
                return DEFAULT_LIST_LIMIT
            parsed = int(match.group(1))
        return parsed if parsed >= 1 else DEFAULT_LIST_LIMIT


class FeedbackUpdateRequest(BaseModel):
    """Body of PATCH /api/feedback/{id}/feedback. null clears the tag."""

    feedback: Optional[str] = Field(..., description="'positive', 'negative' or null")


class HiddenUpdateRequest(BaseModel):
    """Body of PATCH /api/feedback/{id}/hidden."""

    hidden: bool = Field(..., description="true archives the record")


class SeedResponse(BaseModel):
    message: str
    count: int


class SeedSmokeTestResponse(BaseModel):
    success: bool


class FeedbackStats(BaseModel):
    """Tag counts over the records visible under the hidden filter."""

    total: int = 0
    positive: int = 0
    negative: int = 0
    unset: int = 0
    hidden: int = 0
