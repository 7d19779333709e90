"""
Feedback service: translates request-level parameters into store calls.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from feedback_review.constants import FIELD_FEEDBACK, FIELD_HIDDEN
from feedback_review.core.error_handlers import service_error_handler
from feedback_review.core.exceptions import ValidationError
from feedback_review.models.feedback_model import FeedbackRecord, FeedbackValue
from feedback_review.repositories.feedback_store import FeedbackStore
from feedback_review.repositories.filters import FeedbackFilter
from feedback_review.schemas.feedback import FeedbackQueryParams
from feedback_review.services.feedback.seed_data import demo_records, smoke_test_records
from feedback_review.utils.logger import get_logger

logger = get_logger(__name__)


def parse_query_params(raw_params: Mapping[str, Any]) -> FeedbackQueryParams:
    """
    Parse loosely typed list parameters.

    Raises:
        ValidationError: a parameter cannot be coerced (unknown feedback value)
    """
    try:
        return FeedbackQueryParams.model_validate(dict(raw_params))
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid feedback query parameters",
            details={"errors": [
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
            ]}
        ) from e


_WRITABLE_FEEDBACK = {
    FeedbackValue.POSITIVE.value: FeedbackValue.POSITIVE,
    FeedbackValue.NEGATIVE.value: FeedbackValue.NEGATIVE,
}


def parse_feedback_value(value: Union[str, FeedbackValue, None]) -> FeedbackValue:
    """None clears the tag; strings must be "positive" or "negative"."""
    if value is None:
        return FeedbackValue.UNSET
    if isinstance(value, FeedbackValue):
        return value
    if isinstance(value, str) and value in _WRITABLE_FEEDBACK:
        return _WRITABLE_FEEDBACK[value]
    raise ValidationError(
        f"Invalid feedback value: {value!r}",
        details={"allowed": [FeedbackValue.POSITIVE.value, FeedbackValue.NEGATIVE.value, None]}
    )


class FeedbackService:
    """List, tag, archive and seed feedback records."""

    def __init__(self, store: FeedbackStore):
        self.store = store

    @service_error_handler("FeedbackService", "list feedback")
    async def list_feedback(self, raw_params: Optional[Mapping[str, Any]] = None) -> List[FeedbackRecord]:
        params = parse_query_params(raw_params or {})
        feedback_filter = FeedbackFilter(
            schema_name=params.schema_name,
            feedback=params.feedback,
            include_hidden=params.show_hidden,
            search=params.search,
        )
        return await self.store.find(feedback_filter, limit=params.limit)

    @service_error_handler("FeedbackService", "set feedback")
    async def set_feedback(self, record_id: str, value: Union[str, FeedbackValue, None]) -> FeedbackRecord:
        feedback = parse_feedback_value(value)
        record = await self.store.update_field(record_id, FIELD_FEEDBACK, feedback)
        logger.info(f"Feedback {record_id} tagged {feedback.value}")
        return record

    @service_error_handler("FeedbackService", "set hidden")
    async def set_hidden(self, record_id: str, hidden: bool) -> FeedbackRecord:
        record = await self.store.update_field(record_id, FIELD_HIDDEN, bool(hidden))
        logger.info(f"Feedback {record_id} {'archived' if hidden else 'restored'}")
        return record

    @service_error_handler("FeedbackService", "seed")
    async def seed(self) -> List[FeedbackRecord]:
        """Insert the demonstration record. Each call adds another copy."""
        logger.info("Inserting seed data")
        inserted = await self.store.insert_many(demo_records())
        logger.info(f"Seed inserted {len(inserted)} record(s): {[r.id for r in inserted]}")
        return inserted

    @service_error_handler("FeedbackService", "seed smoke test")
    async def seed_smoke_test(self) -> List[FeedbackRecord]:
        return await self.store.insert_many(smoke_test_records())

    @service_error_handler("FeedbackService", "list schemas")
    async def list_schemas(self, show_hidden: Any = False) -> List[str]:
        include_hidden = parse_query_params({"showHidden": show_hidden}).show_hidden
        return await self.store.distinct_schemas(include_hidden=include_hidden)

    @service_error_handler("FeedbackService", "get stats")
    async def get_stats(self, show_hidden: Any = False) -> Dict[str, int]:
        include_hidden = parse_query_params({"showHidden": show_hidden}).show_hidden
        return await self.store.count_by_feedback(include_hidden=include_hidden)
