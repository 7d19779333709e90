"""
MongoDB-backed store for feedback records.

The store is constructed explicitly around a motor client and passed to the
service layer; the application lifespan drives open()/close().
"""

from typing import Any, Dict, List, Sequence

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING, IndexModel, ReturnDocument
from pymongo.errors import PyMongoError

from feedback_review.config.database import MongoDBConfig
from feedback_review.constants import (
    FIELD_CREATED_AT,
    FIELD_FEEDBACK,
    FIELD_HIDDEN,
    FIELD_SCHEMA,
    UPDATABLE_FIELDS,
)
from feedback_review.core.error_handlers import repository_error_handler
from feedback_review.core.exceptions import NotFoundError, PersistenceError, ValidationError
from feedback_review.models.feedback_model import FeedbackRecord, FeedbackValue
from feedback_review.repositories.filters import FeedbackFilter
from feedback_review.utils.logger import get_logger

logger = get_logger(__name__)


class FeedbackStore:
    """Repository for the feedback collection."""

    def __init__(
        self,
        client: AsyncIOMotorClient,
        database: str,
        collection: str = "feedbacks",
        owns_client: bool = True,
    ):
        """
        Initialize store.

        Args:
            client: motor client (or a compatible async client)
            database: Database name
            collection: Collection holding feedback documents
            owns_client: Whether close() should close the client
        """
        self.client = client
        self.db = client[database]
        self.collection = self.db[collection]
        self.owns_client = owns_client
        self._opened = False

    @classmethod
    def from_config(cls, config: MongoDBConfig) -> "FeedbackStore":
        """Build a store with its own client from MongoDB settings."""
        client = AsyncIOMotorClient(**config.connection_kwargs)
        return cls(client, config.DATABASE, config.COLLECTION_FEEDBACK, owns_client=True)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def open(self) -> None:
        """Check connectivity and create indexes."""
        if self._opened:
            return

        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise PersistenceError("MongoDB is unreachable", details={"error": str(e)}) from e

        await self._create_indexes()
        self._opened = True
        logger.info(f"Feedback store opened: {self.db.name}.{self.collection.name}")

    async def _create_indexes(self) -> None:
        try:
            await self.collection.create_indexes([
                IndexModel([(FIELD_CREATED_AT, DESCENDING)]),
                IndexModel([(FIELD_SCHEMA, ASCENDING)]),
                IndexModel([(FIELD_FEEDBACK, ASCENDING)]),
                IndexModel([(FIELD_HIDDEN, ASCENDING)]),
            ])
        except PyMongoError as e:
            logger.warning(f"Index creation warning (may already exist): {e}")

    async def close(self) -> None:
        """Close the client if this store created it."""
        if self.owns_client and self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self._opened = False

    async def health_check(self) -> bool:
        """Check MongoDB connection health."""
        try:
            await self.client.admin.command("ping")
            return True
        except Exception as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    # =========================================================================
    # Writes
    # =========================================================================

    @repository_error_handler("FeedbackStore", "insert many")
    async def insert_many(self, records: Sequence[FeedbackRecord]) -> List[FeedbackRecord]:
        """
        Insert records and return them with their assigned ids.

        Args:
            records: Records to store; any preset id is ignored

        Returns:
            The stored records, in input order
        """
        if not records:
            return []

        documents = [record.to_document() for record in records]
        result = await self.collection.insert_many(documents)

        return [
            record.model_copy(update={"id": str(inserted_id)})
            for record, inserted_id in zip(records, result.inserted_ids)
        ]

    @repository_error_handler("FeedbackStore", "update field")
    async def update_field(self, record_id: str, field: str, value: Any) -> FeedbackRecord:
        """
        Set a single mutable field and return the updated record.

        Args:
            record_id: Record id as a hex string
            field: "feedback" or "hidden"
            value: New value (FeedbackValue for feedback, bool for hidden)

        Raises:
            ValidationError: field is not updatable
            NotFoundError: no record has this id
        """
        if field not in UPDATABLE_FIELDS:
            raise ValidationError(
                f"Field '{field}' cannot be updated",
                details={"field": field, "allowed": sorted(UPDATABLE_FIELDS)}
            )

        object_id = self._parse_id(record_id)

        if isinstance(value, FeedbackValue):
            value = value.stored_value

        doc = await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": {field: value}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFoundError(f"Feedback {record_id} not found", details={"id": record_id})

        return FeedbackRecord.from_document(doc)

    # =========================================================================
    # Reads
    # =========================================================================

    @repository_error_handler("FeedbackStore", "find")
    async def find(self, feedback_filter: FeedbackFilter, limit: int) -> List[FeedbackRecord]:
        """
        List records matching the filter, newest first.

        Args:
            feedback_filter: Conjunction of list constraints
            limit: Maximum number of records (positive)

        Returns:
            Matching records sorted by createdAt descending; empty if none
        """
        cursor = self.collection.find(
            feedback_filter.to_query(),
            sort=[(FIELD_CREATED_AT, DESCENDING)],
            limit=limit,
        )
        documents = await cursor.to_list(length=None)
        return [FeedbackRecord.from_document(doc) for doc in documents]

    @repository_error_handler("FeedbackStore", "distinct schemas")
    async def distinct_schemas(self, include_hidden: bool = False) -> List[str]:
        """Schema labels in use, sorted alphabetically."""
        query = FeedbackFilter(include_hidden=include_hidden).to_query()
        values = await self.collection.distinct(FIELD_SCHEMA, query)
        return sorted(v for v in values if isinstance(v, str) and v)

    @repository_error_handler("FeedbackStore", "count by feedback")
    async def count_by_feedback(self, include_hidden: bool = False) -> Dict[str, int]:
        """
        Count records per feedback tag.

        Returns:
            Dictionary with total, positive, negative and unset counts over
            the visible records, plus the number of hidden records
        """
        counts = {}
        for value in FeedbackValue:
            query = FeedbackFilter(feedback=value, include_hidden=include_hidden).to_query()
            counts[value.value] = await self.collection.count_documents(query)

        visible = FeedbackFilter(include_hidden=include_hidden).to_query()
        counts["total"] = await self.collection.count_documents(visible)
        counts["hidden"] = await self.collection.count_documents({FIELD_HIDDEN: True})
        return counts

    @staticmethod
    def _parse_id(record_id: str) -> ObjectId:
        if not ObjectId.is_valid(record_id):
            raise NotFoundError(f"Feedback {record_id} not found", details={"id": record_id})
        return ObjectId(record_id)
