"""
Tests for FeedbackService: parameter translation, updates and seeding.
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from feedback_review.core.exceptions import NotFoundError, ValidationError
from feedback_review.models.feedback_model import FeedbackValue


class TestListFeedback:
    @pytest.mark.asyncio
    async def test_schema_filter_hides_archived_by_default(self, service, store, make_record):
        a, b = await store.insert_many([
            make_record(schema="mesai", hidden=False, minutes=0),
            make_record(schema="mesai", hidden=True, minutes=5),
        ])

        default = await service.list_feedback({"schema": "mesai"})
        with_hidden = await service.list_feedback({"schema": "mesai", "showHidden": "true"})

        assert [r.id for r in default] == [a.id]
        assert [r.id for r in with_hidden] == [b.id, a.id]

    @pytest.mark.asyncio
    async def test_search_matches_question_regardless_of_query(self, service, store, make_record):
        [record] = await store.insert_many([
            make_record(question="bu haftaki çalışma süremi getir", query="unrelated"),
        ])

        results = await service.list_feedback({"search": "hafta"})

        assert [r.id for r in results] == [record.id]

    @pytest.mark.asyncio
    async def test_limit_defaults_to_twenty(self, service, store, make_record):
        await store.insert_many([make_record(minutes=i) for i in range(25)])

        assert len(await service.list_feedback()) == 20
        assert len(await service.list_feedback({"limit": "abc"})) == 20
        assert len(await service.list_feedback({"limit": "3"})) == 3
        assert len(await service.list_feedback({"limit": "100"})) == 25

    @pytest.mark.asyncio
    async def test_feedback_filter(self, service, store, make_record):
        await store.insert_many([
            make_record(question="good", feedback=FeedbackValue.POSITIVE, minutes=0),
            make_record(question="bad", feedback=FeedbackValue.NEGATIVE, minutes=1),
        ])

        results = await service.list_feedback({"feedback": "negative"})

        assert [r.question for r in results] == ["bad"]

    @pytest.mark.asyncio
    async def test_invalid_feedback_filter(self, service):
        with pytest.raises(ValidationError):
            await service.list_feedback({"feedback": "meh"})

    @pytest.mark.asyncio
    async def test_unknown_stored_feedback_does_not_break_listing(self, service, store):
        await store.collection.insert_one({
            "schema": "legacy",
            "question": "q",
            "query": "a",
            "feedback": "neutral",
            "hidden": False,
            "createdAt": datetime(2024, 1, 1, tzinfo=timezone.utc),
        })
        await service.seed()

        results = await service.list_feedback()

        assert [r.schema_name for r in results] == ["mesai", "legacy"]
        assert results[1].feedback is FeedbackValue.UNSET


class TestUpdates:
    @pytest.mark.asyncio
    async def test_last_feedback_write_wins(self, service, store, make_record):
        [record] = await store.insert_many([make_record()])

        await service.set_feedback(record.id, "positive")
        updated = await service.set_feedback(record.id, "negative")

        assert updated.feedback is FeedbackValue.NEGATIVE
        doc = await store.collection.find_one({"_id": ObjectId(record.id)})
        assert doc["feedback"] == FeedbackValue.NEGATIVE.stored_value

    @pytest.mark.asyncio
    async def test_feedback_can_be_cleared(self, service, store, make_record):
        [record] = await store.insert_many([make_record(feedback=FeedbackValue.POSITIVE)])

        updated = await service.set_feedback(record.id, None)

        assert updated.feedback is FeedbackValue.UNSET

    @pytest.mark.asyncio
    async def test_invalid_feedback_value_is_not_persisted(self, service, store, make_record):
        [record] = await store.insert_many([make_record()])

        with pytest.raises(ValidationError):
            await service.set_feedback(record.id, "excellent")

        doc = await store.collection.find_one({"_id": ObjectId(record.id)})
        assert doc["feedback"] == FeedbackValue.UNSET.stored_value

    @pytest.mark.asyncio
    async def test_unset_string_is_not_a_writable_value(self, service, store, make_record):
        [record] = await store.insert_many([make_record(feedback=FeedbackValue.POSITIVE)])

        with pytest.raises(ValidationError):
            await service.set_feedback(record.id, "unset")

        doc = await store.collection.find_one({"_id": ObjectId(record.id)})
        assert doc["feedback"] == "positive"

    @pytest.mark.asyncio
    async def test_set_feedback_unknown_id(self, service):
        with pytest.raises(NotFoundError):
            await service.set_feedback(str(ObjectId()), "positive")

    @pytest.mark.asyncio
    async def test_archive_and_restore(self, service, store, make_record):
        [record] = await store.insert_many([make_record()])

        await service.set_hidden(record.id, True)
        assert await service.list_feedback() == []
        assert [r.id for r in await service.list_feedback({"showHidden": "true"})] == [record.id]

        await service.set_hidden(record.id, False)
        assert [r.id for r in await service.list_feedback()] == [record.id]


class TestSeed:
    @pytest.mark.asyncio
    async def test_seed_twice_duplicates_record(self, service):
        first = await service.seed()
        second = await service.seed()

        assert len(first) == len(second) == 1
        assert first[0].id != second[0].id

        stored = await service.list_feedback()
        assert len(stored) == 2
        content = [
            r.model_dump(exclude={"id", "created_at"}) for r in stored
        ]
        assert content[0] == content[1]

    @pytest.mark.asyncio
    async def test_seed_content(self, service):
        [record] = await service.seed()

        assert record.schema_name == "mesai"
        assert record.question == "bu haftaki çalışma süremi getir"
        assert record.query == "Bu hafta toplamda 35.3 saat çalıştınız"
        assert record.feedback is FeedbackValue.UNSET
        assert record.hidden is False
        assert [t.message for t in record.conversation] == [
            "bu haftaki çalışma süremi getir",
            "isteğinizi işleme alıyorum. ",
            "Bu hafta toplamda 35.3 saat çalıştınız.",
        ]

    @pytest.mark.asyncio
    async def test_seed_smoke_test(self, service):
        [record] = await service.seed_smoke_test()

        assert record.schema_name == "test"
        assert record.conversation[0].message == "test"


class TestSummaries:
    @pytest.mark.asyncio
    async def test_list_schemas_and_stats(self, service, store, make_record):
        await store.insert_many([
            make_record(schema="mesai", feedback=FeedbackValue.POSITIVE),
            make_record(schema="izin", hidden=True),
        ])

        assert await service.list_schemas() == ["mesai"]
        assert await service.list_schemas("true") == ["izin", "mesai"]

        stats = await service.get_stats()
        assert stats["total"] == 1
        assert stats["positive"] == 1
        assert stats["hidden"] == 1
