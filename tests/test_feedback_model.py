from datetime import datetime, timedelta

from bson import ObjectId

from feedback_review.models.feedback_model import ConversationRole, FeedbackRecord, FeedbackValue


def test_from_document_maps_persisted_names():
    oid = ObjectId()
    record = FeedbackRecord.from_document({
        "_id": oid,
        "schema": "mesai",
        "question": "q",
        "query": "a",
        "feedback": None,
        "hidden": False,
        "conversation": [{"role": "user", "message": "q"}],
        "createdAt": datetime(2025, 1, 1),
        "__v": 0,
    })

    assert record.id == str(oid)
    assert record.schema_name == "mesai"
    assert record.feedback is FeedbackValue.UNSET
    assert record.conversation[0].role is ConversationRole.USER


def test_to_document_stores_unset_as_null():
    record = FeedbackRecord(schema_name="mesai", question="q", query="a")
    doc = record.to_document()

    assert "id" not in doc and "_id" not in doc
    assert doc["schema"] == "mesai"
    assert doc["feedback"] is None
    assert doc["hidden"] is False
    assert isinstance(doc["createdAt"], datetime)


def test_json_output_uses_api_field_names():
    record = FeedbackRecord(id="abc", schema_name="mesai", feedback=FeedbackValue.POSITIVE)
    data = record.model_dump(mode="json", by_alias=True)

    assert data["id"] == "abc"
    assert data["schema"] == "mesai"
    assert data["feedback"] == "positive"
    assert "createdAt" in data


def test_naive_created_at_is_read_as_utc():
    record = FeedbackRecord.from_document({"_id": ObjectId(), "createdAt": datetime(2025, 1, 1, 9, 30)})

    assert record.created_at.tzinfo is not None
    assert record.created_at.utcoffset() == timedelta(0)
    assert record.model_dump(mode="json", by_alias=True)["createdAt"].endswith(("Z", "+00:00"))


def test_unknown_stored_feedback_is_read_as_unset():
    record = FeedbackRecord.from_document({"_id": ObjectId(), "feedback": "neutral"})

    assert record.feedback is FeedbackValue.UNSET
