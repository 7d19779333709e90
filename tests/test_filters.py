from feedback_review.models.feedback_model import FeedbackValue
from feedback_review.repositories.filters import FeedbackFilter


def test_empty_filter_only_excludes_hidden():
    assert FeedbackFilter().to_query() == {"hidden": {"$ne": True}}


def test_include_hidden_drops_hidden_constraint():
    assert FeedbackFilter(include_hidden=True).to_query() == {}


def test_all_terms_are_combined():
    query = FeedbackFilter(
        schema_name="mesai",
        feedback=FeedbackValue.NEGATIVE,
        search="hafta",
    ).to_query()

    assert query["schema"] == "mesai"
    assert query["feedback"] == "negative"
    assert query["hidden"] == {"$ne": True}
    assert query["$or"] == [
        {"question": {"$regex": "hafta", "$options": "i"}},
        {"query": {"$regex": "hafta", "$options": "i"}},
    ]


def test_unset_feedback_matches_null():
    query = FeedbackFilter(feedback=FeedbackValue.UNSET, include_hidden=True).to_query()
    assert query == {"feedback": None}


def test_search_is_matched_literally():
    query = FeedbackFilter(search="35.3 (saat)", include_hidden=True).to_query()
    pattern = query["$or"][0]["question"]["$regex"]
    assert pattern == r"35\.3\ \(saat\)"


def test_empty_search_is_no_constraint():
    assert "$or" not in FeedbackFilter(search="").to_query()
