from datetime import datetime, timedelta, timezone

import pytest

from esreview.models import RAW_REVISION, Review, Tag, revised_review, sample_review


def test_to_document_uses_wire_field_names():
    published = datetime(2023, 12, 10, 15, 27, 18, 219385, tzinfo=timezone(timedelta(hours=8)))
    review = Review(
        id=7,
        user_id=1499,
        score=4,
        content="ok",
        tags=[Tag(1000, "a"), Tag(9000, "b")],
        status=2,
        publish_time=published,
    )

    assert review.to_document() == {
        "id": 7,
        "userId": 1499,
        "score": 4,
        "content": "ok",
        "tags": [{"code": 1000, "title": "a"}, {"code": 9000, "title": "b"}],
        "status": 2,
        "publishTime": "2023-12-10T15:27:18.219385+08:00",
    }
    assert review.doc_id == "7"


@pytest.mark.parametrize("score", [-1, 256])
def test_score_out_of_range_rejected(score):
    with pytest.raises(ValueError):
        Review(id=1, user_id=1, score=score, content="x")


def test_naive_publish_time_gets_offset():
    review = Review(id=1, user_id=1, score=0, content="x", publish_time=datetime(2024, 1, 1, 12))
    assert review.publish_time.tzinfo is not None
    assert review.to_document()["publishTime"][-6] in "+-"


def test_from_document_accepts_utc_z_suffix():
    review = Review.from_document({
        "id": 3,
        "userId": 9,
        "score": 5,
        "content": "c",
        "tags": [{"code": 1, "title": "t"}],
        "status": 1,
        "publishTime": "2024-05-01T10:00:00Z",
    })

    assert review.id == 3
    assert review.tags == [Tag(1, "t")]
    assert review.publish_time == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)


def test_sample_data_targets_same_document():
    assert sample_review().doc_id == revised_review().doc_id == "1"
    assert [t.code for t in sample_review().tags] == [1000, 1100, 9000]
    assert "好评" in sample_review().content
    assert RAW_REVISION.lstrip().startswith("{")
