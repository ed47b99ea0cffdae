"""
esreview Models — Review Documents
==================================

Review and Tag records plus their JSON document shape:

    {
        "id": 1,
        "userId": 1499,
        "score": 5,
        "content": "...",
        "tags": [{"code": 1000, "title": "..."}],
        "status": 2,
        "publishTime": "2023-12-10T15:27:18.219385+08:00"
    }
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List


SCORE_MIN = 0
SCORE_MAX = 255


@dataclass
class Tag:
    """Tag embedded in a review."""

    code: int
    title: str

    def to_document(self) -> Dict[str, Any]:
        return {"code": self.code, "title": self.title}

    @classmethod
    def from_document(cls, doc: dict) -> "Tag":
        return cls(code=int(doc["code"]), title=doc["title"])


@dataclass
class Review:
    """
    A single user review.

    The numeric id doubles as the Elasticsearch document id, so it has to stay
    the same across index and update calls.

    Example:
        review = Review(id=1, user_id=1499, score=5, content="Nice!")
        client.index(index="my-review-1", id=review.doc_id, document=review.to_document())
    """

    id: int
    user_id: int
    score: int
    content: str
    tags: List[Tag] = field(default_factory=list)
    status: int = 0
    publish_time: datetime = field(default_factory=lambda: datetime.now().astimezone())

    def __post_init__(self):
        if not SCORE_MIN <= self.score <= SCORE_MAX:
            raise ValueError(
                f"score must be between {SCORE_MIN} and {SCORE_MAX}, got {self.score}"
            )
        # Naive timestamps are local time
        if self.publish_time.tzinfo is None:
            self.publish_time = self.publish_time.astimezone()

    @property
    def doc_id(self) -> str:
        return str(self.id)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "score": self.score,
            "content": self.content,
            "tags": [t.to_document() for t in self.tags],
            "status": self.status,
            "publishTime": self.publish_time.isoformat()
        }

    @classmethod
    def from_document(cls, doc: dict) -> "Review":
        """
        Build a Review from a stored document (e.g. a hit's ``_source``).

        Args:
            doc: Document in the stored JSON shape

        Returns:
            Review instance
        """
        published = doc["publishTime"]
        if published.endswith("Z"):
            published = published[:-1] + "+00:00"

        return cls(
            id=int(doc["id"]),
            user_id=int(doc["userId"]),
            score=int(doc["score"]),
            content=doc["content"],
            tags=[Tag.from_document(t) for t in doc.get("tags", [])],
            status=int(doc.get("status", 0)),
            publish_time=datetime.fromisoformat(published)
        )


def sample_review() -> Review:
    """The review indexed by the ``index`` command."""
    return Review(
        id=1,
        user_id=1499,
        score=5,
        content="这是一个好评!",
        tags=[
            Tag(1000, "好评"),
            Tag(1100, "物有所值"),
            Tag(9000, "有图"),
        ],
        status=2
    )


def revised_review() -> Review:
    """Replacement for review 1 used by the ``update`` command."""
    return Review(
        id=1,
        user_id=147982601,
        score=5,
        content="这是一个修改后的好评！",
        tags=[
            Tag(1000, "好评"),
            Tag(9000, "有图"),
        ],
        status=2
    )


# Preformatted body used by the ``update-raw`` command
RAW_REVISION = """{
    "id": 1,
    "userId": 147982601,
    "score": 5,
    "content": "这是一个二次修改后的好评！",
    "tags": [
        {"code": 1000, "title": "好评"},
        {"code": 9000, "title": "有图"}
    ],
    "status": 2,
    "publishTime": "2023-12-10T15:27:18.219385+08:00"
}"""
