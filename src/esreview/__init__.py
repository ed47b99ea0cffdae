"""
esreview — Elasticsearch Review Documents Walkthrough
=====================================================

A compact tour of the Elasticsearch Python client over a single index of
user reviews: create the index, index a review, fetch it by id, run
match-all and phrase searches, average the scores and update the review
from either a Review value or raw JSON text.

Usage:
    from esreview import ReviewIndex, connect, sample_review

    index = ReviewIndex("my-review-1", connect())
    index.create()
    index.add(sample_review())
    index.refresh()

    print(index.match_phrase("content", "好评").total)
    print(index.average("score"))

Command line:
    esreview create
    esreview index
    esreview search

License: MIT
"""

__version__ = "0.1.0"

from .cluster import ConnectionFailed, connect
from .config import Settings, load_settings
from .core import ReviewIndex
from .models import Review, Tag, revised_review, sample_review
from .queries import Average, MatchAll, MatchPhrase, SearchResult

__all__ = [
    "ReviewIndex",
    "Review",
    "Tag",
    "sample_review",
    "revised_review",
    "MatchAll",
    "MatchPhrase",
    "Average",
    "SearchResult",
    "Settings",
    "load_settings",
    "connect",
    "ConnectionFailed",
]
