"""
esreview Demo — One Function per Operation
==========================================

Each function runs one request against a ReviewIndex, prints the outcome
and returns it. A failed request is printed as
``<operation> failed, err: <error>`` and the function returns None; a
missing document takes the same path as any other failure.
"""

import json
from typing import Optional, Union

from elasticsearch import ApiError, TransportError

from .core import ReviewIndex
from .models import RAW_REVISION, Review, revised_review, sample_review
from .queries import SearchResult


# Errors raised by the client for a failed request
REQUEST_ERRORS = (ApiError, TransportError)


def _dump(doc: dict) -> str:
    return json.dumps(doc, ensure_ascii=False)


def _print_hits(result: SearchResult):
    print(f"total: {result.total}")
    for source in result.hits:
        print(_dump(source))


def create_index(index: ReviewIndex) -> Optional[bool]:
    try:
        acknowledged = index.create()
    except REQUEST_ERRORS as e:
        print(f"CreateIndex failed, err: {e}")
        return None
    print(f"CreateIndex succeed! ack: {acknowledged}")
    return acknowledged


def index_document(index: ReviewIndex, review: Optional[Review] = None):
    review = review or sample_review()
    try:
        response = index.add(review)
    except REQUEST_ERRORS as e:
        print(f"Index failed, err: {e}")
        return None
    print(f"resp: result={response['result']} id={response['_id']} version={response['_version']}")
    return response


def get_document(index: ReviewIndex, doc_id: str) -> Optional[dict]:
    try:
        source = index.get(doc_id)
    except REQUEST_ERRORS as e:
        print(f"Get failed, err: {e}")
        return None
    print(f"resp: {_dump(source)}")
    return source


def search_all(index: ReviewIndex) -> Optional[SearchResult]:
    """Print the total and every document in the index."""
    try:
        result = index.match_all()
    except REQUEST_ERRORS as e:
        print(f"search document failed, err: {e}")
        return None
    _print_hits(result)
    return result


def search_phrase(
    index: ReviewIndex,
    field: str = "content",
    phrase: str = "好评"
) -> Optional[SearchResult]:
    """Print the total and every document whose field contains the phrase."""
    try:
        result = index.match_phrase(field, phrase)
    except REQUEST_ERRORS as e:
        print(f"search document failed, err: {e}")
        return None
    _print_hits(result)
    return result


def average_score(index: ReviewIndex, field: str = "score") -> Optional[float]:
    try:
        value = index.average(field)
    except REQUEST_ERRORS as e:
        print(f"aggregation failed, err: {e}")
        return None
    print(f"avg {field}: {value}")
    return value


def update_document(
    index: ReviewIndex,
    doc_id: str = "1",
    review: Optional[Review] = None
) -> Optional[str]:
    review = review or revised_review()
    try:
        result = index.update(doc_id, review)
    except REQUEST_ERRORS as e:
        print(f"update document failed, err: {e}")
        return None
    print(f"result: {result}")
    return result


def update_document_raw(
    index: ReviewIndex,
    doc_id: str = "1",
    raw: Union[str, bytes] = RAW_REVISION
) -> Optional[str]:
    try:
        result = index.update_raw(doc_id, raw)
    except REQUEST_ERRORS as e:
        print(f"update document failed, err: {e}")
        return None
    print(f"result: {result}")
    return result
