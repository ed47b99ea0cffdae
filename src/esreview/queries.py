"""
esreview Queries — Request Builders
===================================

Small builders for the two supported query kinds and the average
aggregation, plus a reader for search responses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class MatchAll:
    """Match every document in the index."""

    def to_dict(self) -> Dict[str, Any]:
        return {"match_all": {}}


@dataclass(frozen=True)
class MatchPhrase:
    """Match documents whose ``field`` contains ``query`` as an exact phrase."""

    field: str
    query: str

    def to_dict(self) -> Dict[str, Any]:
        return {"match_phrase": {self.field: {"query": self.query}}}


Query = Union[MatchAll, MatchPhrase]


@dataclass(frozen=True)
class Average:
    """
    Average metric aggregation over a numeric field.

    The result is keyed as ``name``, defaulting to ``avg_<field>``.
    """

    field: str
    name: Optional[str] = None

    @property
    def key(self) -> str:
        return self.name or f"avg_{self.field}"

    def to_dict(self) -> Dict[str, Any]:
        return {self.key: {"avg": {"field": self.field}}}


@dataclass
class SearchResult:
    """Total hit count, hit sources and raw aggregation results of a search."""

    total: int
    hits: List[dict] = field(default_factory=list)
    aggregations: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response) -> "SearchResult":
        # Client responses wrap the decoded JSON in .body
        response = getattr(response, "body", response)
        hits = response["hits"]
        total = hits.get("total") or {}
        # total is an object since ES 7, a plain number before that
        if isinstance(total, dict):
            total = total.get("value", 0)

        return cls(
            total=int(total),
            hits=[hit.get("_source", {}) for hit in hits.get("hits", [])],
            aggregations=dict(response.get("aggregations") or {})
        )

    def aggregate_value(self, key: str) -> Optional[float]:
        """Value of a single-metric aggregation, ``None`` if nothing matched."""
        return self.aggregations[key].get("value")
