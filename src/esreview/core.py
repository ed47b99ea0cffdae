"""
esreview Core — Review Index
============================

Thin wrapper binding an Elasticsearch client to one index of review
documents. Each method issues exactly one request; client errors
(``elasticsearch.ApiError`` / ``elasticsearch.TransportError``) propagate
to the caller.
"""

import logging
from typing import Optional, Union
from urllib.parse import quote

from elasticsearch import Elasticsearch

from .models import Review
from .queries import Average, MatchAll, MatchPhrase, Query, SearchResult


logger = logging.getLogger(__name__)


class ReviewIndex:
    """
    Review documents stored in a single Elasticsearch index.

    Example:
        client = connect()
        index = ReviewIndex("my-review-1", client)
        index.create()
        index.add(sample_review())
        print(index.get("1"))

        # Owning the client
        with ReviewIndex("my-review-1", hosts=["http://localhost:9200"]) as index:
            print(index.match_all().total)
    """

    def __init__(
        self,
        index_name: str,
        client: Optional[Elasticsearch] = None,
        hosts: Optional[list] = None
    ):
        """
        Bind to an index.

        Args:
            index_name: Name of the Elasticsearch index
            client: Existing client to use (not closed by close())
            hosts: List of ES node URLs, used only when no client is given
        """
        self.index_name = index_name
        self._owns_client = client is None

        if client is None:
            client = Elasticsearch(hosts=hosts or ["http://localhost:9200"])
        self._client = client

    @property
    def client(self) -> Elasticsearch:
        return self._client

    def create(self) -> bool:
        """
        Create the index. No existence check is made first.

        Returns:
            The acknowledged flag
        """
        response = self._client.indices.create(index=self.index_name)
        return response["acknowledged"]

    def add(self, review: Review):
        """
        Index a review under its own id.

        Returns:
            Index response (result, _id, _version, ...)
        """
        logger.debug("Indexing review %s into %s", review.doc_id, self.index_name)
        return self._client.index(
            index=self.index_name,
            id=review.doc_id,
            document=review.to_document()
        )

    def get(self, doc_id: str) -> dict:
        """
        Fetch a stored document.

        Returns:
            The document source
        """
        response = self._client.get(index=self.index_name, id=doc_id)
        return response["_source"]

    def search(self, query: Query, size: Optional[int] = None) -> SearchResult:
        """
        Run a query against the index.

        Args:
            query: MatchAll or MatchPhrase
            size: Maximum hits (server default when None)

        Returns:
            SearchResult with total count and hit sources
        """
        kwargs = {"index": self.index_name, "query": query.to_dict()}
        if size is not None:
            kwargs["size"] = size

        logger.debug("Searching %s with %s", self.index_name, kwargs["query"])
        return SearchResult.from_response(self._client.search(**kwargs))

    def match_all(self) -> SearchResult:
        return self.search(MatchAll())

    def match_phrase(self, field: str, phrase: str) -> SearchResult:
        return self.search(MatchPhrase(field, phrase))

    def average(self, field: str) -> Optional[float]:
        """
        Average of a numeric field over all documents.

        Returns:
            The aggregate value, None when the index holds no values
        """
        agg = Average(field)
        response = self._client.search(
            index=self.index_name,
            size=0,
            aggs=agg.to_dict()
        )
        return SearchResult.from_response(response).aggregate_value(agg.key)

    def update(self, doc_id: str, review: Review) -> str:
        """
        Partially update a document with the fields of a review.

        Returns:
            The update result ("updated" or "noop")
        """
        response = self._client.update(
            index=self.index_name,
            id=doc_id,
            doc=review.to_document()
        )
        return response["result"]

    def update_raw(self, doc_id: str, raw: Union[str, bytes]) -> str:
        """
        Partially update a document with a preformatted JSON body.

        The text is sent verbatim as the ``doc`` of the update request.

        Args:
            doc_id: Document id
            raw: JSON object text

        Returns:
            The update result ("updated" or "noop")
        """
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")

        path = f"/{quote(self.index_name, safe='')}/_update/{quote(doc_id, safe='')}"
        response = self._client.perform_request(
            "POST",
            path,
            headers={
                "accept": "application/json",
                "content-type": "application/json"
            },
            body='{"doc": ' + raw + '}'
        )
        return response["result"]

    def refresh(self):
        """Force index refresh (makes recent changes searchable)."""
        self._client.indices.refresh(index=self.index_name)

    def close(self):
        """Close the client if this index created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
