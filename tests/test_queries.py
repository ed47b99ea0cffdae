from esreview.queries import Average, MatchAll, MatchPhrase, SearchResult


def test_query_builders():
    assert MatchAll().to_dict() == {"match_all": {}}
    assert MatchPhrase("content", "好评").to_dict() == {
        "match_phrase": {"content": {"query": "好评"}}
    }
    assert Average("score").to_dict() == {"avg_score": {"avg": {"field": "score"}}}
    assert Average("score", name="mean").key == "mean"


def test_search_result_from_response():
    response = {
        "hits": {
            "total": {"value": 2, "relation": "eq"},
            "hits": [
                {"_id": "1", "_source": {"id": 1}},
                {"_id": "2", "_source": {"id": 2}},
            ],
        },
        "aggregations": {"avg_score": {"value": 4.0}},
    }

    result = SearchResult.from_response(response)

    assert result.total == 2
    assert result.hits == [{"id": 1}, {"id": 2}]
    assert result.aggregate_value("avg_score") == 4.0


def test_search_result_unwraps_client_response_body():
    class Wrapped:
        body = {"hits": {"total": 5, "hits": []}}

    result = SearchResult.from_response(Wrapped())
    assert result.total == 5
    assert result.aggregations == {}


def test_empty_average_is_none():
    response = {"hits": {"total": {"value": 0}, "hits": []}, "aggregations": {"avg_score": {"value": None}}}
    assert SearchResult.from_response(response).aggregate_value("avg_score") is None
