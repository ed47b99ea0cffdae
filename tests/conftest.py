import os
import sys
from pathlib import Path

import pytest

# Make the package importable when running tests from the repo root
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: tests that require a running Elasticsearch cluster",
    )


def pytest_collection_modifyitems(config, items):
    if os.getenv("ESREVIEW_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set ESREVIEW_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


class DummyIndices:
    def __init__(self):
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(("create", kwargs))
        return {"acknowledged": True, "index": kwargs["index"]}

    def refresh(self, **kwargs):
        self.calls.append(("refresh", kwargs))
        return {}


class DummyClient:
    """Records call kwargs and returns canned responses."""

    def __init__(self, search_response=None, source=None):
        self.indices = DummyIndices()
        self.calls = []
        self.closed = False
        self.search_response = search_response or {
            "hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}
        }
        self.source = source or {}

    def index(self, **kwargs):
        self.calls.append(("index", kwargs))
        return {"result": "created", "_id": kwargs["id"], "_version": 1}

    def get(self, **kwargs):
        self.calls.append(("get", kwargs))
        return {"_id": kwargs["id"], "found": True, "_source": self.source}

    def search(self, **kwargs):
        self.calls.append(("search", kwargs))
        return self.search_response

    def update(self, **kwargs):
        self.calls.append(("update", kwargs))
        return {"result": "updated"}

    def perform_request(self, method, path, **kwargs):
        self.calls.append(("perform_request", dict(kwargs, method=method, path=path)))
        return {"result": "noop"}

    def close(self):
        self.closed = True


@pytest.fixture
def client():
    return DummyClient()
