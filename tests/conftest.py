"""
Pytest configuration and fixtures for index control tests.
"""

import pytest
import os
import sys
from unittest.mock import Mock, patch

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)

from elasticsearch import ApiError, NotFoundError

from core.client import Client
from index_types.primitives import Response


def build_api_response(body=None, status=200):
    """Stand-in for an elastic_transport ApiResponse."""
    api_response = Mock()
    api_response.body = body if body is not None else {}
    api_response.meta = Mock(status=status, duration=0.01)
    return api_response


def build_api_error(status, error_type, reason="", error_class=ApiError):
    """Stand-in for an ApiError raised by elasticsearch-py."""
    body = {
        "error": {
            "root_cause": [{"type": error_type, "reason": reason}],
            "type": error_type,
            "reason": reason,
        },
        "status": status,
    }
    return error_class(message=error_type, meta=Mock(status=status), body=body)


@pytest.fixture
def api_response():
    """Factory for fake ApiResponse objects."""
    return build_api_response


@pytest.fixture
def api_error():
    """Factory for fake ApiError exceptions."""
    return build_api_error


@pytest.fixture
def index_not_found():
    """NotFoundError as raised for a missing index."""
    return build_api_error(
        404,
        "index_not_found_exception",
        reason="no such index [test-index]",
        error_class=NotFoundError,
    )


@pytest.fixture
def mock_elasticsearch():
    """Mock Elasticsearch client for testing."""
    mock_es = Mock()

    mock_es.perform_request.return_value = build_api_response({"acknowledged": True})

    mock_es.bulk.return_value = {
        "took": 3,
        "errors": False,
        "items": [
            {"index": {"_index": "test-index", "_id": "1", "status": 201}},
        ],
    }

    mock_es.info.return_value = {"version": {"number": "8.13.0"}}

    return mock_es


@pytest.fixture
def client(mock_elasticsearch):
    """Client wired to the mocked Elasticsearch client."""
    return Client(mock_elasticsearch)


@pytest.fixture
def mock_client():
    """Mock REST client for index-level tests."""
    mock = Mock(spec=Client)
    mock.request.return_value = Response(data={"acknowledged": True}, status=200)
    return mock


@pytest.fixture
def mock_es_client(mock_elasticsearch):
    """Patch the get_elasticsearch_client function."""
    with patch('utils.connection.get_elasticsearch_client', return_value=mock_elasticsearch):
        yield mock_elasticsearch


@pytest.fixture
def sample_search_response():
    """Search response body."""
    return {
        "took": 4,
        "timed_out": False,
        "hits": {
            "total": {"value": 2},
            "hits": [
                {"_index": "test-index", "_id": "1", "_source": {"title": "foo"}},
                {"_index": "test-index", "_id": "2", "_source": {"title": "foo bar"}},
            ],
        },
    }


@pytest.fixture
def sample_stats_response():
    """Stats response body keyed by the real index name."""
    return {
        "_all": {},
        "indices": {
            "test-index-v2": {
                "primaries": {
                    "docs": {"count": 1000, "deleted": 3},
                    "store": {"size_in_bytes": 1024000},
                    "indexing": {"index_total": 1000, "index_time_in_millis": 5000},
                    "search": {"query_total": 50, "query_time_in_millis": 1000},
                    "segments": {"count": 5},
                }
            }
        },
    }
