"""
Unit tests for the REST client.
"""

import pytest
from elasticsearch import ConnectionError as ESConnectionError, NotFoundError

from core.client import Client, JSON_HEADERS
from core.index import Index
from core.status import Status
from index_types.errors import (
    BulkResponseError,
    IndexNotFoundError,
    InvalidError,
    ResponseError,
)
from index_types.primitives import Document, Method, Response


class TestRequest:
    """Test cases for Client.request."""

    def test_request_shape(self, client, mock_elasticsearch):
        response = client.request("test-index/", Method.PUT, {"settings": {}}, {"routing": "r1"})

        mock_elasticsearch.perform_request.assert_called_once_with(
            "PUT",
            "/test-index/",
            params={"routing": "r1"},
            headers=JSON_HEADERS,
            body={"settings": {}},
        )
        assert isinstance(response, Response)
        assert response.data == {"acknowledged": True}
        assert response.status == 200
        assert response.transfer_info["http_code"] == 200

    def test_empty_body_and_query_are_omitted(self, client, mock_elasticsearch):
        client.request("test-index/", Method.DELETE)

        mock_elasticsearch.perform_request.assert_called_once_with(
            "DELETE", "/test-index/", params=None, headers=JSON_HEADERS, body=None
        )

    def test_method_given_as_string(self, client, mock_elasticsearch):
        client.request("_aliases", "POST", {"actions": []})

        assert mock_elasticsearch.perform_request.call_args[0][0] == "POST"

    def test_query_values_are_stringified(self, client, mock_elasticsearch):
        client.request("test-index/_flush", Method.POST, {}, {"refresh": False, "size": 5})

        params = mock_elasticsearch.perform_request.call_args[1]["params"]
        assert params == {"refresh": "false", "size": "5"}

    def test_raw_string_body(self, client, mock_elasticsearch, api_response):
        mock_elasticsearch.perform_request.return_value = api_response({"tokens": []})

        client.request("test-index/_analyze", Method.POST, "some text")

        assert mock_elasticsearch.perform_request.call_args[1]["body"] == "some text"

    def test_index_not_found(self, client, mock_elasticsearch, index_not_found):
        mock_elasticsearch.perform_request.side_effect = index_not_found

        with pytest.raises(IndexNotFoundError) as exc_info:
            client.request("test-index/", Method.DELETE)

        error = exc_info.value
        assert error.status == 404
        assert error.error_type == "index_not_found_exception"
        assert error.request.path == "test-index/"
        assert error.__cause__ is index_not_found

    def test_other_404_is_not_index_not_found(self, client, mock_elasticsearch, api_error):
        mock_elasticsearch.perform_request.side_effect = api_error(
            404, "resource_not_found_exception", error_class=NotFoundError
        )

        with pytest.raises(ResponseError) as exc_info:
            client.request("_alias/live", Method.GET)

        assert not isinstance(exc_info.value, IndexNotFoundError)
        assert exc_info.value.status == 404

    def test_error_status(self, client, mock_elasticsearch, api_error):
        mock_elasticsearch.perform_request.side_effect = api_error(
            400, "resource_already_exists_exception"
        )

        with pytest.raises(ResponseError, match="status 400") as exc_info:
            client.request("test-index/", Method.PUT)

        assert exc_info.value.error_type == "resource_already_exists_exception"

    def test_head_error_status_is_returned(self, client, mock_elasticsearch, index_not_found):
        mock_elasticsearch.perform_request.side_effect = index_not_found

        response = client.request("test-index", Method.HEAD)

        assert response.status == 404
        assert response.data == {}

    def test_head_success(self, client, mock_elasticsearch, api_response):
        mock_elasticsearch.perform_request.return_value = api_response(True, status=200)

        response = client.request("test-index", Method.HEAD)

        assert response.status == 200
        assert response.data == {}

    def test_connection_errors_propagate_unchanged(self, client, mock_elasticsearch):
        error = ESConnectionError("Connection refused")
        mock_elasticsearch.perform_request.side_effect = error

        with pytest.raises(ESConnectionError) as exc_info:
            client.request("test-index/", Method.GET)

        assert exc_info.value is error


class TestFactories:
    """Test cases for client helpers."""

    def test_from_environment(self, mock_es_client):
        client = Client.from_environment()

        assert client.es is mock_es_client

    def test_context_manager_closes_transport(self, mock_elasticsearch):
        with Client(mock_elasticsearch) as client:
            client.request("test-index/", Method.GET)
            mock_elasticsearch.close.assert_not_called()

        mock_elasticsearch.close.assert_called_once()

    def test_get_index(self, client):
        index = client.get_index("test-index")

        assert isinstance(index, Index)
        assert index.client is client
        assert index.name == "test-index"

    def test_get_status(self, client):
        assert isinstance(client.get_status(), Status)


class TestBulk:
    """Test cases for the bulk executor."""

    def test_add_documents(self, client, mock_elasticsearch):
        docs = [
            Document(id="1", data={"title": "foo"}, index="test-index"),
            Document(data={"title": "bar"}, index="test-index", routing="r1"),
        ]

        result = client.add_documents(docs)

        mock_elasticsearch.bulk.assert_called_once_with(operations=[
            {"index": {"_index": "test-index", "_id": "1"}},
            {"title": "foo"},
            {"index": {"_index": "test-index", "routing": "r1"}},
            {"title": "bar"},
        ])
        assert result.errors is False
        assert result.took == 3

    def test_update_documents(self, client, mock_elasticsearch):
        client.update_documents([Document(id="1", data={"title": "baz"}, index="test-index")])

        mock_elasticsearch.bulk.assert_called_once_with(operations=[
            {"update": {"_index": "test-index", "_id": "1"}},
            {"doc": {"title": "baz"}},
        ])

    def test_delete_documents(self, client, mock_elasticsearch):
        client.delete_documents([Document(id="1", index="test-index")])

        mock_elasticsearch.bulk.assert_called_once_with(operations=[
            {"delete": {"_index": "test-index", "_id": "1"}},
        ])

    def test_empty_input(self, client, mock_elasticsearch):
        with pytest.raises(InvalidError):
            client.add_documents([])

        mock_elasticsearch.bulk.assert_not_called()

    def test_item_failures(self, client, mock_elasticsearch):
        mock_elasticsearch.bulk.return_value = {
            "took": 2,
            "errors": True,
            "items": [
                {"index": {"_id": "1", "status": 201}},
                {"index": {"_id": "2", "status": 400, "error": {"type": "mapper_parsing_exception"}}},
            ],
        }

        with pytest.raises(BulkResponseError, match="1 of 2") as exc_info:
            client.add_documents([
                Document(id="1", data={}, index="test-index"),
                Document(id="2", data={}, index="test-index"),
            ])

        failed = exc_info.value.bulk_response.failed_items()
        assert len(failed) == 1
        assert failed[0]["operation"] == "index"
        assert failed[0]["_id"] == "2"
