"""
Unit tests for the settings and stats accessors.
"""

import pytest

from core.index import Index
from index_types.primitives import IndexStats, Method, Response


@pytest.fixture
def settings_response():
    return Response(
        data={
            "real-index": {
                "settings": {
                    "index": {
                        "number_of_shards": "1",
                        "number_of_replicas": "2",
                        "refresh_interval": "30s",
                    }
                }
            }
        },
        status=200,
    )


class TestIndexSettings:
    """Test cases for IndexSettings."""

    def test_get_all(self, mock_client, settings_response):
        mock_client.request.return_value = settings_response
        settings = Index(mock_client, "alias-name").get_settings()

        assert settings.get()["number_of_shards"] == "1"
        mock_client.request.assert_called_once_with("alias-name/_settings", Method.GET, {}, {})

    @pytest.mark.parametrize("key", ["refresh_interval", "index.refresh_interval"])
    def test_get_single_value(self, mock_client, settings_response, key):
        mock_client.request.return_value = settings_response
        settings = Index(mock_client, "test-index").get_settings()

        assert settings.get(key) == "30s"

    def test_get_unset_value(self, mock_client, settings_response):
        mock_client.request.return_value = settings_response

        assert Index(mock_client, "test-index").get_settings().get("blocks.write") is None

    def test_replicas(self, mock_client, settings_response):
        mock_client.request.return_value = settings_response
        settings = Index(mock_client, "test-index").get_settings()

        assert settings.get_number_of_replicas() == 2

        settings.set_number_of_replicas(0)
        mock_client.request.assert_called_with(
            "test-index/_settings", Method.PUT, {"index": {"number_of_replicas": 0}}, {}
        )

    def test_refresh_interval_default(self, mock_client):
        mock_client.request.return_value = Response(
            data={"test-index": {"settings": {"index": {}}}},
            status=200,
        )

        assert Index(mock_client, "test-index").get_settings().get_refresh_interval() == "1s"

    def test_set_refresh_interval(self, mock_client):
        Index(mock_client, "test-index").get_settings().set_refresh_interval("-1")

        mock_client.request.assert_called_once_with(
            "test-index/_settings", Method.PUT, {"index": {"refresh_interval": "-1"}}, {}
        )


class TestIndexStatsResource:
    """Test cases for IndexStatsResource."""

    def test_get(self, mock_client, sample_stats_response):
        mock_client.request.return_value = Response(data=sample_stats_response, status=200)

        stats = Index(mock_client, "test-index").get_stats().get()

        mock_client.request.assert_called_once_with("test-index/_stats", Method.GET, {}, {})
        assert isinstance(stats, IndexStats)
        assert stats.index == "test-index-v2"
        assert stats.docs_count == 1000
        assert stats.docs_deleted == 3
        assert stats.store_size_bytes == 1024000
        assert stats.segments_count == 5

    def test_get_without_indices(self, mock_client):
        mock_client.request.return_value = Response(data={"_all": {}}, status=200)

        stats = Index(mock_client, "test-index").get_stats().get()

        assert stats.index == "test-index"
        assert stats.docs_count == 0

    def test_no_caching(self, mock_client, sample_stats_response):
        mock_client.request.return_value = Response(data=sample_stats_response, status=200)
        resource = Index(mock_client, "test-index").get_stats()

        resource.get_raw()
        resource.get_raw()

        assert mock_client.request.call_count == 2
