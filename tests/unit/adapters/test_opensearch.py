"""Tests for the OpenSearch client binding."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from explorer.adapters.opensearch import AsyncOpenSearchSearchClient, OpenSearchSearchClient
from explorer.application.build_command import BuildCommand
from explorer.application.finder import AsyncFinder, Finder
from explorer.config.settings import ConnectionSettings
from explorer.exceptions import ConfigurationError


class TestOpenSearchSearch:
    def test_sends_body_and_pagination(self) -> None:
        request = BuildCommand("docs").set_offset(0).set_limit(25).compile()
        native = MagicMock()
        native.search.return_value = {"hits": {"total": {"value": 0}, "hits": []}}

        OpenSearchSearchClient(native).search(request)

        native.search.assert_called_once_with(index="docs", body=request["body"], from_=0, size=25)

    def test_returns_plain_dict(self) -> None:
        native = MagicMock()
        native.search.return_value = {"hits": {"hits": []}}

        response = OpenSearchSearchClient(native).search(BuildCommand("docs").compile())

        assert response == {"hits": {"hits": []}}

    def test_count_asks_for_exact_total(self) -> None:
        native = MagicMock()
        native.search.return_value = {"hits": {"total": {"value": 12000}, "hits": []}}

        assert Finder(OpenSearchSearchClient(native), BuildCommand("docs")).count() == 12000
        assert native.search.call_args.kwargs["body"]["track_total_hits"] is True

    async def test_async_finder_roundtrip(self, hit) -> None:
        native = AsyncMock()
        native.search.return_value = {"hits": {"total": {"value": 1}, "hits": [hit]}}

        results = await AsyncFinder(AsyncOpenSearchSearchClient(native), BuildCommand("docs")).find()

        assert results.total == 1
        native.search.assert_awaited_once()


class TestOpenSearchFromSettings:
    def test_missing_package_raises(self) -> None:
        with patch.dict("sys.modules", {"opensearchpy": None}), pytest.raises(ConfigurationError):
            OpenSearchSearchClient.from_settings(ConnectionSettings(engine="opensearch"))

    def test_client_kwargs(self) -> None:
        module = MagicMock()
        settings = ConnectionSettings(engine="opensearch", username="admin", password="admin", api_key="k")

        with patch.dict("sys.modules", {"opensearchpy": module}):
            AsyncOpenSearchSearchClient.from_settings(settings)

        module.AsyncOpenSearch.assert_called_once_with(
            hosts=["http://localhost:9200"],
            verify_certs=True,
            ssl_show_warn=False,
            timeout=10.0,
            http_auth=("admin", "admin"),
            headers={"Authorization": "ApiKey k"},
        )
