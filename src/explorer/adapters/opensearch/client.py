"""OpenSearch binding — Runs compiled requests with ``opensearch-py``.

OpenSearch shares the Elasticsearch query DSL, so compiled requests are
sent unchanged as the request body.

Install the optional dependency::

    pip install explorer[opensearch]
    # or: pip install opensearch-py
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from explorer.adapters.base.client import RawResponse, pagination_params, response_to_dict
from explorer.exceptions import ConfigurationError

if TYPE_CHECKING:
    from explorer.application.build_command import CompiledRequest
    from explorer.config.settings import ConnectionSettings

logger = logging.getLogger(__name__)


def _client_kwargs(settings: ConnectionSettings) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "hosts": settings.hosts,
        "verify_certs": settings.verify_certs,
        "ssl_show_warn": False,
        "timeout": settings.request_timeout,
    }
    if settings.username and settings.password:
        kwargs["http_auth"] = (settings.username, settings.password)
    if settings.api_key:
        kwargs["headers"] = {"Authorization": f"ApiKey {settings.api_key}"}
    kwargs.update(settings.extra)
    return kwargs


def _search_kwargs(request: CompiledRequest) -> dict[str, Any]:
    return {"index": request["index"], "body": request["body"], **pagination_params(request)}


class OpenSearchSearchClient:
    """Synchronous ``SearchClient`` backed by ``opensearchpy.OpenSearch``.

    Args:
        client: A configured ``OpenSearch`` instance.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> OpenSearchSearchClient:
        try:
            from opensearchpy import OpenSearch
        except ImportError as e:
            raise ConfigurationError(
                "opensearch-py package is required.  Install with: pip install explorer[opensearch]"
            ) from e

        logger.info("Creating OpenSearch client for %s", settings.hosts)
        return cls(OpenSearch(**_client_kwargs(settings)))

    def search(self, request: CompiledRequest) -> RawResponse:
        return response_to_dict(self._client.search(**_search_kwargs(request)))

    def close(self) -> None:
        self._client.close()


class AsyncOpenSearchSearchClient:
    """Asynchronous ``AsyncSearchClient`` backed by ``opensearchpy.AsyncOpenSearch``."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> AsyncOpenSearchSearchClient:
        try:
            from opensearchpy import AsyncOpenSearch
        except ImportError as e:
            raise ConfigurationError(
                "opensearch-py package is required.  Install with: pip install explorer[opensearch]"
            ) from e

        logger.info("Creating async OpenSearch client for %s", settings.hosts)
        return cls(AsyncOpenSearch(**_client_kwargs(settings)))

    async def search(self, request: CompiledRequest) -> RawResponse:
        return response_to_dict(await self._client.search(**_search_kwargs(request)))

    async def close(self) -> None:
        await self._client.close()
