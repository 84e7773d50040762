"""Elasticsearch binding — Runs compiled requests with the official client.

Install the optional dependency::

    pip install explorer[elasticsearch]
    # or: pip install elasticsearch
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
        "request_timeout": settings.request_timeout,
    }
    if settings.username and settings.password:
        kwargs["basic_auth"] = (settings.username, settings.password)
    if settings.api_key:
        kwargs["api_key"] = settings.api_key
    kwargs.update(settings.extra)
    return kwargs


def _search_kwargs(request: CompiledRequest) -> dict[str, Any]:
    # Body keys (query, sort) are top-level API parameters in elasticsearch-py 8+.
    return {"index": request["index"], **request["body"], **pagination_params(request)}


class ElasticsearchSearchClient:
    """Synchronous ``SearchClient`` backed by ``elasticsearch.Elasticsearch``.

    Args:
        client: A configured ``Elasticsearch`` instance.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> ElasticsearchSearchClient:
        """Create the native client from connection settings.

        Raises:
            ConfigurationError: If the ``elasticsearch`` package is missing.
        """
        try:
            from elasticsearch import Elasticsearch
        except ImportError as e:
            raise ConfigurationError(
                "elasticsearch package is required.  Install with: pip install explorer[elasticsearch]"
            ) from e

        logger.info("Creating Elasticsearch client for %s", settings.hosts)
        return cls(Elasticsearch(**_client_kwargs(settings)))

    def search(self, request: CompiledRequest) -> RawResponse:
        return response_to_dict(self._client.search(**_search_kwargs(request)))

    def close(self) -> None:
        self._client.close()


class AsyncElasticsearchSearchClient:
    """Asynchronous ``AsyncSearchClient`` backed by ``elasticsearch.AsyncElasticsearch``.

    Args:
        client: A configured ``AsyncElasticsearch`` instance.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> AsyncElasticsearchSearchClient:
        """Create the native async client from connection settings.

        Raises:
            ConfigurationError: If the ``elasticsearch`` package is missing.
        """
        try:
            from elasticsearch import AsyncElasticsearch
        except ImportError as e:
            raise ConfigurationError(
                "elasticsearch package is required.  Install with: pip install explorer[elasticsearch]"
            ) from e

        logger.info("Creating async Elasticsearch client for %s", settings.hosts)
        return cls(AsyncElasticsearch(**_client_kwargs(settings)))

    async def search(self, request: CompiledRequest) -> RawResponse:
        return response_to_dict(await self._client.search(**_search_kwargs(request)))

    async def close(self) -> None:
        await self._client.close()
