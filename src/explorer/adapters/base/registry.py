"""Client registry — Builds search clients for a configured engine.

Maps an engine name (``elasticsearch``, ``opensearch``) to the client
classes that bind it, so callers can build a client from settings alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from explorer.exceptions import ConfigurationError

if TYPE_CHECKING:
    from explorer.adapters.base.client import AsyncSearchClient, SearchClient
    from explorer.config.settings import ConnectionSettings

logger = logging.getLogger(__name__)


class _ClientFactory(Protocol):
    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> Any: ...


class ClientRegistry:
    """Registry of sync and async client classes per engine.

    Example:
        >>> registry = ClientRegistry()
        >>> registry.register("elasticsearch", ElasticsearchSearchClient, AsyncElasticsearchSearchClient)
        >>> client = registry.create(settings.connection)
    """

    def __init__(self) -> None:
        self._sync: dict[str, type[_ClientFactory]] = {}
        self._async: dict[str, type[_ClientFactory]] = {}

    def register(
        self,
        engine: str,
        client_class: type[_ClientFactory],
        async_client_class: type[_ClientFactory] | None = None,
    ) -> None:
        """Register the client classes for an engine.

        Args:
            engine: Engine name as used in ``ConnectionSettings.engine``.
            client_class: Synchronous client class.
            async_client_class: Optional asynchronous client class.
        """
        if engine in self._sync:
            logger.warning("Overwriting existing client registration: %s", engine)
        self._sync[engine] = client_class
        if async_client_class is not None:
            self._async[engine] = async_client_class
        logger.debug("Registered search client: %s", engine)

    def create(self, settings: ConnectionSettings) -> SearchClient:
        """Build a synchronous client for ``settings.engine``.

        Raises:
            ConfigurationError: If the engine is not registered.
        """
        return self._lookup(self._sync, settings.engine).from_settings(settings)  # type: ignore[no-any-return]

    def create_async(self, settings: ConnectionSettings) -> AsyncSearchClient:
        """Build an asynchronous client for ``settings.engine``.

        Raises:
            ConfigurationError: If no async client is registered for the engine.
        """
        return self._lookup(self._async, settings.engine).from_settings(settings)  # type: ignore[no-any-return]

    @property
    def registered_engines(self) -> list[str]:
        return list(self._sync.keys())

    @staticmethod
    def _lookup(classes: dict[str, type[_ClientFactory]], engine: str) -> type[_ClientFactory]:
        if engine not in classes:
            raise ConfigurationError(
                f"No search client registered for engine '{engine}'. Available engines: {list(classes.keys())}"
            )
        return classes[engine]


def default_registry() -> ClientRegistry:
    """A registry with the built-in Elasticsearch and OpenSearch clients."""
    from explorer.adapters.elasticsearch import AsyncElasticsearchSearchClient, ElasticsearchSearchClient
    from explorer.adapters.opensearch import AsyncOpenSearchSearchClient, OpenSearchSearchClient

    registry = ClientRegistry()
    registry.register("elasticsearch", ElasticsearchSearchClient, AsyncElasticsearchSearchClient)
    registry.register("opensearch", OpenSearchSearchClient, AsyncOpenSearchSearchClient)
    return registry
