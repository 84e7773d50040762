from explorer.adapters.opensearch.client import AsyncOpenSearchSearchClient, OpenSearchSearchClient

__all__ = ["AsyncOpenSearchSearchClient", "OpenSearchSearchClient"]
