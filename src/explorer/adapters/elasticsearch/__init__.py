from explorer.adapters.elasticsearch.client import AsyncElasticsearchSearchClient, ElasticsearchSearchClient

__all__ = ["AsyncElasticsearchSearchClient", "ElasticsearchSearchClient"]
