"""Search client bindings — Connect finders to a search engine.

Built-in bindings:
  - elasticsearch: Elasticsearch v8+ via ``elasticsearch``
  - opensearch: OpenSearch v2+ via ``opensearch-py``

Implement ``SearchClient`` or ``AsyncSearchClient`` to use any other transport.
"""
