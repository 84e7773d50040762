"""Explorer — Boolean query builder and result adapter for Elasticsearch-style engines."""

__version__ = "0.1.0"
