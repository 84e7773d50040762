"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from explorer.config.settings import Settings

TEST_INDEX = "test_index"


def _hit(doc_id: int = 1, score: float = 1.0) -> dict[str, Any]:
    return {
        "_index": TEST_INDEX,
        "_type": "default",
        "_id": str(doc_id),
        "_score": score,
        "_source": {},
    }


def _response(hits: list[dict[str, Any]], total: Any = None) -> dict[str, Any]:
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": str(len(hits)) if total is None else total,
            "max_score": 1.0,
            "hits": hits,
        },
    }


@pytest.fixture
def make_hit() -> Callable[..., dict[str, Any]]:
    """Factory for raw hits as returned by the engine."""
    return _hit


@pytest.fixture
def make_response() -> Callable[..., dict[str, Any]]:
    """Factory for raw search responses; ``total`` defaults to the hit count as a string."""
    return _response


@pytest.fixture
def hit() -> dict[str, Any]:
    return _hit()


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        connection={"hosts": ["https://search.test:9200"], "username": "elastic", "password": "secret"},
        indexes={
            "articles": {
                "properties": {"title": "text", "published": "boolean"},
                "settings": {"number_of_shards": 1},
            },
            "authors": {"properties": {"name": {"type": "keyword"}}},
        },
    )
