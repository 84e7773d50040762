"""Result set — Typed view over a raw search response."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from explorer.exceptions import MalformedResponseError

RawHit = dict[str, Any]
"""A hit as returned by the engine: ``_index``, ``_type``, ``_id``, ``_score``, ``_source``."""


class Results:
    """Immutable page of search hits.

    ``len()`` and ``count()`` report the hits in this page; ``total`` is the
    engine's total number of matching documents.
    """

    __slots__ = ("_hits", "_total")

    def __init__(self, total: int, hits: Sequence[RawHit]) -> None:
        self._total = total
        self._hits = tuple(hits)

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> Results:
        """Build a result set from a raw ``search`` response.

        Raises:
            MalformedResponseError: If the response has no ``hits`` mapping.
        """
        hits = response.get("hits") if isinstance(response, Mapping) else None
        if not isinstance(hits, Mapping):
            raise MalformedResponseError("Search response has no 'hits' section.")

        documents = list(hits.get("hits") or [])
        return cls(total=normalize_total(hits.get("total"), default=len(documents)), hits=documents)

    @property
    def total(self) -> int:
        return self._total

    def hits(self) -> list[RawHit]:
        return list(self._hits)

    def count(self) -> int:
        return len(self._hits)

    def __len__(self) -> int:
        return len(self._hits)

    def __iter__(self) -> Iterator[RawHit]:
        return iter(self._hits)

    def __repr__(self) -> str:
        return f"Results(total={self._total}, count={len(self._hits)})"


def normalize_total(total: Any, default: int = 0) -> int:
    """Coerce ``hits.total`` to an integer.

    Engines report the total as a number, a numeric string, or (since
    Elasticsearch 7) an object such as ``{"value": 2, "relation": "eq"}``.
    A missing total (``track_total_hits: false``) yields ``default``.

    Raises:
        MalformedResponseError: If the total is present but not numeric.
    """
    if isinstance(total, Mapping):
        total = total.get("value")
    if total is None:
        return default
    if isinstance(total, bool):
        raise MalformedResponseError(f"Unexpected hits total: {total!r}")
    try:
        return int(total)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Unexpected hits total: {total!r}") from e
