"""Query builder — Accumulates search intent and compiles it to a request.

``BuildCommand`` is a passive data holder. Setters never validate and
``compile()`` never raises; whether the command is usable is checked once by
the finder, right before the request is sent.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NotRequired, TypedDict

from explorer.syntax import Clause, MultiMatch, Primitive, Sort, Term, Terms


class RequestBody(TypedDict):
    query: dict[str, Any]
    sort: NotRequired[dict[str, str]]
    track_total_hits: NotRequired[bool]


CompiledRequest = TypedDict(
    "CompiledRequest",
    {
        "index": str | None,
        "body": RequestBody,
        "from": NotRequired[int],
        "size": NotRequired[int],
    },
)
"""Engine-facing request handed to the search client."""


class BuildCommand:
    """Mutable search-query accumulator.

    Example:
        >>> command = (
        ...     BuildCommand()
        ...     .set_index("articles")
        ...     .set_where({"published": True})
        ...     .set_query("solar nowcasting")
        ...     .set_default_search_fields(["title", "body"])
        ...     .set_sort(Sort(field="created_at", order="desc"))
        ... )
        >>> command.compile()["body"]["sort"]
        {'created_at': 'desc'}

    Instances are not safe for concurrent mutation.
    """

    def __init__(self, index: str | None = None) -> None:
        self._index = index
        self._must: list[Clause] = []
        self._should: list[Clause] = []
        self._filter: list[Clause] = []
        self._where: dict[str, Primitive] = {}
        self._where_in: dict[str, list[Primitive]] = {}
        self._query: str | None = None
        self._default_search_fields: list[str] = []
        self._offset: int | None = None
        self._limit: int | None = None
        self._sort: Sort | None = None

    # ── Setters ──────────────────────────────────────────────────────────

    def set_index(self, index: str | None) -> BuildCommand:
        self._index = index
        return self

    def set_must(self, clauses: Iterable[Clause]) -> BuildCommand:
        self._must = list(clauses)
        return self

    def set_should(self, clauses: Iterable[Clause]) -> BuildCommand:
        self._should = list(clauses)
        return self

    def set_filter(self, clauses: Iterable[Clause]) -> BuildCommand:
        self._filter = list(clauses)
        return self

    def set_where(self, where: Mapping[str, Primitive]) -> BuildCommand:
        """Require exact field values; each entry becomes a ``term`` in ``must``."""
        self._where = dict(where)
        return self

    def set_where_in(self, where_in: Mapping[str, Iterable[Primitive]]) -> BuildCommand:
        """Require one of several field values; each entry becomes a ``terms`` in ``must``."""
        self._where_in = {field: list(values) for field, values in where_in.items()}
        return self

    def set_query(self, query: str | None) -> BuildCommand:
        self._query = query
        return self

    def set_default_search_fields(self, fields: Iterable[str]) -> BuildCommand:
        """Fields searched by the free-text query."""
        self._default_search_fields = list(fields)
        return self

    def set_offset(self, offset: int | None) -> BuildCommand:
        self._offset = offset
        return self

    def set_limit(self, limit: int | None) -> BuildCommand:
        self._limit = limit
        return self

    def set_sort(self, sort: Sort | None) -> BuildCommand:
        self._sort = sort
        return self

    # ── State ────────────────────────────────────────────────────────────

    @property
    def index(self) -> str | None:
        return self._index

    @property
    def must(self) -> list[Clause]:
        return list(self._must)

    @property
    def should(self) -> list[Clause]:
        return list(self._should)

    @property
    def filter(self) -> list[Clause]:
        return list(self._filter)

    @property
    def where(self) -> dict[str, Primitive]:
        return dict(self._where)

    @property
    def where_in(self) -> dict[str, list[Primitive]]:
        return {field: list(values) for field, values in self._where_in.items()}

    @property
    def query(self) -> str | None:
        return self._query

    @property
    def default_search_fields(self) -> list[str]:
        return list(self._default_search_fields)

    @property
    def offset(self) -> int | None:
        return self._offset

    @property
    def limit(self) -> int | None:
        return self._limit

    @property
    def sort(self) -> Sort | None:
        return self._sort

    def is_valid(self) -> bool:
        """Whether the command has everything needed to be sent."""
        return bool(self._index)

    def has_pagination(self) -> bool:
        return self._offset is not None and self._limit is not None

    # ── Compilation ──────────────────────────────────────────────────────

    def compile(self) -> CompiledRequest:
        """Compile the current state into an engine request.

        ``must`` is emitted in this order: explicit clauses, ``where`` terms,
        ``where_in`` terms, then the free-text ``multi_match``. The free-text
        clause is skipped when ``must`` already holds a non-empty
        ``MultiMatch``. Pagination is emitted only when both offset and limit
        are set.
        """
        # model_construct skips validation so compilation stays total.
        must: list[Clause] = list(self._must)
        must.extend(Term.model_construct(field=field, value=value) for field, value in self._where.items())
        must.extend(Terms.model_construct(field=field, values=values) for field, values in self._where_in.items())
        if self._query and not self._has_explicit_multi_match():
            must.append(MultiMatch.model_construct(value=self._query, fields=self._default_search_fields))

        body: RequestBody = {
            "query": {
                "bool": {
                    "must": _serialize_all(must),
                    "should": _serialize_all(self._should),
                    "filter": _serialize_all(self._filter),
                },
            },
        }
        if self._sort is not None:
            body["sort"] = self._sort.serialize()

        request: CompiledRequest = {"index": self._index, "body": body}
        if self.has_pagination():
            request["from"] = self._offset  # type: ignore[typeddict-item]
            request["size"] = self._limit  # type: ignore[typeddict-item]
        return request

    def _has_explicit_multi_match(self) -> bool:
        return any(isinstance(clause, MultiMatch) and clause.serialize() is not None for clause in self._must)


def _serialize_all(clauses: Iterable[Clause]) -> list[dict[str, Any]]:
    """Serialize clauses in order, dropping those with nothing to emit."""
    serialized = (clause.serialize() for clause in clauses)
    return [clause for clause in serialized if clause is not None]
