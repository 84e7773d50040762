"""Structural clauses: existence, ranges and wildcard patterns."""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from explorer.syntax.base import FieldClause

RangeBound = int | float | str


class Exists(FieldClause):
    """Matches documents that have any indexed value for ``field``."""

    def serialize(self) -> dict[str, Any]:
        return {"exists": {"field": self.field}}


class Range(FieldClause):
    """Bounded range on a numeric or date field.

    Bounds may be numbers or date strings (including date math such as
    ``now-1d/d``). At least one bound is required.
    """

    gt: RangeBound | None = None
    gte: RangeBound | None = None
    lt: RangeBound | None = None
    lte: RangeBound | None = None
    boost: float = Field(default=1.0, description="Relevance score multiplier")

    @model_validator(mode="after")
    def _require_bound(self) -> Range:
        if all(bound is None for bound in (self.gt, self.gte, self.lt, self.lte)):
            raise ValueError(f"Range on '{self.field}' needs at least one of gt, gte, lt, lte")
        return self

    def serialize(self) -> dict[str, Any]:
        bounds: dict[str, Any] = {
            name: bound
            for name, bound in (("gt", self.gt), ("gte", self.gte), ("lt", self.lt), ("lte", self.lte))
            if bound is not None
        }
        bounds["boost"] = self.boost
        return {"range": {self.field: bounds}}


class Wildcard(FieldClause):
    """Pattern match using ``*`` and ``?`` wildcards."""

    value: str = Field(min_length=1, description="Wildcard pattern")
    boost: float = Field(default=1.0, description="Relevance score multiplier")

    def serialize(self) -> dict[str, Any]:
        return {"wildcard": {self.field: {"value": self.value, "boost": self.boost}}}
