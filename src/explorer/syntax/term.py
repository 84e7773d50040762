"""Exact-value term clauses."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from explorer.syntax.base import FieldClause, Primitive


class Term(FieldClause):
    """Exact match of a field against a single value."""

    value: Primitive = Field(description="Exact value to match")
    boost: float = Field(default=1.0, description="Relevance score multiplier")

    def serialize(self) -> dict[str, Any]:
        return {"term": {self.field: self.value, "boost": self.boost}}


class Terms(FieldClause):
    """Exact match of a field against any of several values."""

    values: list[Primitive] = Field(description="Accepted exact values")
    boost: float = Field(default=1.0, description="Relevance score multiplier")

    def serialize(self) -> dict[str, Any]:
        return {"terms": {self.field: list(self.values), "boost": self.boost}}
