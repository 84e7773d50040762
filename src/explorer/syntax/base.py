"""Base clause model — Shared shape of every boolean-query clause.

A clause is one node of the engine's query grammar. Clauses are immutable
value objects: they validate their input on construction and serialize to a
single-key mapping keyed by the engine clause type (``match``, ``term``, ...).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Primitive = str | bool | int | float
"""Exact values accepted by term-level clauses."""

FUZZINESS_AUTO = "auto"


class SyntaxClause(BaseModel, ABC):
    """Abstract base for all clause variants."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def serialize(self) -> dict[str, Any] | None:
        """Serialize this clause to the engine query DSL.

        Returns:
            A mapping with exactly one top-level key, or ``None`` when the
            clause has nothing to contribute and must be omitted.
        """


class FieldClause(SyntaxClause):
    """A clause that targets a single document field."""

    field: str = Field(min_length=1, description="Target field name")
