"""Full-text match clauses."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from explorer.syntax.base import FUZZINESS_AUTO, FieldClause, SyntaxClause


class Matching(FieldClause):
    """Fuzzy full-text match on a single field."""

    value: str = Field(description="Query text")

    def serialize(self) -> dict[str, Any]:
        return {"match": {self.field: {"query": self.value, "fuzziness": FUZZINESS_AUTO}}}


class MultiMatch(SyntaxClause):
    """Fuzzy full-text match across several fields.

    Without query text the clause is omitted from the request entirely.
    Without fields the engine falls back to the index's default fields.
    """

    value: str | None = Field(default=None, description="Query text")
    fields: list[str] = Field(default_factory=list, description="Fields to search")

    def serialize(self) -> dict[str, Any] | None:
        if not self.value:
            return None

        clause: dict[str, Any] = {"query": self.value}
        if self.fields:
            clause["fields"] = list(self.fields)
        clause["fuzziness"] = FUZZINESS_AUTO
        return {"multi_match": clause}
