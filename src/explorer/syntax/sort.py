"""Sort modifier for compiled requests."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, Enum):
    """Sort direction."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class Sort(BaseModel):
    """Orders results by a single field.

    Not a boolean-query clause: it is placed next to the query in the
    request body.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1, description="Field to sort on")
    order: SortOrder = Field(default=SortOrder.ASCENDING, description="Sort direction")

    def serialize(self) -> dict[str, str]:
        return {self.field: self.order.value}
