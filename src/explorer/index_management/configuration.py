"""Index descriptors — Name, field mappings and settings of one index.

Descriptors are read-only inputs for index-management tooling. The query
path never consumes them.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


@runtime_checkable
class IndexConfigurationInterface(Protocol):
    """Read-only view of an index descriptor.

    Attributes:
        name: Index name.
        properties: Field mappings in engine form (``{"title": {"type": "text"}}``).
        settings: Engine index settings (analyzers, shards, ...).
    """

    name: str
    properties: dict[str, Any]
    settings: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Full descriptor as an index-creation request."""
        ...


class IndexConfiguration(BaseModel):
    """Descriptor for one index.

    Property values may use a type shorthand: ``{"title": "text"}`` is
    stored as ``{"title": {"type": "text"}}``, including inside nested
    ``properties`` blocks.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Index name")
    properties: dict[str, Any] = Field(default_factory=dict, description="Field mappings")
    settings: dict[str, Any] = Field(default_factory=dict, description="Engine index settings")

    @field_validator("properties", mode="before")
    @classmethod
    def _normalize_properties(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return normalize_properties(v)
        return v

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.settings:
            body["settings"] = dict(self.settings)
        body["mappings"] = {"properties": dict(self.properties)}
        return {"index": self.name, "body": body}


def normalize_properties(properties: dict[str, Any]) -> dict[str, Any]:
    """Expand ``{"field": "type"}`` shorthand into engine mapping objects."""
    normalized: dict[str, Any] = {}
    for field, mapping in properties.items():
        if isinstance(mapping, str):
            normalized[field] = {"type": mapping}
        elif isinstance(mapping, dict) and isinstance(mapping.get("properties"), dict):
            normalized[field] = {**mapping, "properties": normalize_properties(mapping["properties"])}
        else:
            normalized[field] = mapping
    return normalized
