"""Index management contracts — Descriptors consumed by index tooling."""

from explorer.index_management.configuration import (
    IndexConfiguration,
    IndexConfigurationInterface,
    normalize_properties,
)
from explorer.index_management.repository import (
    IndexConfigurationRepositoryInterface,
    SettingsIndexConfigurationRepository,
)

__all__ = [
    "IndexConfiguration",
    "IndexConfigurationInterface",
    "IndexConfigurationRepositoryInterface",
    "SettingsIndexConfigurationRepository",
    "normalize_properties",
]
