"""Index descriptor repositories."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from explorer.index_management.configuration import IndexConfiguration, IndexConfigurationInterface

if TYPE_CHECKING:
    from explorer.config.settings import IndexSettings, Settings

logger = logging.getLogger(__name__)


class IndexConfigurationRepositoryInterface(ABC):
    """Source of index descriptors."""

    @abstractmethod
    def get_configurations(self) -> Iterator[IndexConfigurationInterface]:
        """Yield every configured index descriptor."""


class SettingsIndexConfigurationRepository(IndexConfigurationRepositoryInterface):
    """Builds descriptors from the ``indexes`` section of the settings.

    Example:
        >>> repository = SettingsIndexConfigurationRepository.from_settings(Settings.from_yaml("explorer.yaml"))
        >>> [config.name for config in repository.get_configurations()]
        ['articles', 'authors']
    """

    def __init__(self, indexes: Mapping[str, IndexSettings]) -> None:
        self._indexes = dict(indexes)

    @classmethod
    def from_settings(cls, settings: Settings) -> SettingsIndexConfigurationRepository:
        return cls(settings.indexes)

    def get_configurations(self) -> Iterator[IndexConfigurationInterface]:
        for name, index in self._indexes.items():
            logger.debug("Loading index configuration: %s", name)
            yield IndexConfiguration(name=name, properties=index.properties, settings=index.settings)
