"""Client capability interfaces shared by all engine bindings."""

from explorer.adapters.base.client import (
    AsyncSearchClient,
    RawResponse,
    SearchClient,
    pagination_params,
    response_to_dict,
)
from explorer.adapters.base.registry import ClientRegistry, default_registry

__all__ = [
    "AsyncSearchClient",
    "ClientRegistry",
    "RawResponse",
    "SearchClient",
    "default_registry",
    "pagination_params",
    "response_to_dict",
]
