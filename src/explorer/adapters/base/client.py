"""Search client capability — What the finders need from a search engine.

A client accepts a compiled request and returns the raw response mapping,
or raises. Transport concerns (connections, auth, timeouts) live entirely
behind this interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from explorer.application.build_command import CompiledRequest

RawResponse = dict[str, Any]


@runtime_checkable
class SearchClient(Protocol):
    """Synchronous search capability."""

    def search(self, request: CompiledRequest) -> RawResponse:
        """Run ``request`` and return the engine's raw response."""
        ...


@runtime_checkable
class AsyncSearchClient(Protocol):
    """Asynchronous search capability."""

    async def search(self, request: CompiledRequest) -> RawResponse:
        """Run ``request`` and return the engine's raw response."""
        ...


def pagination_params(request: CompiledRequest) -> dict[str, int]:
    """Map request pagination to client keyword arguments (``from`` is reserved)."""
    params: dict[str, int] = {}
    if "from" in request:
        params["from_"] = request["from"]
    if "size" in request:
        params["size"] = request["size"]
    return params


def response_to_dict(response: Any) -> RawResponse:
    """Unwrap client response objects (e.g. ``ObjectApiResponse``) to a dict."""
    return dict(getattr(response, "body", response))
