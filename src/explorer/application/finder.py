"""Finder — Sends a compiled ``BuildCommand`` and adapts the response.

The finder performs the single validation a command needs (a target index),
calls the injected client exactly once, and wraps the response in
``Results``. Client errors propagate unchanged; nothing is retried.
"""

from __future__ import annotations

import logging

from explorer.adapters.base import AsyncSearchClient, SearchClient
from explorer.application.build_command import BuildCommand, CompiledRequest, RequestBody
from explorer.application.results import Results
from explorer.exceptions import InvalidQueryError

logger = logging.getLogger(__name__)


def _prepare(builder: BuildCommand) -> CompiledRequest:
    if not builder.is_valid():
        raise InvalidQueryError("An index must be set before searching. Call set_index() first.")
    return builder.compile()


def _count_request(request: CompiledRequest) -> CompiledRequest:
    # Engines stop counting at 10,000 hits unless asked for an exact total.
    body: RequestBody = {**request["body"], "track_total_hits": True}
    return {"index": request["index"], "body": body, "size": 0}


class Finder:
    """Runs a ``BuildCommand`` against a synchronous search client.

    Args:
        client: Anything with ``search(request) -> dict``.
        builder: The query to run.
    """

    def __init__(self, client: SearchClient, builder: BuildCommand) -> None:
        self._client = client
        self._builder = builder

    def find(self) -> Results:
        """Execute the query and return the page of hits.

        Raises:
            InvalidQueryError: If the builder has no index. No request is sent.
        """
        request = _prepare(self._builder)
        logger.debug("Searching index %s", request["index"])
        response = self._client.search(request)
        results = Results.from_response(response)
        logger.debug("Index %s returned %d of %d hits", request["index"], len(results), results.total)
        return results

    def count(self) -> int:
        """Return the total number of matching documents without fetching hits.

        Raises:
            InvalidQueryError: If the builder has no index. No request is sent.
        """
        request = _count_request(_prepare(self._builder))
        logger.debug("Counting index %s", request["index"])
        response = self._client.search(request)
        return Results.from_response(response).total


class AsyncFinder:
    """Runs a ``BuildCommand`` against an async search client.

    Same contract as ``Finder`` with awaitable ``find()`` and ``count()``.
    """

    def __init__(self, client: AsyncSearchClient, builder: BuildCommand) -> None:
        self._client = client
        self._builder = builder

    async def find(self) -> Results:
        request = _prepare(self._builder)
        logger.debug("Searching index %s", request["index"])
        response = await self._client.search(request)
        results = Results.from_response(response)
        logger.debug("Index %s returned %d of %d hits", request["index"], len(results), results.total)
        return results

    async def count(self) -> int:
        request = _count_request(_prepare(self._builder))
        logger.debug("Counting index %s", request["index"])
        response = await self._client.search(request)
        return Results.from_response(response).total
