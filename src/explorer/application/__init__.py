"""Application layer — Query builder, finders and result sets."""

from explorer.application.build_command import BuildCommand, CompiledRequest
from explorer.application.finder import AsyncFinder, Finder
from explorer.application.results import RawHit, Results, normalize_total

__all__ = [
    "AsyncFinder",
    "BuildCommand",
    "CompiledRequest",
    "Finder",
    "RawHit",
    "Results",
    "normalize_total",
]
