"""Query syntax — The closed set of clauses understood by the query builder."""

from explorer.syntax.base import Primitive, SyntaxClause
from explorer.syntax.filters import Exists, Range, Wildcard
from explorer.syntax.matching import Matching, MultiMatch
from explorer.syntax.sort import Sort, SortOrder
from explorer.syntax.term import Term, Terms

Clause = Matching | MultiMatch | Term | Terms | Exists | Range | Wildcard
"""Every clause variant a ``BuildCommand`` accepts."""

__all__ = [
    "Clause",
    "Exists",
    "Matching",
    "MultiMatch",
    "Primitive",
    "Range",
    "Sort",
    "SortOrder",
    "SyntaxClause",
    "Term",
    "Terms",
    "Wildcard",
]
