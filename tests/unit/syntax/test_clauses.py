"""Tests for the clause model."""

from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from explorer.syntax import Exists, Matching, MultiMatch, Range, Term, Terms, Wildcard

# ── Match clauses ────────────────────────────────────────────────────────────


class TestMatching:
    def test_serializes_fuzzy_match(self) -> None:
        clause = Matching(field="title", value="Lorem Ipsum")
        assert clause.serialize() == {"match": {"title": {"query": "Lorem Ipsum", "fuzziness": "auto"}}}

    def test_empty_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Matching(field="", value="Lorem Ipsum")

    def test_is_immutable(self) -> None:
        clause = Matching(field="title", value="Lorem Ipsum")
        with pytest.raises(ValidationError):
            clause.value = "changed"  # type: ignore[misc]


class TestMultiMatch:
    def test_with_fields(self) -> None:
        clause = MultiMatch(value="fuzzy search", fields=["f1", "f2"])
        assert clause.serialize() == {
            "multi_match": {"query": "fuzzy search", "fields": ["f1", "f2"], "fuzziness": "auto"}
        }

    def test_fields_omitted_when_empty(self) -> None:
        clause = MultiMatch(value="fuzzy search")
        assert clause.serialize() == {"multi_match": {"query": "fuzzy search", "fuzziness": "auto"}}

    def test_no_query_emits_nothing(self) -> None:
        assert MultiMatch().serialize() is None
        assert MultiMatch(fields=["title"]).serialize() is None
        assert MultiMatch(value="").serialize() is None


# ── Term-level clauses ───────────────────────────────────────────────────────


class TestTerm:
    def test_default_boost(self) -> None:
        assert Term(field="subtitle", value="Dolor sit amet").serialize() == {
            "term": {"subtitle": "Dolor sit amet", "boost": 1.0}
        }

    def test_custom_boost(self) -> None:
        assert Term(field="id", value=42, boost=2.5).serialize() == {"term": {"id": 42, "boost": 2.5}}

    def test_value_types_preserved(self) -> None:
        assert Term(field="published", value=True).serialize()["term"]["published"] is True
        assert type(Term(field="count", value=3).serialize()["term"]["count"]) is int
        assert Term(field="price", value=9.99).serialize()["term"]["price"] == 9.99

    def test_empty_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Term(field="", value="x")


class TestTerms:
    def test_serializes_value_list(self) -> None:
        assert Terms(field="tag", values=["solar", "wind"]).serialize() == {
            "terms": {"tag": ["solar", "wind"], "boost": 1.0}
        }


# ── Structural clauses ───────────────────────────────────────────────────────


class TestExists:
    def test_serializes_field(self) -> None:
        assert Exists(field="published_at").serialize() == {"exists": {"field": "published_at"}}


class TestRange:
    def test_only_given_bounds_emitted(self) -> None:
        assert Range(field="year", gte=2020, lt=2025).serialize() == {
            "range": {"year": {"gte": 2020, "lt": 2025, "boost": 1.0}}
        }

    def test_date_math_bound(self) -> None:
        assert Range(field="created_at", gt="now-1d/d").serialize() == {
            "range": {"created_at": {"gt": "now-1d/d", "boost": 1.0}}
        }

    def test_requires_a_bound(self) -> None:
        with pytest.raises(ValidationError, match="at least one"):
            Range(field="year")


class TestWildcard:
    def test_serializes_pattern(self) -> None:
        assert Wildcard(field="name", value="jo*").serialize() == {
            "wildcard": {"name": {"value": "jo*", "boost": 1.0}}
        }


# ── Invariants ───────────────────────────────────────────────────────────────


class TestClauseShape:
    CLAUSES = [
        Matching(field="title", value="Lorem"),
        MultiMatch(value="ipsum", fields=["title"]),
        Term(field="published", value=True),
        Terms(field="tag", values=["a"]),
        Exists(field="title"),
        Range(field="year", gte=2000),
        Wildcard(field="title", value="lor*"),
    ]

    @pytest.mark.parametrize("clause", CLAUSES, ids=lambda c: type(c).__name__)
    def test_single_top_level_key(self, clause) -> None:
        serialized = clause.serialize()
        assert serialized is not None
        assert len(serialized) == 1

    @pytest.mark.parametrize("clause", CLAUSES, ids=lambda c: type(c).__name__)
    def test_serialize_is_pure(self, clause) -> None:
        assert clause.serialize() == clause.serialize()

    def test_distinct_variants_use_distinct_keys(self) -> None:
        for a, b in itertools.combinations(self.CLAUSES, 2):
            assert set(a.serialize()).isdisjoint(b.serialize())
