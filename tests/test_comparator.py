"""Tests for TermComparator — the orchestrator around the engine and cache.

Covers:
- Dispatch per DistanceKind (SYMBOL, TOKEN, SCORE)
- Score derivation and empty-side handling
- Lengths, kind and timing fields
- Cache reuse across calls
"""

from __future__ import annotations

import pytest

from term_distance.algorithm.config import CostModel, DistanceKind, TokenMatch
from term_distance.comparator import TermComparator


class TestDispatch:
    def test_default_kind_is_token(self) -> None:
        cmp = TermComparator()
        assert cmp.kind is DistanceKind.TOKEN
        result = cmp.compare(["Cat", "Dog"], ["cat", "dog"])
        assert result.distance == 0.0

    def test_token_kind(self) -> None:
        result = TermComparator().compare(["the", "cat"], ["the", "cat", "sat"])
        assert result.distance == pytest.approx(1.0)
        assert result.score == pytest.approx(1.0 / 3.0)
        assert result.kind is DistanceKind.TOKEN

    def test_symbol_kind(self) -> None:
        result = TermComparator(kind=DistanceKind.SYMBOL).compare("ab", "ba")
        assert result.distance == pytest.approx(1.0)
        assert result.score == pytest.approx(0.5)

    def test_symbol_kind_is_case_sensitive(self) -> None:
        result = TermComparator(kind=DistanceKind.SYMBOL).compare("A", "a")
        assert result.distance == pytest.approx(1.0)

    def test_score_kind(self) -> None:
        result = TermComparator(kind=DistanceKind.SCORE).compare(
            ["a", "b"], ["b", "a"]
        )
        assert result.distance == pytest.approx(0.5)
        assert result.score == result.distance

    def test_kind_accepts_string_value(self) -> None:
        assert TermComparator(kind="symbol").kind is DistanceKind.SYMBOL  # type: ignore[arg-type]

    def test_costs_and_policy_forwarded_to_engine(self) -> None:
        costs = CostModel(delete=2.0, swap=1.5)
        cmp = TermComparator(costs=costs, token_match=TokenMatch.MIXED)
        assert cmp.engine.costs is costs
        assert cmp.engine.token_match is TokenMatch.MIXED


class TestResultFields:
    def test_lengths(self) -> None:
        result = TermComparator().compare(["a"], ["a", "b", "c"])
        assert result.source_length == 1
        assert result.target_length == 3

    def test_empty_side_keeps_raw_distance_but_scores_zero(self) -> None:
        result = TermComparator().compare([], ["a", "b"])
        assert result.distance == pytest.approx(2.0)
        assert result.score == 0.0

    def test_timing_is_non_negative(self) -> None:
        result = TermComparator().compare(["a", "b"], ["b", "a"])
        assert result.computation_time_ms >= 0.0


class TestCaching:
    def test_repeated_pair_hits_cache(self) -> None:
        cmp = TermComparator()
        cmp.compare(["a", "b"], ["b", "a"])
        cmp.compare(["a", "b"], ["b", "a"])
        assert cmp.measure.curr_size == 1

    def test_max_cache_size_forwarded(self) -> None:
        assert TermComparator(max_cache_size=16).measure.max_size == 16

    def test_statelessness(self) -> None:
        cmp = TermComparator()
        r1 = cmp.compare(["x", "y", "z"], ["z", "y"])
        r2 = cmp.compare(["x", "y", "z"], ["z", "y"])
        assert r1.distance == r2.distance
        assert r1.score == r2.score


class TestProperties:
    def test_properties_are_documented(self) -> None:
        for name in ("engine", "kind", "measure"):
            assert getattr(TermComparator, name).__doc__, name
