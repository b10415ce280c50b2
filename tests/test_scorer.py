"""Tests for PairwiseScorer."""

from __future__ import annotations

import numpy as np
import pytest

from term_distance.algorithm.config import CostModel, DistanceKind
from term_distance.comparator import TermComparator
from term_distance.scorer import PairwiseScorer


class TestPairwiseMatrix:
    def test_shape_and_values(self) -> None:
        items = [["a", "b"], ["b", "a"], ["a", "b"]]
        matrix = PairwiseScorer().matrix(items)
        expected = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 1.0], [0.0, 1.0, 0.0]])
        np.testing.assert_allclose(matrix, expected)

    def test_empty_items(self) -> None:
        matrix = PairwiseScorer().matrix([])
        assert matrix.shape == (0, 0)

    def test_diagonal_is_zero(self) -> None:
        matrix = PairwiseScorer().matrix([["x"], ["y", "z"], []])
        assert np.all(np.diag(matrix) == 0.0)

    def test_asymmetric_costs_give_asymmetric_matrix(self) -> None:
        comparator = TermComparator(
            costs=CostModel(delete=1.0, insert=3.0, swap=2.0),
            kind=DistanceKind.SYMBOL,
        )
        matrix = PairwiseScorer(comparator).matrix(["ab", "abc"])
        assert matrix[0, 1] == pytest.approx(3.0)  # insert "c"
        assert matrix[1, 0] == pytest.approx(1.0)  # delete "c"

    def test_duplicate_items_reuse_cache(self) -> None:
        comparator = TermComparator()
        PairwiseScorer(comparator).matrix([["a"], ["b"], ["a"], ["b"]])
        # Unique ordered pairs: (a, b), (b, a), (a, a), (b, b)
        assert comparator.measure.curr_size == 4

    def test_default_comparator(self) -> None:
        assert PairwiseScorer().comparator.kind is DistanceKind.TOKEN

    def test_comparator_property_is_documented(self) -> None:
        assert PairwiseScorer.comparator.__doc__
