"""Public API functions for term-distance.

This module provides the user-facing functions: distance, token_distance,
token_similarity_score, compare and pairwise_distances.  Each call creates a
fresh engine (or comparator) to guarantee zero global state between calls.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

import numpy as np

from term_distance.algorithm.config import CostModel, DistanceKind, TokenMatch
from term_distance.algorithm.damerau import DamerauLevenshtein
from term_distance.comparator import TermComparator
from term_distance.result import ComparisonResult
from term_distance.scorer import PairwiseScorer

__all__ = [
    "compare",
    "distance",
    "pairwise_distances",
    "token_distance",
    "token_similarity_score",
]


def distance(
    source: Sequence[Hashable],
    target: Sequence[Hashable],
    costs: CostModel | None = None,
) -> float:
    """Return the symbol-level edit distance between two sequences.

    Args:
        source: Source symbols, e.g. a ``str``.
        target: Target symbols.
        costs:  Edit-operation costs.  Defaults to ``CostModel()`` when None.

    Returns:
        Minimum total edit cost.  ``len(target) * insert`` when the source is
        empty, ``len(source) * delete`` when the target is empty.
    """
    return DamerauLevenshtein(costs).distance(source, target)


def token_distance(
    source: Sequence[str],
    target: Sequence[str],
    costs: CostModel | None = None,
    token_match: TokenMatch = TokenMatch.UNIFORM,
) -> float:
    """Return the case-insensitive edit distance between two token sequences."""
    return DamerauLevenshtein(costs, token_match).token_distance(source, target)


def token_similarity_score(
    source: Sequence[str],
    target: Sequence[str],
    costs: CostModel | None = None,
    token_match: TokenMatch = TokenMatch.UNIFORM,
) -> float:
    """Return the token distance divided by the longer length (0.0 if either is empty)."""
    return DamerauLevenshtein(costs, token_match).token_similarity_score(
        source, target
    )


def compare(
    source: Sequence[Hashable],
    target: Sequence[Hashable],
    costs: CostModel | None = None,
    kind: DistanceKind = DistanceKind.TOKEN,
    token_match: TokenMatch = TokenMatch.UNIFORM,
) -> ComparisonResult:
    """Compare two sequences and return a ComparisonResult.

    Creates a fresh ``TermComparator`` per call.

    Args:
        source: Source sequence.
        target: Target sequence.
        costs:  Edit-operation costs.  Defaults to ``CostModel()`` when None.
        kind:   Which query to run.  Defaults to ``DistanceKind.TOKEN``.
        token_match: Case policy for token kinds.  Defaults to
            ``TokenMatch.UNIFORM``.

    Returns:
        A ``ComparisonResult`` with distance, score, lengths, kind and
        computation_time_ms populated.
    """
    return TermComparator(
        costs=costs, kind=kind, token_match=token_match
    ).compare(source, target)


def pairwise_distances(
    items: Sequence[Sequence[Hashable]],
    costs: CostModel | None = None,
    kind: DistanceKind = DistanceKind.TOKEN,
    token_match: TokenMatch = TokenMatch.UNIFORM,
) -> np.ndarray:
    """Return the ``(k, k)`` matrix of distances between every ordered pair of items."""
    comparator = TermComparator(costs=costs, kind=kind, token_match=token_match)
    return PairwiseScorer(comparator).matrix(items)
