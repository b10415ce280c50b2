"""ComparisonResult dataclass for comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from term_distance.algorithm.config import DistanceKind

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Attributes:
        distance: Raw output of the query selected by ``kind``.  For
            ``DistanceKind.SCORE`` this is already length-normalized.
        score: Raw edit distance divided by ``max(source_length, target_length)``;
            0.0 when either side is empty.
        source_length: Number of symbols or tokens in the source.
        target_length: Number of symbols or tokens in the target.
        kind: Which engine query produced ``distance``.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    distance: float
    score: float
    source_length: int
    target_length: int
    kind: DistanceKind
    computation_time_ms: float
