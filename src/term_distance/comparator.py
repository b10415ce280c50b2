"""TermComparator: orchestrator that wires DamerauLevenshtein + DistanceCache.

This is the wiring layer between the raw engine and the public API.  It turns
a raw float distance into a ComparisonResult with the length-normalized
score, the input lengths, and timing data.

Architecture:
- The configured ``DistanceKind`` picks one engine query (``distance``,
  ``token_distance`` or ``token_similarity_score``) once, at construction.
- That query is wrapped in a per-instance ``DistanceCache`` so repeated pairs
  (as in pairwise scoring) are computed only once.
- ``compare()`` times the cached call and derives ``score`` from the raw
  distance; for ``DistanceKind.SCORE`` the query result already is the score.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable, Sequence

from term_distance.algorithm.config import CostModel, DistanceKind, TokenMatch
from term_distance.algorithm.damerau import DamerauLevenshtein
from term_distance.algorithm.normalizer import normalize_distance
from term_distance.cache import DistanceCache
from term_distance.result import ComparisonResult

__all__ = ["TermComparator"]

logger = logging.getLogger(__name__)


class TermComparator:
    """Orchestrator for sequence comparison.

    Two separate ``TermComparator`` instances never share cache state.

    Example::

        from term_distance.comparator import TermComparator

        cmp = TermComparator()
        result = cmp.compare(["the", "cat"], ["the", "cat", "sat"])
        print(result.distance)   # 1.0
        print(result.score)      # 0.333...
    """

    def __init__(
        self,
        costs: CostModel | None = None,
        kind: DistanceKind = DistanceKind.TOKEN,
        token_match: TokenMatch = TokenMatch.UNIFORM,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            costs: Edit-operation costs.  Defaults to ``CostModel()``.
            kind: Which engine query ``compare()`` runs.  Defaults to
                ``DistanceKind.TOKEN``.
            token_match: Case policy for token queries.  Defaults to
                ``TokenMatch.UNIFORM``.
            max_cache_size: Maximum number of pairs held in the per-instance
                LRU cache.  This is an infrastructure parameter — it is NOT
                part of ``CostModel``.
        """
        self._kind = DistanceKind(kind)
        self._engine = DamerauLevenshtein(costs=costs, token_match=token_match)
        if self._kind == DistanceKind.SYMBOL:
            query = self._engine.distance
        elif self._kind == DistanceKind.TOKEN:
            query = self._engine.token_distance
        else:
            query = self._engine.token_similarity_score
        self._measure = DistanceCache(query, max_size=max_cache_size)

    @property
    def engine(self) -> DamerauLevenshtein:
        """The underlying engine (safe to share across threads)."""
        return self._engine

    @property
    def kind(self) -> DistanceKind:
        """Which engine query ``compare()`` runs."""
        return self._kind

    @property
    def measure(self) -> DistanceCache:
        """Cached ``DistanceMeasure`` for the configured kind."""
        return self._measure

    def compare(
        self, source: Sequence[Hashable], target: Sequence[Hashable]
    ) -> ComparisonResult:
        """Compare two sequences and return a ComparisonResult.

        Args:
            source: Source sequence (a ``str`` or symbol sequence for
                ``SYMBOL``; a sequence of ``str`` tokens otherwise).
            target: Target sequence of the same kind.

        Returns:
            A ``ComparisonResult`` with all six fields populated.
        """
        t0 = time.perf_counter()

        distance = self._measure(source, target)
        if self._kind == DistanceKind.SCORE:
            score = distance
        else:
            score = normalize_distance(distance, len(source), len(target))

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared %d x %d %s sequences in %.3f ms",
            len(source),
            len(target),
            self._kind,
            elapsed_ms,
        )

        return ComparisonResult(
            distance=distance,
            score=score,
            source_length=len(source),
            target_length=len(target),
            kind=self._kind,
            computation_time_ms=elapsed_ms,
        )
