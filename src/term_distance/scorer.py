"""PairwiseScorer: dense distance matrix over a collection of sequences.

Clustering code usually wants every pairwise distance up front.  The scorer
evaluates all ordered pairs ``(a, b)`` with ``a != b`` and stores them in a
``(k, k)`` float64 matrix.  The diagonal is 0.0.

The matrix is NOT assumed symmetric: with ``delete != insert`` the distance
from ``a`` to ``b`` generally differs from ``b`` to ``a``, so both directions
are computed.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence

import numpy as np

from term_distance.comparator import TermComparator

__all__ = ["PairwiseScorer"]

logger = logging.getLogger(__name__)


class PairwiseScorer:
    """Builds pairwise distance matrices with a single reusable comparator.

    Reusing one ``TermComparator`` lets its cache serve duplicate items.

    Example::

        from term_distance.scorer import PairwiseScorer

        scorer = PairwiseScorer()
        scorer.matrix([["a", "b"], ["b", "a"], ["a", "b"]])
        # array([[0., 1., 0.],
        #        [1., 0., 1.],
        #        [0., 1., 0.]])
    """

    def __init__(self, comparator: TermComparator | None = None) -> None:
        self._comparator = comparator if comparator is not None else TermComparator()

    @property
    def comparator(self) -> TermComparator:
        """The comparator shared by every pair in a matrix."""
        return self._comparator

    def matrix(self, items: Sequence[Sequence[Hashable]]) -> np.ndarray:
        """Return the ``(k, k)`` matrix ``M[a, b] = distance(items[a], items[b])``.

        Args:
            items: Sequences to compare.  May be empty.

        Returns:
            Float64 numpy array of shape ``(len(items), len(items))``.
        """
        k = len(items)
        result = np.zeros((k, k), dtype=np.float64)
        measure = self._comparator.measure
        for a in range(k):
            for b in range(k):
                if a != b:
                    result[a, b] = measure(items[a], items[b])
        logger.debug("pairwise matrix built for %d items", k)
        return result
