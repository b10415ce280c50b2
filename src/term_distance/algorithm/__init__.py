"""algorithm subpackage — public API for the edit-distance engine.

Provides the Damerau-Levenshtein engine, its cost model, and the token case
policy.  Import from this module (not from sub-modules directly) to stay on
the stable public interface.

Example::

    from term_distance.algorithm import CostModel, DamerauLevenshtein

    engine = DamerauLevenshtein(CostModel(swap=1.0))
    engine.distance("ca", "abc")   # 2.0
"""

from __future__ import annotations

from term_distance.algorithm.config import CostModel, DistanceKind, TokenMatch
from term_distance.algorithm.damerau import DamerauLevenshtein
from term_distance.algorithm.normalizer import normalize_distance

__all__ = [
    "CostModel",
    "DamerauLevenshtein",
    "DistanceKind",
    "TokenMatch",
    "normalize_distance",
]
