"""Term distance - weighted Damerau-Levenshtein distance for symbols and tokens."""

from __future__ import annotations

from term_distance.algorithm.config import CostModel, DistanceKind, TokenMatch
from term_distance.algorithm.damerau import DamerauLevenshtein
from term_distance.api import (
    compare,
    distance,
    pairwise_distances,
    token_distance,
    token_similarity_score,
)
from term_distance.comparator import TermComparator
from term_distance.errors import InvalidCostModel
from term_distance.result import ComparisonResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonResult",
    "CostModel",
    "DamerauLevenshtein",
    "DistanceKind",
    "InvalidCostModel",
    "TermComparator",
    "TokenMatch",
    "compare",
    "distance",
    "pairwise_distances",
    "token_distance",
    "token_similarity_score",
]
