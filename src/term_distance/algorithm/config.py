"""CostModel, TokenMatch and DistanceKind for engine configuration.

CostModel is a frozen (immutable) dataclass holding the four edit-operation
costs.  TokenMatch selects how token-level comparisons treat letter case, and
DistanceKind selects which engine query a comparator runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from term_distance.errors import InvalidCostModel


class TokenMatch(StrEnum):
    """How token-level queries compare tokens.

    - UNIFORM: Every comparison, including the swap-partner index, uses the
               case-folded token.
    - MIXED:   Seed cell and interior match check are case-insensitive; the
               first row/column baselines and the swap-partner index use exact
               string equality.
    """

    UNIFORM = auto()
    MIXED = auto()


class DistanceKind(StrEnum):
    """Which engine query a comparator dispatches to.

    - SYMBOL: ``distance`` over atomic symbols (e.g. the characters of a str).
    - TOKEN:  ``token_distance`` over string tokens.
    - SCORE:  ``token_similarity_score`` over string tokens.
    """

    SYMBOL = auto()
    TOKEN = auto()
    SCORE = auto()


@dataclass(frozen=True, slots=True)
class CostModel:
    """Immutable edit-operation costs.

    Attributes:
        delete:  Cost of deleting one source symbol (>= 0).
        insert:  Cost of inserting one target symbol (>= 0).
        replace: Cost of replacing one symbol with another (>= 0).
        swap:    Cost of transposing two symbols (>= 0).  Must satisfy
            ``2 * swap >= insert + delete``.
    """

    delete: float = 1.0
    insert: float = 1.0
    replace: float = 1.0
    swap: float = 1.0

    def __post_init__(self) -> None:
        for name in ("delete", "insert", "replace", "swap"):
            value = getattr(self, name)
            if value < 0.0:
                msg = f"{name} cost must be >= 0.0, got {value}"
                raise InvalidCostModel(msg)
        if 2 * self.swap < self.insert + self.delete:
            msg = (
                "2 * swap must be >= insert + delete, got "
                f"swap={self.swap}, insert={self.insert}, delete={self.delete}"
            )
            raise InvalidCostModel(msg)
