"""DamerauLevenshtein: weighted edit distance with adjacent transpositions.

Computes the minimum cost of turning a source sequence into a target sequence
using four operations, each with a caller-supplied cost:

- delete a source symbol
- insert a target symbol
- replace one symbol with another
- swap two symbols that appear in reverse order in the other sequence

A swap may have deletions and insertions between its two endpoints; those are
charged on top of the flat swap cost.  Because ``CostModel`` guarantees
``2 * swap >= insert + delete``, an optimal edit path never swaps the same
symbol twice, and a single forward pass over an ``(n, m)`` table suffices.

Table layout:
- ``table[i, j]`` holds the cheapest way to turn ``source[:i + 1]`` into
  ``target[:j + 1]``.  Cells are written once and never corrected.
- ``last_row`` maps a source symbol to the most recent row it occupied.  It is
  updated after each row is filled, so a lookup from row ``i`` only sees rows
  ``< i``.
- ``match_col`` tracks, within row ``i``, the latest column ``< j`` whose target
  symbol equals ``source[i]``.

Both structures are local to one call.  The engine itself holds nothing but
its frozen configuration, so one instance can be shared between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence

import numpy as np

from term_distance.algorithm.config import CostModel, TokenMatch
from term_distance.algorithm.normalizer import normalize_distance

__all__ = ["DamerauLevenshtein"]

logger = logging.getLogger(__name__)


class DamerauLevenshtein:
    """Restricted Damerau-Levenshtein distance under a weighted cost model.

    Example::

        from term_distance.algorithm import CostModel, DamerauLevenshtein

        engine = DamerauLevenshtein(CostModel(delete=1, insert=1, replace=1, swap=1))
        engine.distance("ab", "ba")                             # 1.0
        engine.token_distance(["Cat", "Dog"], ["cat", "dog"])   # 0.0
        engine.token_similarity_score(["a", "b"], ["b", "a"])   # 0.5

    Inputs must not be ``None``; every query runs to completion in
    O(n * m) time and memory.
    """

    def __init__(
        self,
        costs: CostModel | None = None,
        token_match: TokenMatch = TokenMatch.UNIFORM,
    ) -> None:
        """Initialise the engine.

        Args:
            costs:       Edit-operation costs.  Defaults to ``CostModel()``
                (unit costs).  Validation happens when the ``CostModel`` is
                built, so an engine can never hold an invalid cost model.
            token_match: Case policy for the token-level queries.  Defaults to
                ``TokenMatch.UNIFORM``.
        """
        self._costs = costs if costs is not None else CostModel()
        self._token_match = TokenMatch(token_match)
        if self._token_match == TokenMatch.MIXED:
            logger.warning(
                "TokenMatch.MIXED compares first row/column tokens and swap "
                "partners case-sensitively; distances may differ from UNIFORM"
            )
        logger.debug(
            "DamerauLevenshtein created: costs=%s token_match=%s",
            self._costs,
            self._token_match,
        )

    @property
    def costs(self) -> CostModel:
        """The immutable cost model this engine was built with."""
        return self._costs

    @property
    def token_match(self) -> TokenMatch:
        """The case policy used by the token-level queries."""
        return self._token_match

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def distance(
        self, source: Sequence[Hashable], target: Sequence[Hashable]
    ) -> float:
        """Return the edit distance between two symbol sequences.

        Symbols are compared by value equality.  An empty source costs
        ``len(target) * insert``; an empty target costs ``len(source) * delete``.
        """
        return self._edit_distance(source, target, source, target)

    def token_distance(self, source: Sequence[str], target: Sequence[str]) -> float:
        """Return the edit distance between two token sequences.

        Tokens are compared case-insensitively.  Under ``TokenMatch.MIXED`` the
        first row/column baselines and swap-partner lookups compare tokens
        exactly instead.  Empty sides follow the same rule as ``distance``.
        """
        folded_source = [token.casefold() for token in source]
        folded_target = [token.casefold() for token in target]
        if self._token_match == TokenMatch.UNIFORM:
            return self._edit_distance(
                folded_source, folded_target, folded_source, folded_target
            )
        return self._edit_distance(source, target, folded_source, folded_target)

    def token_similarity_score(
        self, source: Sequence[str], target: Sequence[str]
    ) -> float:
        """Return the token distance divided by the longer sequence length.

        Returns 0.0 when either sequence is empty.  See
        ``term_distance.algorithm.normalizer.normalize_distance``.
        """
        if len(source) == 0 or len(target) == 0:
            return 0.0
        raw = self.token_distance(source, target)
        return normalize_distance(raw, len(source), len(target))

    # ------------------------------------------------------------------
    # Dynamic programme
    # ------------------------------------------------------------------

    def _edit_distance(
        self,
        source: Sequence[Hashable],
        target: Sequence[Hashable],
        loose_source: Sequence[Hashable],
        loose_target: Sequence[Hashable],
    ) -> float:
        """Fill the DP table and return its terminal cell.

        ``source``/``target`` are used for the first row/column baselines and
        as last-seen index keys.  ``loose_source``/``loose_target`` (same
        lengths) are used for the seed cell and the interior match check.
        Symbol-level and uniform token queries pass the same sequences twice.

        Args:
            source:       Exact source symbols.
            target:       Exact target symbols.
            loose_source: Source symbols for seed and interior comparisons.
            loose_target: Target symbols for seed and interior comparisons.

        Returns:
            Minimum total edit cost.
        """
        costs = self._costs
        n = len(source)
        m = len(target)

        if n == 0:
            return float(m * costs.insert)
        if m == 0:
            return float(n * costs.delete)

        table = np.zeros((n, m), dtype=np.float64)
        last_row: dict[Hashable, int] = {}

        if loose_source[0] != loose_target[0]:
            table[0, 0] = min(costs.replace, costs.delete + costs.insert)
        last_row[source[0]] = 0

        # First column: source[:i + 1] -> target[0]
        for i in range(1, n):
            table[i, 0] = min(
                table[i - 1, 0] + costs.delete,
                (i + 1) * costs.delete + costs.insert,
                i * costs.delete + (0.0 if source[i] == target[0] else costs.replace),
            )

        # First row: source[0] -> target[:j + 1]
        for j in range(1, m):
            table[0, j] = min(
                (j + 1) * costs.insert + costs.delete,
                table[0, j - 1] + costs.insert,
                j * costs.insert + (0.0 if source[0] == target[j] else costs.replace),
            )

        for i in range(1, n):
            match_col = 0 if source[i] == target[0] else -1
            for j in range(1, m):
                i_swap = last_row.get(target[j])
                j_swap = match_col

                delete_cost = table[i - 1, j] + costs.delete
                insert_cost = table[i, j - 1] + costs.insert
                match_cost = table[i - 1, j - 1]
                if loose_source[i] != loose_target[j]:
                    match_cost += costs.replace
                else:
                    match_col = j

                swap_cost = np.inf
                if i_swap is not None and j_swap != -1:
                    if i_swap == 0 and j_swap == 0:
                        pre_swap = 0.0
                    else:
                        pre_swap = table[max(0, i_swap - 1), max(0, j_swap - 1)]
                    swap_cost = (
                        pre_swap
                        + (i - i_swap - 1) * costs.delete
                        + (j - j_swap - 1) * costs.insert
                        + costs.swap
                    )

                table[i, j] = min(delete_cost, insert_cost, match_cost, swap_cost)
            last_row[source[i]] = i

        return float(table[n - 1, m - 1])
