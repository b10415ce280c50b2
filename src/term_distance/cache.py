"""DistanceCache: LRU-backed caching proxy for any DistanceMeasure.

Wraps a distance function and memoizes its results keyed by the pair of
sequences.  Pairs already seen bypass the wrapped function on later calls.
LRU eviction occurs silently when ``max_size`` is exceeded — no error is
raised.

Each ``DistanceCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.  The LRU map is mutated on every call, so a single
instance must not be shared between threads.

Example::

    from term_distance import DamerauLevenshtein
    from term_distance.cache import DistanceCache

    engine = DamerauLevenshtein()
    cached = DistanceCache(engine.token_distance, max_size=1024)

    cached(["a", "b"], ["b", "a"])   # computed
    cached(["a", "b"], ["b", "a"])   # served from memory
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from term_distance.protocols import DistanceMeasure

__all__ = ["DistanceCache"]

_Key = tuple[tuple[Hashable, ...], tuple[Hashable, ...]]


class DistanceCache:
    """LRU-backed caching proxy around a ``DistanceMeasure``.

    Satisfies the ``DistanceMeasure`` Protocol structurally.  Sequences are
    keyed by their ``tuple`` form, so ``"ab"``, ``["a", "b"]`` and
    ``("a", "b")`` share one entry.

    Args:
        measure: Any callable ``measure(source, target) -> float``.
        max_size: Maximum number of pairs to hold in memory.  Defaults to 512.
    """

    def __init__(self, measure: DistanceMeasure, max_size: int = 512) -> None:
        self._measure: Any = measure
        self._cache: LRUCache[_Key, float] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def __call__(
        self, source: Sequence[Hashable], target: Sequence[Hashable]
    ) -> float:
        """Return ``measure(source, target)``, computing it at most once per pair."""
        key: _Key = (tuple(source), tuple(target))
        if key in self._cache:
            return self._cache[key]
        value = float(self._measure(source, target))
        self._cache[key] = value
        return value

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
