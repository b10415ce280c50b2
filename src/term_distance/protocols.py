"""Structural protocols shared with clustering callers.

``DistanceMeasure`` is anything callable as ``measure(a, b) -> float``: the
bound engine methods, ``DistanceCache`` and ``TermComparator.measure`` all
satisfy it without inheriting from anything.

``Clusterer`` describes the clustering layer this library plugs into.  The
library ships no clustering algorithm; the protocol only fixes the shape a
clusterer is expected to have.

Example::

    from term_distance import DamerauLevenshtein
    from term_distance.protocols import DistanceMeasure

    engine = DamerauLevenshtein()
    assert isinstance(engine.token_distance, DistanceMeasure)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection

T = TypeVar("T")


@runtime_checkable
class DistanceMeasure(Protocol):
    """Pairwise distance between two points."""

    def __call__(self, a: Any, b: Any, /) -> float: ...


@runtime_checkable
class Clusterer(Protocol[T]):
    """A cluster-analysis algorithm driven by a ``DistanceMeasure``.

    Implementations group ``points`` into clusters, each cluster being a list
    of the original points, and expose the measure they compare points with.
    """

    distance_measure: DistanceMeasure

    def cluster(self, points: Collection[T]) -> list[list[T]]: ...
