"""Tests for the DistanceMeasure and Clusterer structural protocols."""

from __future__ import annotations

from collections.abc import Collection

from term_distance.algorithm.damerau import DamerauLevenshtein
from term_distance.comparator import TermComparator
from term_distance.protocols import Clusterer, DistanceMeasure


class _ThresholdClusterer:
    """Greedy single-pass clusterer used only to exercise the protocol."""

    def __init__(self, distance_measure: DistanceMeasure, threshold: float) -> None:
        self.distance_measure = distance_measure
        self._threshold = threshold

    def cluster(self, points: Collection[list[str]]) -> list[list[list[str]]]:
        clusters: list[list[list[str]]] = []
        for point in points:
            for members in clusters:
                if self.distance_measure(members[0], point) <= self._threshold:
                    members.append(point)
                    break
            else:
                clusters.append([point])
        return clusters


class TestDistanceMeasure:
    def test_engine_methods_conform(self) -> None:
        engine = DamerauLevenshtein()
        assert isinstance(engine.distance, DistanceMeasure)
        assert isinstance(engine.token_distance, DistanceMeasure)
        assert isinstance(engine.token_similarity_score, DistanceMeasure)

    def test_comparator_measure_conforms(self) -> None:
        assert isinstance(TermComparator().measure, DistanceMeasure)

    def test_non_callable_does_not_conform(self) -> None:
        assert not isinstance(42, DistanceMeasure)


class TestClusterer:
    def test_structural_conformance(self) -> None:
        clusterer = _ThresholdClusterer(DamerauLevenshtein().token_distance, 1.0)
        assert isinstance(clusterer, Clusterer)

    def test_clusters_with_token_distance(self) -> None:
        clusterer = _ThresholdClusterer(DamerauLevenshtein().token_distance, 1.0)
        points = [["new", "york"], ["York", "New"], ["los", "angeles", "county"]]
        clusters = clusterer.cluster(points)
        assert clusters == [
            [["new", "york"], ["York", "New"]],
            [["los", "angeles", "county"]],
        ]

    def test_object_without_cluster_does_not_conform(self) -> None:
        class _MeasureOnly:
            distance_measure = DamerauLevenshtein().distance

        assert not isinstance(_MeasureOnly(), Clusterer)
