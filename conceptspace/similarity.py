"""Similarity measures over points of a conceptual space."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Protocol, Union
from uuid import UUID

from .errors import InvalidDimensionError, InvalidPointError
from .point import ConceptualPoint
from .space import ConceptualSpace

_LEARNING_RATE = 0.1


class _HasDistance(Protocol):
    def distance(self, p1: ConceptualPoint, p2: ConceptualPoint) -> float: ...


Metric = Union[_HasDistance, Callable[[ConceptualPoint, ConceptualPoint], float]]
"""Anything with a ``distance(a, b)`` method, or a plain ``(a, b) -> float`` callable."""


def _measure(metric: Metric, a: ConceptualPoint, b: ConceptualPoint) -> float:
    distance = getattr(metric, "distance", None)
    if callable(distance):
        return distance(a, b)
    if callable(metric):
        return metric(a, b)
    raise TypeError(f"{metric!r} is not a distance metric")


def _to_similarity(distance: float) -> float:
    return 1.0 / (1.0 + distance)


def _cosine_unit(a: ConceptualPoint, b: ConceptualPoint) -> float:
    """Cosine similarity mapped from [-1, 1] onto [0, 1]; 0 for a zero vector."""
    norm_a = a.norm()
    norm_b = b.norm()
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return (a.dot(b) / (norm_a * norm_b) + 1.0) / 2.0


def _pair_key(a: ConceptualPoint, b: ConceptualPoint) -> tuple[UUID, UUID] | None:
    if a.id is None or b.id is None:
        return None
    return (a.id, b.id) if a.id < b.id else (b.id, a.id)


class SimilarityEngine:
    """Computes similarities with a base metric, context weights and a learned cache."""

    def __init__(self, base_metric: Metric) -> None:
        self.base_metric = base_metric
        self.context_weights: dict[str, list[float]] = {}
        self._cache: dict[tuple[UUID, UUID], float] = {}

    def add_context_weights(self, context: str, weights: Sequence[float]) -> None:
        """Register dimension weights to use for a context."""
        self.context_weights[context] = list(weights)

    def basic_similarity(self, a: ConceptualPoint, b: ConceptualPoint) -> float:
        """Similarity as the inverse of the base-metric distance."""
        return _to_similarity(_measure(self.base_metric, a, b))

    def contextual_similarity(
        self, a: ConceptualPoint, b: ConceptualPoint, context: str | None = None
    ) -> float:
        """Similarity under the context's weights, or basic similarity if it has none."""
        weights = self.context_weights.get(context) if context is not None else None
        if weights is None:
            return self.basic_similarity(a, b)
        return _to_similarity(a.weighted_distance(b, weights, 2.0))

    def semantic_similarity(self, a: ConceptualPoint, b: ConceptualPoint) -> float:
        """Cosine similarity in [0, 1], preferring a learned value when cached."""
        key = _pair_key(a, b)
        if key is not None and key in self._cache:
            return self._cache[key]
        return _cosine_unit(a, b)

    def adaptive_similarity(
        self,
        a: ConceptualPoint,
        b: ConceptualPoint,
        feedback: float | None = None,
    ) -> float:
        """Semantic similarity nudged towards the feedback score, which is remembered."""
        current = self.semantic_similarity(a, b)
        key = _pair_key(a, b)
        if key is None or feedback is None:
            return current
        updated = current * (1.0 - _LEARNING_RATE) + feedback * _LEARNING_RATE
        self._cache[key] = updated
        return updated

    def clear_cache(self) -> None:
        """Forget every learned similarity."""
        self._cache.clear()

    def cache_stats(self) -> tuple[int, int]:
        """Number of cached pairs and the cache capacity.

        The cache grows on demand, so its capacity is its current size.
        """
        size = len(self._cache)
        return (size, size)


def category_based_similarity(
    point_a: ConceptualPoint, point_b: ConceptualPoint, space: ConceptualSpace
) -> float:
    """Similarity that is high for points sharing a region of the space."""
    ids_a = {region.id for region in space.find_containing_regions(point_a)}
    ids_b = {region.id for region in space.find_containing_regions(point_b)}
    distance = space.metric.distance(point_a, point_b)
    if ids_a & ids_b:
        return 0.9 + 0.1 / (1.0 + distance)
    return _to_similarity(distance)


def prototype_similarity(
    point: ConceptualPoint, prototype: ConceptualPoint, space: ConceptualSpace
) -> float:
    """Similarity decaying exponentially with distance from a prototype."""
    return math.exp(-space.metric.distance(point, prototype))


def salience_weighted_similarity(
    point_a: ConceptualPoint,
    point_b: ConceptualPoint,
    salience_weights: Sequence[float],
) -> float:
    """Similarity from a salience-weighted, weight-normalised Euclidean distance."""
    if len(salience_weights) != len(point_a.coordinates):
        raise InvalidDimensionError("Salience weights must match point dimensions")
    if len(point_b.coordinates) != len(point_a.coordinates):
        raise InvalidPointError("Points have different dimensions")
    total_weight = sum(salience_weights)
    if total_weight == 0.0:
        return 0.0
    weighted = sum(
        w * (a - b) ** 2
        for a, b, w in zip(point_a.coordinates, point_b.coordinates, salience_weights)
    )
    return _to_similarity(math.sqrt(weighted / total_weight))


def feature_similarity(
    features_a: Mapping[Hashable, float], features_b: Mapping[Hashable, float]
) -> float:
    """Mean ratio of smaller to larger value over all features of either side."""
    features = set(features_a) | set(features_b)
    if not features:
        return 0.0
    total = 0.0
    for feature in features:
        value_a = features_a.get(feature, 0.0)
        value_b = features_b.get(feature, 0.0)
        high = max(value_a, value_b)
        if high > 0.0:
            total += min(value_a, value_b) / high
    return total / len(features)


def temporal_similarity(
    trajectory_a: Sequence[ConceptualPoint],
    trajectory_b: Sequence[ConceptualPoint],
    metric: Metric,
) -> float:
    """Similarity of two trajectories from their dynamic time warping distance."""
    if not trajectory_a or not trajectory_b:
        return 0.0
    previous: list[float] = []
    for i, a in enumerate(trajectory_a):
        row: list[float] = []
        for j, b in enumerate(trajectory_b):
            cost = _measure(metric, a, b)
            if i == 0 and j == 0:
                row.append(cost)
            elif i == 0:
                row.append(row[j - 1] + cost)
            elif j == 0:
                row.append(previous[0] + cost)
            else:
                row.append(cost + min(previous[j], row[j - 1], previous[j - 1]))
        previous = row
    return _to_similarity(previous[-1])


def multi_level_similarity(
    point_a: ConceptualPoint,
    point_b: ConceptualPoint,
    space: ConceptualSpace,
    levels: Sequence[float],
) -> float:
    """Weighted mean of geometric, category and cosine similarity.

    The first three entries of ``levels`` weight those measures in that order;
    further entries are ignored.
    """
    if not levels:
        return 0.0
    measures = [
        lambda: _to_similarity(space.metric.distance(point_a, point_b)),
        lambda: category_based_similarity(point_a, point_b, space),
        lambda: _cosine_unit(point_a, point_b),
    ]
    total = 0.0
    total_weight = 0.0
    for weight, measure in zip(levels, measures):
        total += weight * measure()
        total_weight += weight
    return total / total_weight if total_weight > 0.0 else 0.0