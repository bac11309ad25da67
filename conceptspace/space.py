"""Conceptual spaces: metric spaces holding points and convex regions."""

from __future__ import annotations

import copy
import sys
from collections.abc import Hashable
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from .errors import ConceptualError, InvalidDimensionError
from .point import ConceptualPoint
from .region import ConvexRegion
from .weights import ConstantWeight, DimensionWeight

_EPSILON = sys.float_info.epsilon


@dataclass
class ConceptualMetric:
    """A weighted Minkowski metric over the dimensions of a space."""

    dimension_weights: list[DimensionWeight]
    minkowski_p: float
    current_context: str | None = None

    @classmethod
    def uniform(cls, num_dimensions: int, minkowski_p: float) -> ConceptualMetric:
        """A metric weighting every dimension by 1."""
        return cls([ConstantWeight(1.0) for _ in range(num_dimensions)], minkowski_p)

    def get_weights(self) -> list[float]:
        """Weight values in force for the current context."""
        return [w.value(self.current_context) for w in self.dimension_weights]

    def distance(self, p1: ConceptualPoint, p2: ConceptualPoint) -> float:
        """Distance between two points under this metric."""
        return p1.weighted_distance(p2, self.get_weights(), self.minkowski_p)

    def open_ball(self, center: ConceptualPoint, radius: float) -> OpenBall:
        """The open ball of the given radius around a point."""
        return OpenBall(copy.deepcopy(center), radius, copy.deepcopy(self))


@dataclass
class OpenBall:
    """An open neighbourhood around a point."""

    center: ConceptualPoint
    radius: float
    metric: ConceptualMetric

    def contains(self, point: ConceptualPoint) -> bool:
        """Whether the point lies strictly within the radius."""
        return self.metric.distance(self.center, point) < self.radius


@dataclass
class ConceptualSpace:
    """A space of points and convex regions under a metric."""

    name: str
    dimension_ids: list[Hashable]
    metric: ConceptualMetric
    id: UUID = field(default_factory=uuid4)
    regions: dict[UUID, ConvexRegion] = field(default_factory=dict)
    points: dict[UUID, ConceptualPoint] = field(default_factory=dict)

    def add_point(self, point: ConceptualPoint) -> UUID:
        """Store a point and return the id it is stored under."""
        point_id = point.id if point.id is not None else uuid4()
        self.points[point_id] = point
        return point_id

    def add_region(self, region: ConvexRegion) -> None:
        """Store a region after checking it is convex over its known members."""
        samples = [
            self.points[member]
            for member in region.member_points
            if member in self.points
        ]
        if samples and not region.is_convex(samples):
            raise InvalidDimensionError("Region is not convex")
        self.regions[region.id] = region

    def find_containing_regions(self, point: ConceptualPoint) -> list[ConvexRegion]:
        """All regions that contain the point."""
        return [region for region in self.regions.values() if region.contains(point)]

    def k_nearest_neighbors(
        self, point: ConceptualPoint, k: int
    ) -> list[tuple[UUID, float]]:
        """The k stored points nearest to a point, nearest first.

        Points whose distance cannot be computed are left out.
        """
        distances: list[tuple[UUID, float]] = []
        for point_id, other in self.points.items():
            try:
                distances.append((point_id, self.metric.distance(point, other)))
            except ConceptualError:
                continue
        distances.sort(key=lambda entry: entry[1])
        return distances[:k]

    def voronoi_cell(self, prototype: ConceptualPoint) -> list[ConceptualPoint]:
        """Points no nearer to any other region's prototype than to this one."""
        others = [
            region.prototype
            for region in self.regions.values()
            if region.prototype.id != prototype.id
        ]
        cell = []
        for point in self.points.values():
            own = self.metric.distance(point, prototype)
            if all(self.metric.distance(point, other) >= own for other in others):
                cell.append(point)
        return cell

    def verify_metric_axioms(self, sample_size: int) -> bool:
        """Check the metric axioms on the first sample_size stored points."""
        sample = list(self.points.values())[:sample_size]
        distance = self.metric.distance
        for i, a in enumerate(sample):
            for j, b in enumerate(sample):
                d_ab = distance(a, b)
                if d_ab < 0.0:
                    return False
                if i == j and d_ab != 0.0:
                    return False
                if abs(d_ab - distance(b, a)) > _EPSILON:
                    return False
                for c in sample:
                    if d_ab > distance(a, c) + distance(c, b) + _EPSILON:
                        return False
        return True