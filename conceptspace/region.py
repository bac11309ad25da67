"""Convex regions of a conceptual space, representing natural categories."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations
from uuid import UUID, uuid4

from .errors import InvalidPointError
from .point import ConceptualPoint

_CONVEXITY_SAMPLES = (0.25, 0.5, 0.75)


@dataclass
class Hyperplane:
    """A hyperplane given by a normal vector and an offset from the origin."""

    normal: tuple[float, ...]
    offset: float

    def __post_init__(self) -> None:
        self.normal = tuple(float(c) for c in self.normal)

    def signed_distance(self, point: ConceptualPoint) -> float:
        """Distance from the plane, positive on the side the normal points to."""
        if len(self.normal) != len(point.coordinates):
            raise InvalidPointError("Point and hyperplane have different dimensions")
        return sum(n * c for n, c in zip(self.normal, point.coordinates)) - self.offset

    def contains_positive(self, point: ConceptualPoint) -> bool:
        """Whether the point lies on the plane or on its positive side."""
        return self.signed_distance(point) >= 0.0


@dataclass
class ConvexRegion:
    """A convex region bounded by hyperplanes around a prototype."""

    prototype: ConceptualPoint
    boundaries: list[Hyperplane] = field(default_factory=list)
    member_points: set[UUID] = field(default_factory=set)
    name: str | None = None
    description: str | None = None
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_prototype(cls, prototype: ConceptualPoint) -> ConvexRegion:
        """Create an unbounded region around a prototype."""
        return cls(prototype)

    def with_name(self, name: str) -> ConvexRegion:
        """Return a copy of this region carrying the given name."""
        region = copy.deepcopy(self)
        region.name = name
        return region

    def with_description(self, description: str) -> ConvexRegion:
        """Return a copy of this region carrying the given description."""
        region = copy.deepcopy(self)
        region.description = description
        return region

    def contains(self, point: ConceptualPoint) -> bool:
        """Whether the point is on the positive side of every boundary."""
        return all(plane.contains_positive(point) for plane in self.boundaries)

    def update_prototype(self, points: Sequence[ConceptualPoint]) -> None:
        """Move the prototype to the centroid of the given points."""
        if not points:
            raise InvalidPointError("Cannot update prototype with no concepts")
        dim = len(points[0].coordinates)
        if any(len(p.coordinates) != dim for p in points):
            raise InvalidPointError("Points have different dimensions")
        count = len(points)
        self.prototype.coordinates = tuple(
            sum(axis) / count for axis in zip(*(p.coordinates for p in points))
        ) if dim else ()

    def is_convex(self, sample_points: Sequence[ConceptualPoint]) -> bool:
        """Check that points between every pair of samples stay in the region."""
        return all(
            self.contains(_interpolate(first, second, t))
            for first, second in combinations(sample_points, 2)
            for t in _CONVEXITY_SAMPLES
        )

    def add_member(self, concept_id: UUID) -> None:
        """Record a member point."""
        self.member_points.add(concept_id)

    def remove_member(self, concept_id: UUID) -> bool:
        """Forget a member point; return whether it was a member."""
        if concept_id in self.member_points:
            self.member_points.remove(concept_id)
            return True
        return False

    def member_count(self) -> int:
        """Number of member points."""
        return len(self.member_points)


def _interpolate(
    first: ConceptualPoint, second: ConceptualPoint, t: float
) -> ConceptualPoint:
    if len(first.coordinates) != len(second.coordinates):
        raise InvalidPointError("Points have different dimensions")
    coords = tuple(
        a * (1.0 - t) + b * t for a, b in zip(first.coordinates, second.coordinates)
    )
    return ConceptualPoint(coords, dict(first.dimension_map), id=None)