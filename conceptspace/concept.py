"""Named concepts placed in a conceptual space."""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from .point import _minkowski


@dataclass
class Concept:
    """A concept: a point in conceptual space with an optional name and description."""

    coordinates: tuple[float, ...]
    dimension_map: dict[Hashable, int] = field(default_factory=dict)
    id: UUID | None = field(default_factory=uuid4)
    name: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        self.coordinates = tuple(float(c) for c in self.coordinates)
        self.dimension_map = dict(self.dimension_map)

    def with_name(self, name: str) -> Concept:
        """Return a copy of this concept carrying the given name."""
        return dataclasses.replace(self, name=name)

    def with_description(self, description: str) -> Concept:
        """Return a copy of this concept carrying the given description."""
        return dataclasses.replace(self, description=description)

    def get_dimension_value(self, dimension_id: Hashable) -> float | None:
        """Return the coordinate for a dimension, or None if it is unknown."""
        index = self.dimension_map.get(dimension_id)
        if index is None or not 0 <= index < len(self.coordinates):
            return None
        return self.coordinates[index]

    def weighted_distance(
        self, other: Concept, weights: Sequence[float], p: float
    ) -> float:
        """Weighted Minkowski distance of order p to another concept."""
        return _minkowski(
            self.coordinates,
            other.coordinates,
            weights,
            p,
            "Concepts have different dimensions",
        )