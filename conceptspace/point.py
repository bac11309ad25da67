"""Points of a conceptual space."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from .errors import InvalidDimensionError, InvalidPointError


def _powf(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.inf if base == 0.0 else math.nan


def _minkowski(
    first: Sequence[float],
    second: Sequence[float],
    weights: Sequence[float],
    p: float,
    mismatch_message: str,
) -> float:
    if len(first) != len(second):
        raise InvalidPointError(mismatch_message)
    if len(weights) != len(first):
        raise InvalidDimensionError("Weight vector has incorrect length")
    total = sum(
        w * _powf(abs(a - b), p) for a, b, w in zip(first, second, weights)
    )
    return _powf(total, 1.0 / p)


@dataclass
class ConceptualPoint:
    """A point with coordinates along the quality dimensions of a space."""

    coordinates: tuple[float, ...]
    dimension_map: dict[Hashable, int] = field(default_factory=dict)
    id: UUID | None = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        self.coordinates = tuple(float(c) for c in self.coordinates)
        self.dimension_map = dict(self.dimension_map)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "coordinates" and isinstance(value, Iterable):
            value = tuple(float(c) for c in value)
        super().__setattr__(name, value)

    def get_dimension_value(self, dimension_id: Hashable) -> float | None:
        """Return the coordinate for a dimension, or None if it is unknown."""
        index = self.dimension_map.get(dimension_id)
        if index is None or not 0 <= index < len(self.coordinates):
            return None
        return self.coordinates[index]

    def weighted_distance(
        self, other: ConceptualPoint, weights: Sequence[float], p: float
    ) -> float:
        """Weighted Minkowski distance of order p to another point."""
        return _minkowski(
            self.coordinates,
            other.coordinates,
            weights,
            p,
            "Points have different dimensions",
        )

    def dot(self, other: ConceptualPoint) -> float:
        """Dot product of the coordinate vectors."""
        if len(self.coordinates) != len(other.coordinates):
            raise InvalidPointError("Points have different dimensions")
        return math.fsum(a * b for a, b in zip(self.coordinates, other.coordinates))

    def norm(self) -> float:
        """Euclidean length of the coordinate vector."""
        return math.hypot(*self.coordinates)


__all__ = ["ConceptualPoint"]

_ = Mapping  # kept for type readers of dimension maps