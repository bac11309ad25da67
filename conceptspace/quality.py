"""Quality dimensions: the axes along which concepts are measured."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4

from .errors import InvalidDimensionError

_FULL_CIRCLE = 360.0


def _display(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and value == int(value):
        return f"{value:.0f}"
    return repr(value)


def _debug(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return repr(value)


class DimensionType(Enum):
    """The kind of values a quality dimension holds."""

    CONTINUOUS = "continuous"
    CATEGORICAL = "categorical"
    ORDINAL = "ordinal"
    CIRCULAR = "circular"


@dataclass
class QualityDimension:
    """A quality dimension with a half-open range of valid values."""

    name: str
    dimension_type: DimensionType
    start: float
    end: float
    id: UUID = field(default_factory=uuid4)
    context: str | None = None
    description: str | None = None

    @property
    def range(self) -> tuple[float, float]:
        """The half-open range ``[start, end)`` of the dimension."""
        return (self.start, self.end)

    @classmethod
    def continuous(cls, name: str, min_value: float, max_value: float) -> QualityDimension:
        """Create a dimension of continuous values in ``[min_value, max_value)``."""
        return cls(name, DimensionType.CONTINUOUS, float(min_value), float(max_value))

    @classmethod
    def categorical(cls, name: str, num_categories: int) -> QualityDimension:
        """Create a dimension with the given number of categories."""
        return cls(name, DimensionType.CATEGORICAL, 0.0, float(num_categories))

    @classmethod
    def ordinal(cls, name: str, num_levels: int) -> QualityDimension:
        """Create a dimension with the given number of ordered levels."""
        return cls(name, DimensionType.ORDINAL, 0.0, float(num_levels))

    @classmethod
    def circular(cls, name: str) -> QualityDimension:
        """Create a circular dimension measured in degrees."""
        return cls(name, DimensionType.CIRCULAR, 0.0, _FULL_CIRCLE)

    def validate_value(self, value: float) -> None:
        """Raise InvalidDimensionError if the value lies outside the range."""
        if self.dimension_type is DimensionType.CIRCULAR:
            return
        if self.start == self.end:
            if value != self.start:
                raise InvalidDimensionError(
                    f"Value {_display(value)} must equal {_display(self.start)} "
                    f"for zero-range dimension '{self.name}'"
                )
            return
        if not self.start <= value < self.end:
            raise InvalidDimensionError(
                f"Value {_display(value)} is outside range "
                f"{_debug(self.start)}..{_debug(self.end)} for dimension '{self.name}'"
            )

    def normalize_value(self, value: float) -> float:
        """Map a valid value onto ``[0, 1]``."""
        self.validate_value(value)
        if self.dimension_type is DimensionType.CIRCULAR:
            return math.fmod(value, _FULL_CIRCLE) / _FULL_CIRCLE
        size = self.end - self.start
        if size == 0.0:
            return 0.0
        return (value - self.start) / size

    def denormalize_value(self, normalized: float) -> float:
        """Map a value in ``[0, 1]`` back onto the dimension's range."""
        if not 0.0 <= normalized <= 1.0:
            raise InvalidDimensionError(
                f"Normalized value {_display(normalized)} must be in [0, 1]"
            )
        if self.dimension_type is DimensionType.CIRCULAR:
            return normalized * _FULL_CIRCLE
        return self.start + normalized * (self.end - self.start)