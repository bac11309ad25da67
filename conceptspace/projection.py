"""Projection of domain events into changes of a conceptual space."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Union
from uuid import UUID, uuid4

from .point import ConceptualPoint


@dataclass
class AddConcept:
    """Add a concept at a position with the given qualities."""

    concept_id: UUID
    concept_type: str
    position: ConceptualPoint
    qualities: dict[Hashable, float] = field(default_factory=dict)


@dataclass
class RemoveConcept:
    """Remove a concept from the space."""

    concept_id: UUID


@dataclass
class AddToRegion:
    """Make a concept a member of a region."""

    concept_id: UUID
    region_id: UUID


@dataclass
class RemoveFromRegion:
    """Take a concept out of a region."""

    concept_id: UUID
    region_id: UUID


ConceptualChange = Union[AddConcept, RemoveConcept, AddToRegion, RemoveFromRegion]


class ConceptualProjection(ABC):
    """An event that can be projected into conceptual changes."""

    event_type: str

    @abstractmethod
    def project(self) -> list[ConceptualChange]:
        """The changes this event makes to the space."""

    @abstractmethod
    def affected_concepts(self) -> list[UUID]:
        """The concepts this event affects."""

    @abstractmethod
    def concept_qualities(self) -> dict[Hashable, float]:
        """Quality values for concepts this event creates."""


def _ln(value: float) -> float:
    if math.isnan(value) or value < 0.0:
        return math.nan
    if value == 0.0:
        return -math.inf
    return math.log(value)


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Transformation(ABC):
    """A transformation applied to a property value before it becomes a quality."""

    @abstractmethod
    def transform(self, value: float) -> float:
        """Apply the transformation."""


@dataclass(frozen=True)
class IdentityTransformation(Transformation):
    """Leaves values unchanged."""

    def transform(self, value: float) -> float:
        return value


@dataclass(frozen=True)
class LinearTransformation(Transformation):
    """Scales and then shifts values."""

    scale: float
    offset: float

    def transform(self, value: float) -> float:
        return value * self.scale + self.offset


@dataclass(frozen=True)
class LogarithmicTransformation(Transformation):
    """Takes the logarithm in the given base; NaN for negative values."""

    base: float

    def transform(self, value: float) -> float:
        return _divide(_ln(value), _ln(self.base))


@dataclass(frozen=True)
class SigmoidTransformation(Transformation):
    """Squashes values into (0, 1) around a midpoint."""

    steepness: float
    midpoint: float

    def transform(self, value: float) -> float:
        try:
            decay = math.exp(-self.steepness * (value - self.midpoint))
        except OverflowError:
            return 0.0
        return 1.0 / (1.0 + decay)


@dataclass(frozen=True)
class CustomTransformation(Transformation):
    """A named transformation applied elsewhere; here values pass through."""

    name: str

    def transform(self, value: float) -> float:
        return value


@dataclass
class ProjectionContext:
    """How event properties map onto quality dimensions."""

    property_to_dimension: dict[str, Hashable] = field(default_factory=dict)
    default_qualities: dict[Hashable, float] = field(default_factory=dict)
    transformations: dict[str, Transformation] = field(default_factory=dict)


class ProjectionContextBuilder:
    """Builds a ProjectionContext step by step."""

    def __init__(self) -> None:
        self._context = ProjectionContext()

    def map_property(
        self, property_name: str, dimension: Hashable
    ) -> ProjectionContextBuilder:
        """Map an event property onto a dimension."""
        self._context.property_to_dimension[property_name] = dimension
        return self

    def with_default(self, dimension: Hashable, value: float) -> ProjectionContextBuilder:
        """Set the default quality value for a dimension."""
        self._context.default_qualities[dimension] = value
        return self

    def with_transformation(
        self, property_name: str, transformation: Transformation
    ) -> ProjectionContextBuilder:
        """Set the transformation applied to a property."""
        self._context.transformations[property_name] = transformation
        return self

    def build(self) -> ProjectionContext:
        """The context built so far."""
        return self._context


@dataclass
class ExampleDomainEvent(ConceptualProjection):
    """A generic domain event projected as a remove followed by an add."""

    entity_id: str
    event_type: str
    properties: dict[str, float] = field(default_factory=dict)

    def project(self) -> list[ConceptualChange]:
        concept_id = uuid4()
        return [
            RemoveConcept(concept_id),
            AddConcept(
                concept_id,
                self.event_type,
                ConceptualPoint((), {}),
                self.concept_qualities(),
            ),
        ]

    def affected_concepts(self) -> list[UUID]:
        return [uuid4()]

    def concept_qualities(self) -> dict[Hashable, float]:
        return {}