"""Criteria for searching concepts by their quality values."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

_EPSILON = sys.float_info.epsilon


@dataclass
class QualityCriteria:
    """Conditions on quality values that a concept must all satisfy."""

    required: dict[Hashable, float] = field(default_factory=dict)
    minimum: dict[Hashable, float] = field(default_factory=dict)
    maximum: dict[Hashable, float] = field(default_factory=dict)
    must_have: list[Hashable] = field(default_factory=list)

    def with_required(self, dimension: Hashable, value: float) -> QualityCriteria:
        """Require the dimension to hold exactly this value."""
        self.required[dimension] = value
        return self

    def with_minimum(self, dimension: Hashable, value: float) -> QualityCriteria:
        """Require the dimension to be at least this value."""
        self.minimum[dimension] = value
        return self

    def with_maximum(self, dimension: Hashable, value: float) -> QualityCriteria:
        """Require the dimension to be at most this value."""
        self.maximum[dimension] = value
        return self

    def must_have_dimension(self, dimension: Hashable) -> QualityCriteria:
        """Require the dimension to be present with any value."""
        self.must_have.append(dimension)
        return self

    def matches(self, concept: Any) -> bool:
        """Whether a concept meets every criterion.

        The concept is either a mapping of dimension to value or an object
        with such a mapping as its ``qualities`` attribute.
        """
        qualities: Mapping[Hashable, float] = (
            concept if isinstance(concept, Mapping) else concept.qualities
        )
        for dimension, value in self.required.items():
            actual = qualities.get(dimension)
            if actual is None or not abs(actual - value) < _EPSILON:
                return False
        for dimension, low in self.minimum.items():
            actual = qualities.get(dimension)
            if actual is None or not actual >= low:
                return False
        for dimension, high in self.maximum.items():
            actual = qualities.get(dimension)
            if actual is None or not actual <= high:
                return False
        return all(dimension in qualities for dimension in self.must_have)