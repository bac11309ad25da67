"""Weights that scale each quality dimension in a metric."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"minimum {low} is greater than maximum {high}")
    if value < low:
        return low
    if value > high:
        return high
    return value


class DimensionWeight(ABC):
    """A weight function for one dimension of a metric."""

    @abstractmethod
    def value(self, context: str | None = None) -> float:
        """Return the weight in force for the given context."""

    def with_context(self, context: str, weight: float) -> DimensionWeight:
        """Return a weight with a context modifier; only contextual weights change."""
        return self

    def update_attention(self, new_weight: float) -> None:
        """Move the attention weight; only attentional weights change."""


@dataclass
class ConstantWeight(DimensionWeight):
    """A weight that is the same in every context."""

    weight: float

    def value(self, context: str | None = None) -> float:
        return self.weight


@dataclass
class ContextualWeight(DimensionWeight):
    """A weight with per-context overrides of a base weight."""

    base_weight: float
    context_modifiers: dict[str, float] = field(default_factory=dict)

    def value(self, context: str | None = None) -> float:
        if context is None:
            return self.base_weight
        return self.context_modifiers.get(context, self.base_weight)

    def with_context(self, context: str, weight: float) -> ContextualWeight:
        return ContextualWeight(
            self.base_weight, {**self.context_modifiers, context: weight}
        )


@dataclass
class AttentionalWeight(DimensionWeight):
    """A weight that follows attention, held within a range."""

    current_weight: float
    min_weight: float
    max_weight: float

    def value(self, context: str | None = None) -> float:
        return self.current_weight

    def update_attention(self, new_weight: float) -> None:
        self.current_weight = _clamp(new_weight, self.min_weight, self.max_weight)


def constant(weight: float) -> ConstantWeight:
    """Create a constant weight."""
    return ConstantWeight(weight)


def contextual(base_weight: float) -> ContextualWeight:
    """Create a contextual weight with no modifiers yet."""
    return ContextualWeight(base_weight)


def attentional(current: float, min_weight: float, max_weight: float) -> AttentionalWeight:
    """Create an attentional weight, clamping the current value into range."""
    return AttentionalWeight(
        _clamp(current, min_weight, max_weight), min_weight, max_weight
    )