"""Morphisms relating concepts across bounded contexts."""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

ConceptRef = tuple[Hashable, UUID]
"""A concept in a context: ``(context_id, concept_id)``."""


class MorphismKind(Enum):
    """The kind of relationship a morphism expresses."""

    IDENTITY_MAPPING = "identity_mapping"
    POLICY_APPLICATION = "policy_application"
    STATE_MAPPING = "state_mapping"
    SEMANTIC_LINK = "semantic_link"
    HIERARCHY = "hierarchy"
    TEMPORAL = "temporal"
    CAUSAL = "causal"
    CUSTOM = "custom"


_ARITY = {
    MorphismKind.HIERARCHY: 2,
    MorphismKind.TEMPORAL: 1,
    MorphismKind.CAUSAL: 2,
    MorphismKind.CUSTOM: 1,
}


@dataclass(frozen=True)
class MorphismType:
    """A morphism kind together with the role names it carries."""

    kind: MorphismKind
    parameters: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))
        expected = _ARITY.get(self.kind, 0)
        if len(self.parameters) != expected:
            raise ValueError(
                f"{self.kind.name} takes {expected} parameter(s), "
                f"got {len(self.parameters)}"
            )

    @classmethod
    def hierarchy(cls, parent_role: str, child_role: str) -> MorphismType:
        """A parent-child relationship."""
        return cls(MorphismKind.HIERARCHY, (parent_role, child_role))

    @classmethod
    def temporal(cls, relationship: str) -> MorphismType:
        """A before-after relationship."""
        return cls(MorphismKind.TEMPORAL, (relationship,))

    @classmethod
    def causal(cls, cause_role: str, effect_role: str) -> MorphismType:
        """A cause-effect relationship."""
        return cls(MorphismKind.CAUSAL, (cause_role, effect_role))

    @classmethod
    def custom(cls, name: str) -> MorphismType:
        """A relationship of a named custom kind."""
        return cls(MorphismKind.CUSTOM, (name,))


@dataclass
class CrossContextMorphism:
    """A weighted relationship between concepts in two contexts."""

    source: ConceptRef
    target: ConceptRef
    morphism_type: MorphismType
    strength: float
    bidirectional: bool = False
    metadata: Any = None
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def create_bidirectional(
        cls,
        source: ConceptRef,
        target: ConceptRef,
        morphism_type: MorphismType,
        strength: float,
    ) -> CrossContextMorphism:
        """Create a morphism that holds in both directions."""
        return cls(source, target, morphism_type, strength, bidirectional=True)

    def connects_contexts(self, context1: Hashable, context2: Hashable) -> bool:
        """Whether this morphism joins the two contexts, in either direction."""
        ends = (self.source[0], self.target[0])
        return ends in ((context1, context2), (context2, context1))

    def involves_concept(self, concept_id: UUID) -> bool:
        """Whether the concept is at either end of this morphism."""
        return concept_id in (self.source[1], self.target[1])

    def inverse(self) -> CrossContextMorphism | None:
        """The reversed morphism, or None if this one is one-way."""
        if not self.bidirectional:
            return None
        return CrossContextMorphism(
            self.target,
            self.source,
            self.morphism_type,
            self.strength,
            bidirectional=True,
            metadata=dataclasses.replace(self).metadata,
        )


@dataclass(frozen=True)
class MorphismDiscoveryRule:
    """A rule describing which morphisms to create between which contexts."""

    name: str
    morphism_type: MorphismType
    source_context: Hashable | None = None
    target_context: Hashable | None = None
    similarity_threshold: float = 0.7
    bidirectional: bool = False

    def with_source_context(self, context: Hashable) -> MorphismDiscoveryRule:
        """Return a copy restricted to the given source context."""
        return dataclasses.replace(self, source_context=context)

    def with_target_context(self, context: Hashable) -> MorphismDiscoveryRule:
        """Return a copy restricted to the given target context."""
        return dataclasses.replace(self, target_context=context)

    def with_threshold(self, threshold: float) -> MorphismDiscoveryRule:
        """Return a copy with a different similarity threshold."""
        return dataclasses.replace(self, similarity_threshold=threshold)

    def make_bidirectional(self) -> MorphismDiscoveryRule:
        """Return a copy that creates bidirectional morphisms."""
        return dataclasses.replace(self, bidirectional=True)

    def applies_to(self, source: Hashable, target: Hashable) -> bool:
        """Whether the rule's context filters admit this pair of contexts."""
        source_ok = self.source_context is None or self.source_context == source
        target_ok = self.target_context is None or self.target_context == target
        return source_ok and target_ok


class MorphismCollection:
    """A queryable collection of morphisms, kept in insertion order."""

    def __init__(self) -> None:
        self._morphisms: list[CrossContextMorphism] = []

    def add(self, morphism: CrossContextMorphism) -> None:
        """Add a morphism."""
        self._morphisms.append(morphism)

    def find_by_concept(self, concept_id: UUID) -> list[CrossContextMorphism]:
        """Morphisms with the concept at either end."""
        return [m for m in self._morphisms if m.involves_concept(concept_id)]

    def find_between_contexts(
        self, context1: Hashable, context2: Hashable
    ) -> list[CrossContextMorphism]:
        """Morphisms joining the two contexts."""
        return [m for m in self._morphisms if m.connects_contexts(context1, context2)]

    def find_by_type(self, morphism_type: MorphismType) -> list[CrossContextMorphism]:
        """Morphisms of exactly the given type."""
        return [m for m in self._morphisms if m.morphism_type == morphism_type]

    def find_strongest(
        self, source: UUID, target: UUID
    ) -> CrossContextMorphism | None:
        """The strongest morphism from source to target; the latest wins ties."""
        best: CrossContextMorphism | None = None
        for m in self._morphisms:
            forward = m.source[1] == source and m.target[1] == target
            backward = m.bidirectional and m.source[1] == target and m.target[1] == source
            if (forward or backward) and (best is None or m.strength >= best.strength):
                best = m
        return best

    def all(self) -> list[CrossContextMorphism]:
        """Every morphism, in insertion order."""
        return list(self._morphisms)

    def __len__(self) -> int:
        return len(self._morphisms)

    def __iter__(self) -> Iterator[CrossContextMorphism]:
        return iter(self._morphisms)