"""Exceptions raised by conceptual space operations."""

from __future__ import annotations


class ConceptualError(Exception):
    """Base class for every error raised by conceptual space operations."""

    prefix = "Conceptual error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidDimensionError(ConceptualError):
    """A dimension, or a set of dimension weights, is configured wrongly."""

    prefix = "Invalid dimension"


class InvalidPointError(ConceptualError):
    """A point lies outside the valid space or does not fit it."""

    prefix = "Point outside valid space"


class InvalidMorphismError(ConceptualError):
    """A morphism breaks one of its constraints."""

    prefix = "Morphism constraint violation"


class ProjectionError(ConceptualError):
    """An event could not be projected into the space."""

    prefix = "Projection error"