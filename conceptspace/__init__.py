"""Conceptual spaces: points, quality dimensions, convex regions, metrics, similarity and spatial indexes."""

__version__ = "0.3.0"