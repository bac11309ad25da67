"""Spatial indexes for nearest-neighbour and range queries over points."""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from uuid import UUID

from .errors import ConceptualError, InvalidDimensionError
from .point import ConceptualPoint
from .similarity import Metric, _measure


def _coord(point: ConceptualPoint, dimension: int) -> float:
    """Coordinate along a dimension, 0.0 where the point has none."""
    if dimension < len(point.coordinates):
        return point.coordinates[dimension]
    return 0.0


class SpatialIndex(ABC):
    """An index of points supporting neighbour and range queries."""

    @abstractmethod
    def insert(self, point: ConceptualPoint) -> None:
        """Add a point to the index."""

    @abstractmethod
    def remove(self, point_id: UUID) -> bool:
        """Remove a point; return whether one was removed."""

    @abstractmethod
    def k_nearest_neighbors(
        self, query: ConceptualPoint, k: int
    ) -> list[tuple[UUID, float]]:
        """Up to k indexed points near the query, with their distances."""

    @abstractmethod
    def range_search(self, center: ConceptualPoint, radius: float) -> list[UUID]:
        """Ids of indexed points within the radius of the center."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of points in the index."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every point."""


class RTreeIndex(SpatialIndex):
    """A flat index that scans every point on each query."""

    def __init__(self, metric: Metric) -> None:
        self.metric = metric
        self._points: list[ConceptualPoint] = []

    def insert(self, point: ConceptualPoint) -> None:
        self._points.append(point)

    def remove(self, point_id: UUID) -> bool:
        for position, point in enumerate(self._points):
            if point.id == point_id:
                del self._points[position]
                return True
        return False

    def k_nearest_neighbors(
        self, query: ConceptualPoint, k: int
    ) -> list[tuple[UUID, float]]:
        """The k nearest points with ids, nearest first.

        Points whose distance cannot be computed are left out.
        """
        distances: list[tuple[UUID, float]] = []
        for point in self._points:
            if point.id is None:
                continue
            try:
                distances.append((point.id, _measure(self.metric, query, point)))
            except ConceptualError:
                continue
        distances.sort(key=lambda entry: entry[1])
        return distances[:k]

    def range_search(self, center: ConceptualPoint, radius: float) -> list[UUID]:
        """Ids of points at distance at most radius, in insertion order."""
        return [
            point.id
            for point in self._points
            if point.id is not None and _measure(self.metric, center, point) <= radius
        ]

    def __len__(self) -> int:
        return len(self._points)

    def clear(self) -> None:
        self._points.clear()


@dataclass
class _KdNode:
    point: ConceptualPoint
    split_dim: int
    left: _KdNode | None = None
    right: _KdNode | None = None


class KdTreeIndex(SpatialIndex):
    """A k-d tree splitting on each dimension in turn."""

    def __init__(self, dimensions: int, metric: Metric) -> None:
        if dimensions < 1:
            raise InvalidDimensionError("A k-d tree needs at least one dimension")
        self.dimensions = dimensions
        self.metric = metric
        self._root: _KdNode | None = None
        self._count = 0

    def build_from_points(self, points: Iterable[ConceptualPoint]) -> None:
        """Replace the tree with a balanced one built from the points."""
        points = list(points)
        self._count = len(points)
        self._root = self._build(points, 0)

    def _build(self, points: list[ConceptualPoint], depth: int) -> _KdNode | None:
        if not points:
            return None
        split = depth % self.dimensions
        ordered = sorted(points, key=lambda p: _coord(p, split))
        median = len(ordered) // 2
        return _KdNode(
            ordered[median],
            split,
            self._build(ordered[:median], depth + 1),
            self._build(ordered[median + 1 :], depth + 1),
        )

    def insert(self, point: ConceptualPoint) -> None:
        self._count += 1
        if self._root is None:
            self._root = _KdNode(point, 0)
            return
        node = self._root
        depth = 0
        while True:
            split = depth % self.dimensions
            child_split = (depth + 1) % self.dimensions
            if _coord(point, split) < _coord(node.point, split):
                if node.left is None:
                    node.left = _KdNode(point, child_split)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _KdNode(point, child_split)
                    return
                node = node.right
            depth += 1

    def remove(self, point_id: UUID) -> bool:
        """Removal is not supported by the tree; always returns False."""
        return False

    def k_nearest_neighbors(
        self, query: ConceptualPoint, k: int
    ) -> list[tuple[UUID, float]]:
        """Up to k points found by the tree search, farthest first.

        The search keeps its candidates keyed on the nearest one found so far,
        so for k of 1 the result is the nearest point, and for k at least the
        number of points it is every point.
        """
        best: list[tuple[float, int, UUID]] = []
        if self._root is not None:
            self._search_knn(self._root, query, k, best, itertools.count(), 0)
        ordered = [heapq.heappop(best) for _ in range(len(best))]
        ordered.reverse()
        return [(point_id, distance) for distance, _, point_id in ordered]

    def _search_knn(
        self,
        node: _KdNode,
        query: ConceptualPoint,
        k: int,
        best: list[tuple[float, int, UUID]],
        sequence: Iterator[int],
        depth: int,
    ) -> None:
        if node.point.id is not None:
            distance = _measure(self.metric, query, node.point)
            entry = (distance, next(sequence), node.point.id)
            if len(best) < k:
                heapq.heappush(best, entry)
            elif best and distance < best[0][0]:
                heapq.heapreplace(best, entry)

        split = depth % self.dimensions
        query_val = _coord(query, split)
        node_val = _coord(node.point, split)
        if query_val < node_val:
            near, far = node.left, node.right
        else:
            near, far = node.right, node.left

        if near is not None:
            self._search_knn(near, query, k, best, sequence, depth + 1)

        gap = abs(query_val - node_val)
        if len(best) < k or not best or gap < best[0][0]:
            if far is not None:
                self._search_knn(far, query, k, best, sequence, depth + 1)

    def range_search(self, center: ConceptualPoint, radius: float) -> list[UUID]:
        """Ids of points at distance at most radius, in tree pre-order."""
        if self._root is None:
            return []
        return list(self._search_range(self._root, center, radius, 0))

    def _search_range(
        self, node: _KdNode, center: ConceptualPoint, radius: float, depth: int
    ) -> Iterator[UUID]:
        if node.point.id is not None:
            if _measure(self.metric, center, node.point) <= radius:
                yield node.point.id

        split = depth % self.dimensions
        center_val = _coord(center, split)
        node_val = _coord(node.point, split)

        if abs(center_val - node_val) <= radius:
            children = (node.left, node.right)
        elif center_val < node_val:
            children = (node.left,)
        else:
            children = (node.right,)

        for child in children:
            if child is not None:
                yield from self._search_range(child, center, radius, depth + 1)

    def __len__(self) -> int:
        return self._count

    def clear(self) -> None:
        self._root = None
        self._count = 0