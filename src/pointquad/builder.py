"""
Quadtree builder with configuration and build statistics.

This module wraps QuadTree construction so drivers can configure the
tree in one place and find out afterwards how many points were dropped
for falling outside the boundary.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .geometry import Point, Rectangle
from .quadtree import QuadTree, DEFAULT_CAPACITY, DEFAULT_MAX_DEPTH


@dataclass
class BuilderConfig:
    """Configuration for the quadtree builder."""

    capacity: int = DEFAULT_CAPACITY
    """Maximum points held by a leaf before it splits."""

    max_depth: int = DEFAULT_MAX_DEPTH
    """Maximum tree depth (safety limit for duplicate points)."""

    boundary: Optional[Rectangle] = None
    """Fixed root boundary. None means the bounding box of the input."""

    def __post_init__(self):
        if self.capacity < 1:
            raise ValueError("capacity must be at least 1")
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative")


@dataclass
class BuildStats:
    """Statistics collected during tree building."""

    points_seen: int = 0
    points_inserted: int = 0
    points_rejected: int = 0
    nodes: int = 0
    leaves: int = 0
    internal_nodes: int = 0
    depth: int = 0


class QuadTreeBuilder:
    """
    Builder for point quadtrees.

    Without a configured boundary the root covers the bounding box of the
    input, so no point is ever rejected. With one, points outside it are
    counted in stats.points_rejected.
    """

    def __init__(self, config: BuilderConfig):
        self.config = config
        self.stats = BuildStats()

    def build(self, points: Iterable[Point]) -> QuadTree:
        """
        Build a quadtree over the given points.

        Args:
            points: Points to insert, in order

        Returns:
            The root QuadTree
        """
        self.stats = BuildStats()  # Reset stats
        points = list(points)
        config = self.config

        boundary = config.boundary
        if boundary is None and points:
            boundary = Rectangle.bounding(points)

        # Count what the tree accepts; a NaN coordinate poisons the
        # bounding box and makes every insert fail.
        tree = QuadTree(boundary, config.capacity, config.max_depth)
        inserted = sum(1 for p in points if tree.insert(p))

        self.stats.points_seen = len(points)
        self.stats.points_inserted = inserted
        self.stats.points_rejected = len(points) - inserted
        self._collect_shape(tree)
        return tree

    def _collect_shape(self, tree: QuadTree) -> None:
        leaves = tree.leaf_count()
        nodes = tree.node_count()
        self.stats.nodes = nodes
        self.stats.leaves = leaves
        self.stats.internal_nodes = nodes - leaves
        self.stats.depth = tree.max_depth()


def build_quadtree(
    points: Iterable[Point],
    capacity: int = DEFAULT_CAPACITY,
    max_depth: int = DEFAULT_MAX_DEPTH,
    boundary: Optional[Rectangle] = None,
) -> tuple[QuadTree, BuildStats]:
    """
    Convenience function to build a quadtree.

    Args:
        points: Points to index
        capacity: Maximum points per leaf
        max_depth: Maximum tree depth
        boundary: Optional fixed root boundary

    Returns:
        Tuple of (QuadTree, BuildStats)
    """
    config = BuilderConfig(capacity=capacity, max_depth=max_depth, boundary=boundary)
    builder = QuadTreeBuilder(config)
    tree = builder.build(points)
    return tree, builder.stats
