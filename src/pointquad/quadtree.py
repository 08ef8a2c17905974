"""
Region quadtree over planar points.

A node is either a leaf holding up to ``capacity`` points, or an internal
node with exactly four children covering the NW, NE, SW and SE quadrants
of its boundary. Leaves split when they overflow; nodes never merge back.
"""

from __future__ import annotations
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .geometry import Point, Rectangle


DEFAULT_CAPACITY = 10
DEFAULT_MAX_DEPTH = 64

Visitor = Callable[[List[Point], Rectangle], None]
"""Callback receiving a leaf's (points, boundary)."""


class QuadTree:
    """
    A point quadtree node and, at the root, the tree it owns.

    Children are ordered: NW, NE, SW, SE. Either all four are present
    (internal node) or none are (leaf).
    """

    DEFAULT_CAPACITY = DEFAULT_CAPACITY

    def __init__(
        self,
        boundary: Optional[Rectangle],
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        _depth: int = 0,
    ):
        """
        Create an empty leaf covering a fixed boundary.

        Args:
            boundary: Region this node is responsible for. None gives an
                empty tree that rejects every insertion.
            capacity: Maximum points a leaf holds before splitting
            max_depth: Depth at which leaves stop splitting
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative")

        self.boundary = boundary
        self.capacity = capacity
        self.max_depth_limit = max_depth
        self.depth = _depth
        self.points: List[Point] = []

        self.north_west: Optional[QuadTree] = None
        self.north_east: Optional[QuadTree] = None
        self.south_west: Optional[QuadTree] = None
        self.south_east: Optional[QuadTree] = None

    @classmethod
    def from_points(
        cls,
        points: Iterable[Point],
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> QuadTree:
        """
        Build a tree whose boundary is the bounding box of the given points.

        Points are inserted in input order. An empty input gives an empty
        tree without a boundary.

        Args:
            points: Points to index
            capacity: Maximum points per leaf
            max_depth: Depth at which leaves stop splitting

        Returns:
            The root QuadTree
        """
        points = list(points)
        if not points:
            return cls(None, capacity, max_depth)

        tree = cls(Rectangle.bounding(points), capacity, max_depth)
        for p in points:
            tree.insert(p)
        return tree

    def __copy__(self):
        raise TypeError("QuadTree cannot be copied; pass it by reference")

    def __deepcopy__(self, memo):
        raise TypeError("QuadTree cannot be copied; pass it by reference")

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf() else "internal"
        return f"QuadTree({kind}, boundary={self.boundary}, capacity={self.capacity})"

    def is_leaf(self) -> bool:
        """Return True if this node holds points directly."""
        return self.north_west is None

    def children(self) -> Tuple[QuadTree, ...]:
        """Return the (NW, NE, SW, SE) children, or () for a leaf."""
        if self.is_leaf():
            return ()
        return (self.north_west, self.north_east, self.south_west, self.south_east)

    # ---- Insertion ----

    def insert(self, point: Point) -> bool:
        """
        Insert a point into this subtree.

        Args:
            point: Point to store

        Returns:
            True if the point was stored, False if it lies outside this
            node's boundary.
        """
        if self.boundary is None or not self.boundary.contains(point):
            return False

        if self.is_leaf():
            self.points.append(point)
            if len(self.points) > self.capacity and self.depth < self.max_depth_limit:
                self._split()
            return True

        return (
            self.north_west.insert(point)
            or self.north_east.insert(point)
            or self.south_west.insert(point)
            or self.south_east.insert(point)
        )

    def _split(self) -> None:
        """Turn this leaf into an internal node and push its points down."""
        nw, ne, sw, se = self.boundary.subdivide()
        child_args = (self.capacity, self.max_depth_limit, self.depth + 1)

        self.north_west = QuadTree(nw, *child_args)
        self.north_east = QuadTree(ne, *child_args)
        self.south_west = QuadTree(sw, *child_args)
        self.south_east = QuadTree(se, *child_args)

        points, self.points = self.points, []
        for p in points:
            self.insert(p)

    # ---- Traversal ----

    def leaves(self) -> Iterator[Tuple[List[Point], Rectangle]]:
        """
        Iterate over (points, boundary) for every leaf, depth first.

        Children are visited NW, NE, SW, SE. A tree without a boundary
        yields nothing.
        """
        if self.boundary is None:
            return
        if self.is_leaf():
            yield self.points, self.boundary
            return
        for child in self.children():
            yield from child.leaves()

    def query_leaves(self, query_range: Rectangle) -> Iterator[Tuple[List[Point], Rectangle]]:
        """
        Iterate over leaves whose boundary overlaps a query range.

        Subtrees whose boundary does not overlap the range are skipped
        entirely. Each yielded pair holds the leaf's points that lie in
        the range (possibly none) and the leaf's own boundary.

        Overlap uses strict comparisons, so leaves that only touch the
        range along an edge or corner are skipped, even if a stored point
        sits on that shared edge.
        """
        if self.boundary is None or not self.boundary.overlaps(query_range):
            return
        if self.is_leaf():
            yield [p for p in self.points if query_range.contains(p)], self.boundary
            return
        for child in self.children():
            yield from child.query_leaves(query_range)

    def traverse(self, visit: Visitor) -> None:
        """Call visit(points, boundary) once per leaf."""
        for points, boundary in self.leaves():
            visit(points, boundary)

    def traverse_query(self, query_range: Rectangle, visit: Visitor) -> None:
        """Call visit(points_in_range, boundary) once per overlapping leaf."""
        for points, boundary in self.query_leaves(query_range):
            visit(points, boundary)

    def query(self, query_range: Rectangle) -> List[Point]:
        """
        Collect all stored points contained in query_range.

        Args:
            query_range: Query rectangle, edges included

        Returns:
            Matching points in leaf visit order
        """
        found: List[Point] = []
        for points, _ in self.query_leaves(query_range):
            found.extend(points)
        return found

    # ---- Statistics ----
    #
    # A tree without a boundary has no leaves to visit and counts as
    # zero nodes, matching leaves().

    def __len__(self) -> int:
        return self.point_count()

    def point_count(self) -> int:
        """Return total number of points stored in this subtree."""
        if self.is_leaf():
            return len(self.points)
        return sum(child.point_count() for child in self.children())

    def node_count(self) -> int:
        """Return total number of nodes in this subtree."""
        if self.boundary is None:
            return 0
        return 1 + sum(child.node_count() for child in self.children())

    def leaf_count(self) -> int:
        """Return number of leaf nodes in this subtree."""
        if self.boundary is None:
            return 0
        if self.is_leaf():
            return 1
        return sum(child.leaf_count() for child in self.children())

    def max_depth(self) -> int:
        """Return maximum depth of this subtree."""
        if self.is_leaf():
            return 0
        return 1 + max(child.max_depth() for child in self.children())
