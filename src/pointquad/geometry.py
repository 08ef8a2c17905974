"""
Geometry primitives for the point quadtree.

This module defines the planar point and axis-aligned rectangle value
types used for spatial indexing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Point:
    """A point in the plane."""
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """
    An axis-aligned rectangle given by its bottom-left and top-right corners.

    The corners are expected to satisfy bottom_left <= top_right
    componentwise. This is not checked; rectangles that violate it give
    undefined results from every operation below.
    """
    bottom_left: Point
    top_right: Point

    @classmethod
    def bounding(cls, points: Iterable[Point]) -> Rectangle:
        """
        Compute the tight bounding rectangle of a set of points.

        Args:
            points: Non-empty iterable of points

        Returns:
            Smallest Rectangle containing every point

        Raises:
            ValueError: If points is empty
        """
        it = iter(points)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("Cannot bound an empty point set") from None

        min_x = max_x = first.x
        min_y = max_y = first.y
        for p in it:
            if p.x < min_x:
                min_x = p.x
            if p.y < min_y:
                min_y = p.y
            if p.x > max_x:
                max_x = p.x
            if p.y > max_y:
                max_y = p.y

        return cls(Point(min_x, min_y), Point(max_x, max_y))

    @property
    def width(self) -> float:
        return self.top_right.x - self.bottom_left.x

    @property
    def height(self) -> float:
        return self.top_right.y - self.bottom_left.y

    def top_left(self) -> Point:
        return Point(self.bottom_left.x, self.top_right.y)

    def bottom_right(self) -> Point:
        return Point(self.top_right.x, self.bottom_left.y)

    def center(self) -> Point:
        """Midpoint of the two corners."""
        return Point(
            (self.bottom_left.x + self.top_right.x) / 2,
            (self.bottom_left.y + self.top_right.y) / 2,
        )

    def contains(self, p: Point) -> bool:
        """Check if point p lies within this rectangle, edges included."""
        return (
            self.bottom_left.x <= p.x <= self.top_right.x
            and self.bottom_left.y <= p.y <= self.top_right.y
        )

    def overlaps(self, r: Rectangle) -> bool:
        """
        Check if the interiors of this rectangle and r intersect.

        Rectangles that only share an edge or a corner do not overlap.
        """
        return (
            self.bottom_left.x < r.top_right.x
            and self.top_right.x > r.bottom_left.x
            and self.bottom_left.y < r.top_right.y
            and self.top_right.y > r.bottom_left.y
        )

    def subdivide(self) -> Tuple[Rectangle, Rectangle, Rectangle, Rectangle]:
        """
        Subdivide rectangle into 4 quadrants around its center.

        Child order (fixed for consistency): NW, NE, SW, SE. Neighbouring
        quadrants share their common edge.

        Returns:
            Tuple of (nw, ne, sw, se) rectangles.
        """
        left, bottom = self.bottom_left.x, self.bottom_left.y
        right, top = self.top_right.x, self.top_right.y
        c = self.center()

        nw = Rectangle(Point(left, c.y), Point(c.x, top))
        ne = Rectangle(c, self.top_right)
        sw = Rectangle(self.bottom_left, c)
        se = Rectangle(Point(c.x, bottom), Point(right, c.y))
        return nw, ne, sw, se
