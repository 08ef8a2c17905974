"""
Synthetic point generation.

Points are accumulated in a buffer by one or more add_* calls and then
handed out with take_points(). Output is deterministic for a given seed
and sequence of calls.
"""

import random
from typing import List, Tuple

from .geometry import Point, Rectangle


class RandomPointGenerator:
    """Seeded generator of normally or uniformly distributed points."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)
        self._points: List[Point] = []

    def __len__(self) -> int:
        return len(self._points)

    def add_normal_points(
        self,
        count: int,
        mean: Tuple[float, float] = (0.0, 0.0),
        stddev: float = 1.0,
    ) -> None:
        """
        Add points with independent normally distributed coordinates.

        Args:
            count: Number of points to add
            mean: (x, y) of the distribution center
            stddev: Standard deviation along both axes
        """
        if count < 0:
            raise ValueError("count must be non-negative")
        mx, my = mean
        gauss = self._rng.gauss
        for _ in range(int(count)):
            x = gauss(mx, stddev)
            y = gauss(my, stddev)
            self._points.append(Point(x, y))

    def add_uniform_points(self, count: int, boundary: Rectangle) -> None:
        """
        Add points distributed uniformly over a rectangle.

        Args:
            count: Number of points to add
            boundary: Region to sample from
        """
        if count < 0:
            raise ValueError("count must be non-negative")
        bl, tr = boundary.bottom_left, boundary.top_right
        uniform = self._rng.uniform
        for _ in range(int(count)):
            self._points.append(Point(uniform(bl.x, tr.x), uniform(bl.y, tr.y)))

    def take_points(self) -> List[Point]:
        """Return the accumulated points and empty the buffer."""
        points, self._points = self._points, []
        return points
