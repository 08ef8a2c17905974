"""
pointquad: Region quadtree for planar point sets.

This package provides a point quadtree that answers axis-aligned
rectangular range queries, along with helpers for generating and
loading points and for plotting the resulting subdivision.
"""

__version__ = "0.1.0"

from .geometry import Point, Rectangle
from .quadtree import QuadTree, DEFAULT_CAPACITY
from .builder import QuadTreeBuilder, BuilderConfig, BuildStats, build_quadtree
from .points import RandomPointGenerator
from .reader import read_csv_points
from .mpl_writer import MplWriter
from .timer import Timer

__all__ = [
    "Point",
    "Rectangle",
    "QuadTree",
    "DEFAULT_CAPACITY",
    "QuadTreeBuilder",
    "BuilderConfig",
    "BuildStats",
    "build_quadtree",
    "RandomPointGenerator",
    "read_csv_points",
    "MplWriter",
    "Timer",
]
