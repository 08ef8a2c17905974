"""
Command-line interface for pointquad.

Provides commands for building quadtrees from random or file-based
points, querying them and writing matplotlib visualization scripts.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .builder import build_quadtree, BuildStats
from .geometry import Point, Rectangle
from .mpl_writer import MplWriter
from .points import RandomPointGenerator
from .quadtree import DEFAULT_MAX_DEPTH
from .reader import read_csv_points
from .timer import Timer


DEFAULT_QUERY = (1.0, 1.0, 1.05, 1.05)


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        type=Path,
        help="Delimited text file with x and y columns",
    )
    parser.add_argument(
        "--x-column",
        type=str,
        default=None,
        help="Name of the x column (default: first column)",
    )
    parser.add_argument(
        "--y-column",
        type=str,
        default=None,
        help="Name of the y column (default: second column)",
    )


def _add_tree_arguments(parser: argparse.ArgumentParser, capacity: int) -> None:
    parser.add_argument(
        "-c", "--capacity",
        type=int,
        default=capacity,
        help=f"Maximum points per leaf (default: {capacity})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum tree depth (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("X0", "Y0", "X1", "Y1"),
        default=None,
        help="Fixed root boundary (default: bounding box of the points)",
    )


def _rectangle(values) -> Rectangle:
    x0, y0, x1, y1 = values
    return Rectangle(Point(x0, y0), Point(x1, y1))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pointquad",
        description="Build and query point quadtrees",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Random command
    random_parser = subparsers.add_parser(
        "random",
        help="Benchmark a tree over normally distributed random points",
    )
    random_parser.add_argument(
        "-n", "--count",
        type=int,
        default=100000,
        help="Number of points to generate (default: 100000)",
    )
    random_parser.add_argument(
        "--seed",
        type=int,
        default=2565,
        help="Random seed (default: 2565)",
    )
    _add_tree_arguments(random_parser, capacity=2048)
    random_parser.add_argument(
        "-q", "--query",
        type=float,
        nargs=4,
        metavar=("X0", "Y0", "X1", "Y1"),
        default=list(DEFAULT_QUERY),
        help="Query range (default: 1 1 1.05 1.05)",
    )
    random_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("example_query.py"),
        help="Output script path (default: example_query.py)",
    )

    # CSV command
    csv_parser = subparsers.add_parser(
        "csv",
        help="Plot the leaves of a tree built from a point file",
    )
    _add_input_arguments(csv_parser)
    _add_tree_arguments(csv_parser, capacity=64)
    csv_parser.add_argument(
        "--min-points",
        type=int,
        default=20,
        help="Only draw points of leaves holding at least this many (default: 20)",
    )
    csv_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("example.py"),
        help="Output script path (default: example.py)",
    )

    # Query command
    query_parser = subparsers.add_parser(
        "query",
        help="Print the points of a file that fall in a range",
    )
    _add_input_arguments(query_parser)
    _add_tree_arguments(query_parser, capacity=10)
    query_parser.add_argument(
        "range",
        type=float,
        nargs=4,
        metavar=("X0", "Y0", "X1", "Y1"),
        help="Query range",
    )

    # Stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show tree statistics for a point file",
    )
    _add_input_arguments(stats_parser)
    _add_tree_arguments(stats_parser, capacity=10)

    return parser


def print_stats(stats: BuildStats) -> None:
    print("Build statistics:")
    print(f"  Points read: {stats.points_seen}")
    print(f"  Points inserted: {stats.points_inserted}")
    print(f"  Points rejected: {stats.points_rejected}")
    print(f"  Nodes: {stats.nodes}")
    print(f"  Leaf nodes: {stats.leaves}")
    print(f"  Internal nodes: {stats.internal_nodes}")
    print(f"  Depth: {stats.depth}")


def _load(args: argparse.Namespace) -> Optional[List[Point]]:
    try:
        return read_csv_points(args.input, args.x_column, args.y_column)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return None


def _build(points: List[Point], args: argparse.Namespace):
    boundary = _rectangle(args.bounds) if args.bounds else None
    return build_quadtree(
        points,
        capacity=args.capacity,
        max_depth=args.max_depth,
        boundary=boundary,
    )


def cmd_random(args: argparse.Namespace) -> int:
    """Handle the random command."""
    generator = RandomPointGenerator(args.seed)
    generator.add_normal_points(args.count)
    points = generator.take_points()
    print(f"Generated {len(points)} points with seed {args.seed}")

    timer = Timer()
    query_range = _rectangle(args.query)

    timer.start("Building quadtree")
    tree, stats = _build(points, args)
    timer.stop()

    with MplWriter(args.output) as mpl:
        timer.start("Traversing full quadtree")
        tree.traverse(lambda pts, boundary: mpl.write_rectangle(boundary))
        timer.stop()

        mpl.write_rectangle(query_range)
        timer.start("Querying quadtree")
        tree.traverse_query(query_range, mpl.write_leaf)
        timer.stop()

    found = tree.query(query_range)
    print(f"Found {len(found)} points in query range")
    print_stats(stats)
    print(f"Wrote plot script to {args.output}")
    return 0


def cmd_csv(args: argparse.Namespace) -> int:
    """Handle the csv command."""
    print(f"Loading points from: {args.input}")
    points = _load(args)
    if points is None:
        return 1
    print(f"Loaded {len(points)} points")

    tree, stats = _build(points, args)

    with MplWriter(args.output) as mpl:
        def draw(pts: List[Point], boundary: Rectangle) -> None:
            mpl.write_rectangle(boundary)
            if len(pts) < args.min_points:
                return
            mpl.write_points(pts)

        tree.traverse(draw)

    print_stats(stats)
    print(f"Wrote plot script to {args.output}")
    return 0


def cmd_query(args: argparse.Namespace) -> int:
    """Handle the query command."""
    points = _load(args)
    if points is None:
        return 1

    tree, _ = _build(points, args)
    for p in tree.query(_rectangle(args.range)):
        print(f"{p.x},{p.y}")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle the stats command."""
    points = _load(args)
    if points is None:
        return 1

    _, stats = _build(points, args)
    print_stats(stats)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "random":
            return cmd_random(args)
        elif args.command == "csv":
            return cmd_csv(args)
        elif args.command == "query":
            return cmd_query(args)
        elif args.command == "stats":
            return cmd_stats(args)
    except ValueError as e:
        # Invalid capacity / max depth / count
        print(f"Error: {e}")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
