"""Tests for quadtree builder."""

import pytest
from pointquad.builder import (
    QuadTreeBuilder,
    BuilderConfig,
    BuildStats,
    build_quadtree,
)
from pointquad.geometry import Point, Rectangle
from pointquad.points import RandomPointGenerator


def rect(x0, y0, x1, y1):
    return Rectangle(Point(x0, y0), Point(x1, y1))


class TestBuilderConfig:
    """Tests for BuilderConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        config = BuilderConfig()
        assert config.capacity == 10
        assert config.max_depth == 64
        assert config.boundary is None

    def test_custom_config(self):
        """Test custom configuration values."""
        config = BuilderConfig(capacity=64, max_depth=12, boundary=rect(0, 0, 1, 1))
        assert config.capacity == 64
        assert config.max_depth == 12
        assert config.boundary == rect(0, 0, 1, 1)

    def test_invalid_capacity(self):
        """Test that capacity < 1 raises error."""
        with pytest.raises(ValueError):
            BuilderConfig(capacity=0)

    def test_invalid_max_depth(self):
        """Test that negative max_depth raises error."""
        with pytest.raises(ValueError):
            BuilderConfig(max_depth=-1)


class TestQuadTreeBuilder:
    """Tests for QuadTreeBuilder."""

    def test_bounding_box_keeps_everything(self):
        """Test that the default boundary rejects nothing."""
        gen = RandomPointGenerator(2565)
        gen.add_normal_points(1000)
        points = gen.take_points()

        builder = QuadTreeBuilder(BuilderConfig(capacity=16))
        tree = builder.build(points)

        assert builder.stats.points_seen == 1000
        assert builder.stats.points_inserted == 1000
        assert builder.stats.points_rejected == 0
        assert tree.point_count() == 1000

    def test_fixed_boundary_counts_rejections(self):
        """Test that points outside a fixed boundary are counted."""
        points = [Point(1, 1), Point(5, 5), Point(-1, 3), Point(11, 0)]
        builder = QuadTreeBuilder(BuilderConfig(boundary=rect(0, 0, 10, 10)))
        tree = builder.build(points)

        assert tree.boundary == rect(0, 0, 10, 10)
        assert builder.stats.points_inserted == 2
        assert builder.stats.points_rejected == 2
        assert tree.point_count() == 2

    def test_shape_stats(self):
        """Test that node counts are collected."""
        points = [Point(1, 3), Point(3, 3), Point(1, 1), Point(3, 1)]
        builder = QuadTreeBuilder(BuilderConfig(capacity=1))
        tree = builder.build(points)

        assert builder.stats.nodes == tree.node_count() == 5
        assert builder.stats.leaves == 4
        assert builder.stats.internal_nodes == 1
        assert builder.stats.depth == 1

    def test_stats_reset_between_builds(self):
        """Test that each build starts with fresh stats."""
        builder = QuadTreeBuilder(BuilderConfig(boundary=rect(0, 0, 1, 1)))
        builder.build([Point(5, 5)])
        assert builder.stats.points_rejected == 1

        builder.build([Point(0.5, 0.5)])
        assert builder.stats.points_rejected == 0
        assert builder.stats.points_inserted == 1

    def test_empty_input(self):
        """Test building from no points."""
        builder = QuadTreeBuilder(BuilderConfig())
        tree = builder.build([])

        assert tree.boundary is None
        assert builder.stats == BuildStats()

    def test_counts_points_the_tree_refuses(self):
        """Test that inserted counts come from the tree, not the input size."""
        points = [Point(float("nan"), 1.0), Point(2.0, 3.0), Point(4.0, 5.0)]
        builder = QuadTreeBuilder(BuilderConfig())
        tree = builder.build(points)

        assert builder.stats.points_seen == 3
        assert builder.stats.points_inserted == len(tree) == 0
        assert builder.stats.points_rejected == 3

    def test_bounding_box_path_matches_from_points(self):
        """Test that the default boundary is the input bounding box."""
        points = [Point(1, 5), Point(-2, 3), Point(4, -1)]
        tree = QuadTreeBuilder(BuilderConfig()).build(points)
        assert tree.boundary == rect(-2, -1, 4, 5)
        assert len(tree) == 3


class TestBuildQuadtree:
    """Tests for the convenience function."""

    def test_returns_tree_and_stats(self):
        """Test build_quadtree wiring."""
        points = [Point(i, i) for i in range(50)]
        tree, stats = build_quadtree(points, capacity=5)

        assert tree.capacity == 5
        assert stats.points_inserted == 50
        assert tree.query(rect(0, 0, 49, 49)) != []

    def test_invalid_arguments(self):
        """Test that invalid settings are rejected before building."""
        with pytest.raises(ValueError):
            build_quadtree([Point(0, 0)], capacity=0)
