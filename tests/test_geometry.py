"""Tests for geometry primitives."""

import pytest
from pointquad.geometry import Point, Rectangle


def rect(x0, y0, x1, y1):
    return Rectangle(Point(x0, y0), Point(x1, y1))


class TestPoint:
    """Tests for Point class."""

    def test_value_equality(self):
        """Points compare and hash by coordinates."""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(2.0, 1.0)
        assert len({Point(1.0, 2.0), Point(1.0, 2.0)}) == 1

    def test_immutable(self):
        """Test that points cannot be mutated."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 5.0


class TestRectangle:
    """Tests for Rectangle class."""

    def test_corners(self):
        """Test derived corner accessors."""
        r = rect(0, 1, 4, 5)
        assert r.top_left() == Point(0, 5)
        assert r.bottom_right() == Point(4, 1)

    def test_center(self):
        """Test midpoint calculation."""
        assert rect(0, 0, 4, 2).center() == Point(2, 1)
        assert rect(-3, -1, 1, 5).center() == Point(-1, 2)

    def test_width_height(self):
        """Test width and height properties."""
        r = rect(1, 2, 4, 8)
        assert r.width == 3
        assert r.height == 6

    def test_malformed_not_rejected(self):
        """Test that inverted corners are accepted without validation."""
        r = rect(10, 10, 0, 0)
        assert r.bottom_left == Point(10, 10)

    def test_contains(self):
        """Test closed point containment."""
        r = rect(0, 0, 10, 10)
        assert r.contains(Point(5, 5))
        assert r.contains(Point(0, 0))
        assert r.contains(Point(10, 10))
        assert r.contains(Point(0, 10))
        assert not r.contains(Point(11, 5))
        assert not r.contains(Point(5, 11))
        assert not r.contains(Point(-1, 5))
        assert not r.contains(Point(5, -0.001))

    def test_overlaps(self):
        """Test interior overlap."""
        a = rect(0, 0, 2, 2)
        assert a.overlaps(rect(1, 1, 3, 3))
        assert a.overlaps(rect(0.5, 0.5, 1.5, 1.5))
        assert rect(0.5, 0.5, 1.5, 1.5).overlaps(a)
        assert not a.overlaps(rect(3, 3, 4, 4))

    def test_shared_edge_does_not_overlap(self):
        """Rectangles sharing an edge do not overlap, but both contain the edge."""
        a = rect(0, 0, 1, 1)
        b = rect(1, 0, 2, 1)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

        on_edge = Point(1, 0.5)
        assert a.contains(on_edge)
        assert b.contains(on_edge)

    def test_shared_corner_does_not_overlap(self):
        """Test that rectangles touching at a corner do not overlap."""
        assert not rect(0, 0, 1, 1).overlaps(rect(1, 1, 2, 2))

    def test_degenerate_overlaps(self):
        """A zero-area rectangle overlaps only when strictly inside."""
        assert rect(1, 1, 1, 1).overlaps(rect(0, 0, 2, 2))
        assert rect(1, 0, 1, 2).overlaps(rect(0, 0, 2, 2))
        assert not rect(2, 0, 2, 2).overlaps(rect(0, 0, 2, 2))

    def test_bounding(self):
        """Test tight bounding rectangle."""
        points = [Point(1, 5), Point(-2, 3), Point(4, -1)]
        assert Rectangle.bounding(points) == rect(-2, -1, 4, 5)

    def test_bounding_single_point(self):
        """Test bounding of a single point is degenerate."""
        assert Rectangle.bounding([Point(3, 4)]) == rect(3, 4, 3, 4)

    def test_bounding_empty(self):
        """Test that bounding nothing raises error."""
        with pytest.raises(ValueError):
            Rectangle.bounding([])

    def test_subdivide(self):
        """Test quadrant order and extents."""
        nw, ne, sw, se = rect(0, 0, 4, 4).subdivide()
        assert nw == rect(0, 2, 2, 4)
        assert ne == rect(2, 2, 4, 4)
        assert sw == rect(0, 0, 2, 2)
        assert se == rect(2, 0, 4, 2)

    def test_subdivide_quadrants_do_not_overlap(self):
        """Test that quadrants only share edges."""
        quadrants = rect(-1, -3, 5, 7).subdivide()
        for i, a in enumerate(quadrants):
            for b in quadrants[i + 1:]:
                assert not a.overlaps(b)
