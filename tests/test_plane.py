"""
Unit tests for planes.
"""

import numpy as np
import pytest

from planarpoly.core.errors import DimensionalityMismatchError, UnsupportedOperandError
from planarpoly.core.plane import Plane
from planarpoly.core.vectors import is_parallel
from planarpoly.primitives.line import Line, Segment


class TestConstruction:
    """Tests for building planes."""

    def test_normal_is_normalized(self):
        plane = Plane([0, 0, 0], [0, 0, 5])
        np.testing.assert_allclose(plane.normal, [0, 0, 1])

    def test_zero_normal(self):
        with pytest.raises(DimensionalityMismatchError):
            Plane([0, 0, 0], [0, 0, 0])

    def test_from_points_follows_winding(self):
        """Counter-clockwise points seen from +z give an upward normal."""
        plane = Plane.from_points([0, 0, 0], [1, 0, 0], [0, 1, 0])
        np.testing.assert_allclose(plane.normal, [0, 0, 1])

    def test_from_collinear_points(self):
        with pytest.raises(DimensionalityMismatchError):
            Plane.from_points([0, 0, 0], [1, 1, 1], [2, 2, 2])


class TestPointQueries:
    """Tests for point distance, projection and reflection."""

    def test_distance_and_containment(self):
        assert Plane.XY.distance_from([4, -2, 3]) == pytest.approx(3.0)
        assert Plane.XY.contains([4, -2, 0])
        assert not Plane.XY.contains([4, -2, 0.1])

    def test_point_closest_to(self):
        np.testing.assert_allclose(Plane.XY.point_closest_to([1, 2, 3]), [1, 2, 0])

    def test_reflect_point(self):
        np.testing.assert_allclose(Plane.XY.reflect_point([1, 2, 3]), [1, 2, -3])


class TestIntersections:
    """Tests for plane intersections."""

    def test_line_through_plane(self):
        line = Line([1, 1, 5], [0, 0, 1])
        np.testing.assert_allclose(Plane.XY.intersection_with(line), [1, 1, 0])
        assert Plane.XY.intersects(line)

    def test_parallel_line(self):
        """A line parallel to the plane has no intersection point."""
        line = Line([0, 0, 1], [1, 0, 0])
        assert Plane.XY.is_parallel_to(line)
        assert Plane.XY.intersection_with(line) is None
        assert Plane.XY.distance_from(line) == pytest.approx(1.0)

    def test_line_in_plane(self):
        assert Plane.XY.contains(Line.X)
        assert not Plane.XY.contains(Line.Z)

    def test_plane_plane(self):
        """The xy and yz planes meet along the y axis."""
        line = Plane.XY.intersection_with(Plane.YZ)
        assert is_parallel(np.abs(line.direction), [0, 1, 0])
        assert line.contains([0, 7, 0])

    def test_oblique_planes(self):
        """Intersection line lies in both planes."""
        p1 = Plane([0, 0, 1], [0, 0, 1])
        p2 = Plane([2, 0, 0], [1, 0, 1])
        line = p1.intersection_with(p2)
        assert p1.contains(line)
        assert p2.contains(line)

    def test_parallel_planes(self):
        other = Plane([0, 0, 2], [0, 0, -1])
        assert Plane.XY.is_parallel_to(other)
        assert Plane.XY.intersection_with(other) is None
        assert Plane.XY.distance_from(other) == pytest.approx(2.0)

    def test_segment(self):
        crossing = Segment([0, 0, -1], [0, 0, 1])
        above = Segment([0, 0, 1], [0, 0, 2])
        np.testing.assert_allclose(Plane.XY.intersection_with(crossing), [0, 0, 0], atol=1e-12)
        assert Plane.XY.intersection_with(above) is None
        assert Plane.XY.distance_from(above) == pytest.approx(1.0)


class TestTransforms:
    """Tests for translation and rotation."""

    def test_translate(self):
        plane = Plane.XY.translate([0, 0, 3])
        assert plane.contains([5, 5, 3])
        np.testing.assert_allclose(plane.normal, [0, 0, 1])

    def test_rotate(self):
        """A quarter turn about x takes the z normal to -y."""
        from planarpoly.core.vectors import rotation_matrix

        R = rotation_matrix(np.pi / 2, Line.X.direction)
        plane = Plane.XY.rotate(R, Line.X)
        np.testing.assert_allclose(plane.normal, [0, -1, 0], atol=1e-12)
        assert plane.contains([3, 0, 4])

    def test_eql_ignores_normal_sense(self):
        assert Plane.XY.eql(Plane([5, 5, 0], [0, 0, -1]))
        assert not Plane.XY.eql(Plane([5, 5, 1], [0, 0, 1]))


class TestDispatch:
    """Tests for operand kinds without a definition."""

    def test_unsupported_operand(self):
        with pytest.raises(UnsupportedOperandError):
            Plane.XY.contains(Plane.YZ)

    def test_unsupported_operand_is_type_error(self):
        with pytest.raises(TypeError):
            Plane.XY.intersection_with([0, 0, 0])
