"""
Unit tests for polygon measurements, containment and transforms.
"""

import numpy as np
import pytest
from shapely.geometry import Point, Polygon as ShapelyPolygon

from planarpoly.core.errors import DimensionalityMismatchError
from planarpoly.core.plane import Plane
from planarpoly.core.vectors import rotation_matrix
from planarpoly.polygon import Polygon, Vertex, polygon_stats
from planarpoly.primitives.line import Line


SQUARE = [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]]
L_SHAPE = [[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]]


def star_points(n_tips=5, outer=2.0, inner=0.8):
    """Counter-clockwise star, starting at an inner vertex."""
    pts = []
    for k in range(2 * n_tips):
        angle = np.pi / 2 + k * np.pi / n_tips
        radius = outer if k % 2 == 0 else inner
        pts.append([radius * np.cos(angle), radius * np.sin(angle)])
    return pts[1:] + pts[:1]


class TestMeasurements:
    """Tests for area() and centroid()."""

    def test_unit_square(self):
        square = Polygon(SQUARE)
        assert square.area() == pytest.approx(1.0)
        np.testing.assert_allclose(square.centroid(), [0.5, 0.5, 0])
        np.testing.assert_allclose(square.plane.normal, [0, 0, 1])

    def test_triangle(self):
        trig = Polygon([[0, 0], [4, 0], [0, 3]])
        assert trig.area() == pytest.approx(6.0)
        np.testing.assert_allclose(trig.centroid(), [4 / 3, 1, 0])

    def test_l_shape(self):
        poly = Polygon(L_SHAPE)
        assert poly.area() == pytest.approx(3.0)
        np.testing.assert_allclose(poly.centroid(), [5 / 6, 5 / 6, 0])

    def test_star_matches_shapely(self):
        """A fan from a reflex vertex still integrates exactly."""
        pts = star_points()
        poly = Polygon(pts)
        reference = ShapelyPolygon(pts)

        assert len(poly.reflex_vertices) == 5
        assert poly.area() == pytest.approx(reference.area)
        np.testing.assert_allclose(
            poly.centroid()[:2],
            [reference.centroid.x, reference.centroid.y],
            atol=1e-9,
        )

    def test_clockwise_square(self):
        """A clockwise loop gets a downward normal and a positive area."""
        square = Polygon([[0, 0], [0, 1], [1, 1], [1, 0]])
        np.testing.assert_allclose(square.plane.normal, [0, 0, -1])
        assert square.area() == pytest.approx(1.0)
        np.testing.assert_allclose(square.centroid(), [0.5, 0.5, 0])

    def test_tilted_square(self):
        tilted = Polygon(SQUARE).rotate(np.pi / 4, Line.X).translate([0, 0, 5])
        c = np.cos(np.pi / 4)
        assert tilted.area() == pytest.approx(1.0)
        np.testing.assert_allclose(tilted.centroid(), [0.5, 0.5 * c, 5 + 0.5 * c], atol=1e-9)

    def test_collinear_start_uses_loop_normal(self):
        """Three collinear leading points still give a proper plane."""
        poly = Polygon([[0, 0], [1, 0], [2, 0], [2, 2], [0, 2]])
        np.testing.assert_allclose(poly.plane.normal, [0, 0, 1])
        assert poly.area() == pytest.approx(4.0)
        np.testing.assert_allclose(poly.centroid(), [1, 1, 0])


class TestContainment:
    """Tests for strict winding-number containment."""

    def test_inside_and_outside(self):
        square = Polygon(SQUARE)
        assert square.contains([0.5, 0.5])
        assert not square.contains([2, 2])
        assert not square.contains([-0.5, 0.5])

    def test_boundary_excluded(self):
        """Vertices and edge points are not strictly inside."""
        square = Polygon(SQUARE)
        assert not square.contains([0, 0])
        assert not square.contains([0.5, 0])
        assert square.has_edge_containing([0.5, 0])
        assert square.has_edge_containing([1, 1])
        assert not square.has_edge_containing([0.5, 0.5])

    def test_off_plane(self):
        square = Polygon(SQUARE)
        assert not square.contains([0.5, 0.5, 1])

    def test_l_notch(self):
        poly = Polygon(L_SHAPE)
        assert poly.contains([0.5, 1.5])
        assert poly.contains([1.5, 0.5])
        assert not poly.contains([1.5, 1.5])

    def test_clockwise_orientation_independent(self):
        square = Polygon([[0, 0], [0, 1], [1, 1], [1, 0]])
        assert square.contains([0.5, 0.5])
        assert not square.contains([1.5, 0.5])

    def test_tilted_polygon(self):
        R = rotation_matrix(np.pi / 3, [0, 1, 0])
        tilted = Polygon(L_SHAPE).rotate(np.pi / 3, Line.Y)
        assert tilted.contains(R @ [0.5, 1.5, 0])
        assert not tilted.contains(R @ [1.5, 1.5, 0])
        assert not tilted.contains([0.5, 1.5, 0])

    def test_star_matches_shapely(self):
        pts = star_points()
        poly = Polygon(pts)
        reference = ShapelyPolygon(pts)

        xs = np.linspace(-2.2, 2.2, 23)
        checked = 0
        for x in xs:
            for y in xs:
                p = Point(x, y)
                if reference.boundary.distance(p) < 1e-3:
                    continue
                assert poly.contains([x, y]) == reference.contains(p), (x, y)
                checked += 1
        assert checked > 400


class TestEquality:
    """Tests for eql()."""

    def test_same_vertices(self):
        assert Polygon(SQUARE).eql(Polygon(SQUARE))

    def test_translate_by_zero(self):
        square = Polygon(SQUARE)
        assert square.translate([0, 0, 0]).eql(square)

    def test_rotated_start_is_unequal(self):
        """Vertex order is compared from each polygon's first vertex."""
        assert not Polygon(SQUARE).eql(Polygon(SQUARE[1:] + SQUARE[:1]))

    def test_different_size(self):
        assert not Polygon(SQUARE).eql(Polygon(SQUARE[:3]))
        assert not Polygon(SQUARE).eql("square")


class TestTransforms:
    """Tests for translate, rotate, scale, projection and vertex removal."""

    def test_translate(self):
        moved = Polygon(SQUARE).translate([1, 2, 3])
        assert moved.v(1).eql([1, 2, 3])
        assert moved.plane.contains([0, 0, 3])
        assert moved.area() == pytest.approx(1.0)

    def test_rotate_about_z(self):
        turned = Polygon(SQUARE).rotate(np.pi / 2, Line.Z)
        expected = Polygon([[0, 0], [0, 1], [-1, 1], [-1, 0]])
        assert turned.eql(expected)
        np.testing.assert_allclose(turned.plane.normal, [0, 0, 1], atol=1e-12)

    def test_rotate_about_point(self):
        """A point axis means the z-parallel line through that point."""
        turned = Polygon(SQUARE).rotate(np.pi, [1, 1])
        assert turned.v(1).eql([2, 2, 0])
        assert turned.v(3).eql([1, 1, 0])
        np.testing.assert_allclose(turned.centroid(), [1.5, 1.5, 0])

    def test_scale_about_origin(self):
        big = Polygon(SQUARE).scale(2)
        assert big.area() == pytest.approx(4.0)
        np.testing.assert_allclose(big.centroid(), [1, 1, 0])

    def test_scale_about_point(self):
        big = Polygon(SQUARE).scale(2, [1, 1])
        assert big.v(1).eql([-1, -1, 0])
        assert big.area() == pytest.approx(4.0)
        np.testing.assert_allclose(big.centroid(), [0, 0, 0], atol=1e-12)
        np.testing.assert_allclose(big.plane.anchor, [-1, -1, 0])

    def test_scale_keeps_normal(self):
        tilted = Polygon(SQUARE).rotate(np.pi / 4, Line.X).translate([0, 0, 1])
        big = tilted.scale(3)
        np.testing.assert_allclose(big.plane.normal, tilted.plane.normal)
        assert big.area() == pytest.approx(9.0)

    def test_projection_on(self):
        tilted = Polygon(SQUARE).rotate(np.pi / 4, Line.X)
        flat = tilted.projection_on(Plane.XY)
        assert flat.plane is Plane.XY
        assert all(abs(v[2]) < 1e-12 for v in flat.vertices)
        assert flat.area() == pytest.approx(np.cos(np.pi / 4))

    def test_remove_vertex(self):
        square = Polygon(SQUARE)
        trig = square.remove_vertex([1, 1, 0])
        assert len(trig) == 3
        assert trig.area() == pytest.approx(0.5)
        assert len(square) == 4

    def test_remove_vertex_from_triangle(self):
        trig = Polygon(SQUARE[:3])
        assert trig.remove_vertex(trig.v(1)) is trig


class TestAccessors:
    """Tests for construction and vertex access."""

    def test_v_wraps(self):
        square = Polygon(SQUARE)
        assert square.v(1).eql([0, 0, 0])
        assert square.v(4).eql([0, 1, 0])
        assert square.v(5) is square.v(1)
        assert square.v(0) is square.v(4)

    def test_node_for(self):
        square = Polygon(SQUARE)
        node = square.node_for([1, 1, 0])
        assert node.index == 2
        assert node.next.data is square.v(4)
        assert square.node_for([5, 5, 0]) is None

    def test_is_triangle(self):
        assert Polygon(SQUARE[:3]).is_triangle()
        assert not Polygon(SQUARE).is_triangle()

    def test_too_few_points(self):
        with pytest.raises(DimensionalityMismatchError):
            Polygon([[0, 0], [1, 1]])

    def test_collinear_points(self):
        with pytest.raises(DimensionalityMismatchError):
            Polygon([[0, 0], [1, 1], [2, 2]])

    def test_vertices_are_shared(self):
        """Vertex objects passed in are reused, not copied."""
        v = Vertex([0, 0])
        poly = Polygon([v, [1, 0], [0, 1]])
        assert poly.v(1) is v
        assert poly.convex_vertices.at(0) is v

    def test_fan_is_cached(self):
        poly = Polygon(L_SHAPE)
        fan = poly.triangles_for_surface_integral()
        assert fan is poly.triangles_for_surface_integral()
        assert len(fan) == len(poly) - 2

    def test_repr(self):
        trig = Polygon([[0, 0], [1, 0], [0, 1]])
        assert repr(trig) == "Polygon<Vertex(0, 0, 0) -> Vertex(1, 0, 0) -> Vertex(0, 1, 0)>"


class TestPolygonStats:
    """Tests for polygon_stats()."""

    def test_basic_stats(self):
        stats = polygon_stats(Polygon(L_SHAPE))
        assert stats['num_vertices'] == 6
        assert stats['num_convex'] == 5
        assert stats['num_reflex'] == 1
        assert stats['num_triangles'] == 4
        assert stats['area'] == pytest.approx(3.0)
        assert 'fraction_contained' not in stats

    def test_point_stats(self):
        points = np.array([[0.5, 0.5, 0], [2, 2, 0], [0.25, 0.75, 0], [0.5, 0.5, 1]])
        stats = polygon_stats(Polygon(SQUARE), points)
        assert stats['points_inside'] == 2
        assert stats['points_outside'] == 2
        assert stats['fraction_contained'] == pytest.approx(0.5)
