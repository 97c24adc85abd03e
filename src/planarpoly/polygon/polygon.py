"""
Planar polygons in 3D.

A ``Polygon`` is an immutable value: a plane plus a ring of at least three
vertices. Every transform returns a new polygon, so the convex/reflex
partitions computed at construction and the lazily built triangle caches
never need invalidating.

Contains:
- Convex/reflex vertex partitioning
- Area and centroid by signed triangle-fan integration
- Point containment by winding number
- Ear-clipping triangulation (see ``triangulation``)
- Translation, rotation, scaling and projection
"""

import logging
from typing import List, Optional

import numpy as np

from ..core.errors import DimensionalityMismatchError
from ..core.kinds import Kind, kind_of
from ..core.plane import Plane
from ..core.precision import PRECISION
from ..core.ring import Ring, RingNode
from ..core.vectors import K, angle_between, newell_normal, rotation_matrix, to3d
from ..primitives.line import Line, Segment
from .triangulation import triangulate_by_ear_clipping
from .vertex import Vertex

logger = logging.getLogger(__name__)


def _vertex_compare(data: Vertex, value) -> bool:
    return data.eql(value)


def _derive_plane(vertices: List[Vertex]) -> Plane:
    """
    Plane through the first three vertices, facing the loop's winding.

    Falls back to the Newell plane of the whole loop when the first three
    vertices are collinear.
    """
    coords = np.array([v.elements for v in vertices])
    newell = newell_normal(coords)
    try:
        plane = Plane.from_points(*coords[:3])
    except DimensionalityMismatchError:
        if not np.any(newell):
            raise DimensionalityMismatchError(
                "Cannot derive a plane from collinear points"
            ) from None
        return Plane(coords[0], newell)
    if np.dot(plane.normal, newell) < 0:
        plane = Plane(plane.anchor, -plane.normal)
    return plane


class Polygon:
    """
    A simple polygon lying in a plane.

    Parameters
    ----------
    points : iterable
        Vertices in boundary order. Items that are already ``Vertex``
        objects are shared rather than copied.
    plane : Plane, optional
        Plane of the polygon. Its normal fixes the orientation used for
        convex/reflex classification. Derived from the points if omitted.

    Attributes
    ----------
    plane : Plane
        The polygon's plane.
    vertices : Ring
        Main vertex ring.
    convex_vertices : Ring
        Vertices with an interior angle below 180 degrees.
    reflex_vertices : Ring
        The remaining vertices.
    """

    def __init__(self, points, plane: Optional[Plane] = None):
        vertices = [p if isinstance(p, Vertex) else Vertex(p) for p in points]
        if len(vertices) < 3:
            raise DimensionalityMismatchError(
                f"A polygon needs at least 3 vertices, got {len(vertices)}"
            )

        self.plane = plane if plane is not None else _derive_plane(vertices)
        self.vertices = Ring(vertices)

        self._surface_integral_elements: Optional[List["Polygon"]] = None
        self._triangles: Optional[List["Polygon"]] = None

        self._populate_vertex_type_lists()

    def _populate_vertex_type_lists(self) -> None:
        self.convex_vertices = Ring()
        self.reflex_vertices = Ring()
        for vertex in self.vertices:
            if vertex.is_convex(self):
                self.convex_vertices.append(vertex)
            else:
                self.reflex_vertices.append(vertex)
        logger.debug(
            "Polygon with %d vertices: %d convex, %d reflex",
            len(self.vertices), len(self.convex_vertices), len(self.reflex_vertices),
        )

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self):
        return "Polygon<" + " -> ".join(repr(v) for v in self.vertices) + ">"

    def eql(self, other, epsilon: float = PRECISION) -> bool:
        """
        True iff ``other`` has the same vertices in the same order.

        Both polygons are walked in lock-step from their own first vertex;
        a rotated or reversed vertex order compares unequal.
        """
        if not isinstance(other, Polygon) or len(other) != len(self):
            return False
        return all(
            a.eql(b, epsilon) for a, b in zip(self.vertices, other.vertices)
        )

    def v(self, i: int) -> Vertex:
        """Vertex at position ``i``, numbered from 1. Wraps around."""
        return self.vertices.at(i - 1)

    def node_for(self, vertex) -> Optional[RingNode]:
        """Node of the main ring holding ``vertex``, or None."""
        return self.vertices.find_node(vertex, _vertex_compare)

    def is_triangle(self) -> bool:
        return len(self.vertices) == 3

    def translate(self, vector) -> "Polygon":
        V = to3d(vector)
        return Polygon(
            self.vertices.map(lambda v: v.elements + V),
            self.plane.translate(V),
        )

    def rotate(self, theta: float, line) -> "Polygon":
        """
        Rotate the polygon by ``theta`` radians about ``line``.

        A point instead of a ``Line`` means the axis through that point
        parallel to z.
        """
        if kind_of(line) is not Kind.LINE:
            line = Line(line, K)
        R = rotation_matrix(theta, line.direction)
        C = line.anchor
        return Polygon(
            self.vertices.map(lambda v: C + R @ (v.elements - C)),
            self.plane.rotate(R, line),
        )

    def scale(self, k: float, point=None) -> "Polygon":
        """
        Scale the polygon by ``k`` about ``point`` (the origin by default).

        The new plane passes through the first scaled vertex and keeps the
        original normal.
        """
        P = to3d(point if point is not None else np.zeros(3))
        scaled = self.vertices.map(lambda v: P + k * (v.elements - P))
        return Polygon(scaled, Plane(scaled[0], self.plane.normal))

    def projection_on(self, plane: Plane) -> "Polygon":
        """The polygon's orthogonal projection onto ``plane``."""
        return Polygon(
            self.vertices.map(plane.point_closest_to),
            plane,
        )

    def remove_vertex(self, vertex) -> "Polygon":
        """
        Return a polygon without ``vertex``.

        Returns this polygon unchanged if it is already a triangle.
        """
        if self.is_triangle():
            return self
        return Polygon(
            self.vertices.filter(lambda v: not v.eql(vertex)),
            self.plane,
        )

    def triangles_for_surface_integral(self) -> List["Polygon"]:
        """
        Triangle fan used for area and centroid integration.

        The fan is anchored at the first vertex. For a non-convex polygon
        some triangles lie outside the polygon and face away from its
        normal; weighting each by the sign of its normal against the
        polygon's gives the exact integral. Use ``to_triangles`` for a real
        decomposition.
        """
        if self._surface_integral_elements is None:
            first = self.vertices.first.data
            a = first.elements
            triangles = []
            for node in self.vertices.nodes():
                if node.index < 2:
                    continue
                b = node.prev.data.elements
                c = node.data.elements
                normal = np.cross(b - a, c - a)
                # A collinear element has no area, so its orientation is irrelevant
                colinear = (
                    np.linalg.norm(normal)
                    <= PRECISION * np.linalg.norm(b - a) * np.linalg.norm(c - a)
                )
                triangles.append(Polygon(
                    [first, node.prev.data, node.data],
                    self.plane if colinear else Plane(a, normal),
                ))
            self._surface_integral_elements = triangles
        return self._surface_integral_elements

    def area(self) -> float:
        """Area of the polygon."""
        if self.is_triangle():
            A, B, C = (v.elements for v in self.vertices)
            # Half the modulus of the cross product of two sides
            return 0.5 * float(np.linalg.norm(np.cross(A - B, C - B)))

        return float(sum(
            trig.area() * np.dot(trig.plane.normal, self.plane.normal)
            for trig in self.triangles_for_surface_integral()
        ))

    def centroid(self) -> np.ndarray:
        """Centre of mass of the polygon's surface."""
        if self.is_triangle():
            return np.mean([v.elements for v in self.vertices], axis=0)

        V = np.zeros(3)
        M = 0.0
        for trig in self.triangles_for_surface_integral():
            A = trig.area() * np.dot(trig.plane.normal, self.plane.normal)
            M += A
            V += trig.centroid() * A
        return V / M

    def contains(self, point, epsilon: float = PRECISION) -> bool:
        """True iff ``point`` is strictly inside the polygon."""
        return self.contains_by_winding_number(point, epsilon)

    def contains_by_winding_number(self, point, epsilon: float = PRECISION) -> bool:
        """
        True iff ``point`` is strictly inside the polygon, by winding number.

        Points off the plane or on the boundary are not contained. The
        angle subtended by each edge is accumulated with the sign of its
        turn about the normal; every time the running total passes a full
        turn the loop count moves by one and the total is wrapped back.
        """
        P = to3d(point)
        if not self.plane.contains(P, epsilon):
            return False
        if self.has_edge_containing(P, epsilon):
            return False

        normal = self.plane.normal
        theta = 0.0
        loops = 0
        for node in self.vertices.nodes():
            A = node.data.elements - P
            B = node.next.data.elements - P
            dt = angle_between(A, B)
            if not dt:
                continue
            theta += (1 if np.dot(np.cross(A, B), normal) > 0 else -1) * dt
            if theta >= 2 * np.pi - epsilon:
                loops += 1
                theta -= 2 * np.pi
            if theta <= -2 * np.pi + epsilon:
                loops -= 1
                theta += 2 * np.pi

        return loops != 0

    def has_edge_containing(self, point, epsilon: float = PRECISION) -> bool:
        """True iff ``point`` lies on one of the polygon's edges."""
        P = to3d(point)
        return self.vertices.some(
            lambda node: Segment(node.data, node.next.data).contains(P, epsilon)
        )

    def to_triangles(self, rng=None) -> List["Polygon"]:
        """
        Split the polygon into ``len(self) - 2`` non-overlapping triangles.

        The result is computed once by ear clipping and cached.

        Parameters
        ----------
        rng : np.random.Generator or int, optional
            Source of randomness for ear selection on the first call.
        """
        if self._triangles is None:
            self._triangles = self.triangulate_by_ear_clipping(rng)
        return self._triangles

    def triangulate_by_ear_clipping(self, rng=None) -> List["Polygon"]:
        return triangulate_by_ear_clipping(self, rng=rng)


def polygon_stats(polygon: Polygon, points: Optional[np.ndarray] = None) -> dict:
    """
    Compute diagnostic statistics for a polygon.

    Parameters
    ----------
    polygon : Polygon
        The polygon.
    points : np.ndarray, optional
        Query points of shape (N, 3) or (N, 2) to test for containment.

    Returns
    -------
    dict
        Statistics including:
        - num_vertices: Number of polygon vertices
        - num_convex: Number of convex vertices
        - num_reflex: Number of reflex vertices
        - num_triangles: Number of ear-clipped triangles
        - area: Polygon area
        - centroid: Polygon centroid
        - fraction_contained: Fraction of ``points`` strictly inside
          (only when ``points`` is given)
    """
    stats = {
        'num_vertices': len(polygon),
        'num_convex': len(polygon.convex_vertices),
        'num_reflex': len(polygon.reflex_vertices),
        'num_triangles': len(polygon.to_triangles()),
        'area': polygon.area(),
        'centroid': polygon.centroid(),
    }
    if points is not None:
        points = np.atleast_2d(points)
        inside = np.array([polygon.contains(p) for p in points], dtype=bool)
        stats['fraction_contained'] = float(np.mean(inside)) if len(inside) else 0.0
        stats['points_inside'] = int(np.sum(inside))
        stats['points_outside'] = int(np.sum(~inside))
    return stats
