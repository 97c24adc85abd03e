"""
Infinite planes in 3D.
"""

import numpy as np

from .errors import DimensionalityMismatchError
from .kinds import Kind, dispatch
from .precision import PRECISION
from .vectors import (
    angle_between,
    is_perpendicular,
    to3d,
)


class Plane:
    """
    Plane through ``anchor`` with unit ``normal``.

    Parameters
    ----------
    anchor : array-like
        Any point on the plane.
    normal : array-like
        Normal direction. Normalized on construction.

    Raises
    ------
    DimensionalityMismatchError
        If ``normal`` has zero length.
    """

    kind = Kind.PLANE

    def __init__(self, anchor, normal):
        anchor = to3d(anchor)
        normal = to3d(normal)
        mod = np.linalg.norm(normal)
        if mod == 0:
            raise DimensionalityMismatchError("Cannot create a plane with a zero normal")
        self.anchor = anchor
        self.normal = normal / mod

    @classmethod
    def from_points(cls, p1, p2, p3) -> "Plane":
        """
        Plane through three points.

        The normal is ``(p2 - p1) x (p3 - p1)``, so it follows the winding
        ``p1 -> p2 -> p3``.

        Raises
        ------
        DimensionalityMismatchError
            If the points are collinear.
        """
        p1, p2, p3 = to3d(p1), to3d(p2), to3d(p3)
        normal = np.cross(p2 - p1, p3 - p1)
        if np.linalg.norm(normal) == 0:
            raise DimensionalityMismatchError("Cannot fit a plane to collinear points")
        return cls(p1, normal)

    def __repr__(self):
        return f"Plane(anchor={self.anchor.tolist()}, normal={self.normal.tolist()})"

    def eql(self, plane: "Plane", epsilon: float = PRECISION) -> bool:
        """True iff both planes occupy the same space (normals may be opposite)."""
        return self.contains(plane.anchor, epsilon) and self.is_parallel_to(plane, epsilon)

    def translate(self, vector) -> "Plane":
        return Plane(self.anchor + to3d(vector), self.normal)

    def rotate(self, matrix, line) -> "Plane":
        """
        Rotate the plane by ``matrix`` about the axis ``line``.

        Parameters
        ----------
        matrix : np.ndarray
            Rotation matrix of shape (3, 3), as built by ``rotation_matrix``.
        line : Line
            Axis of rotation. ``matrix`` must rotate about its direction.
        """
        R = np.asarray(matrix, dtype=np.float64)
        C = line.anchor
        return Plane(C + R @ (self.anchor - C), R @ self.normal)

    def is_parallel_to(self, obj, epsilon: float = PRECISION) -> bool:
        """
        True iff the plane and ``obj`` have no unique intersection.

        A line or segment is parallel when its direction is perpendicular to
        the normal; another plane is parallel when the normals are parallel
        or antiparallel.
        """
        def plane(other):
            theta = angle_between(self.normal, other.normal)
            return abs(theta) <= epsilon or abs(np.pi - theta) <= epsilon

        def line(other):
            return is_perpendicular(self.normal, other.direction, epsilon)

        return dispatch({
            Kind.PLANE: plane,
            Kind.LINE: line,
            Kind.SEGMENT: lambda seg: line(seg.line),
        }, obj, "Plane.is_parallel_to")

    def distance_from(self, obj, epsilon: float = PRECISION) -> float:
        """Perpendicular distance to a point, line, segment or plane."""
        def point(P):
            return float(abs(np.dot(to3d(P) - self.anchor, self.normal)))

        def line(other):
            return 0.0 if self.intersects(other, epsilon) else point(other.anchor)

        def segment(seg):
            if self.intersects(seg, epsilon):
                return 0.0
            return min(point(seg.start), point(seg.end))

        def plane(other):
            return point(other.anchor) if self.is_parallel_to(other, epsilon) else 0.0

        return dispatch({
            Kind.POINT: point,
            Kind.LINE: line,
            Kind.SEGMENT: segment,
            Kind.PLANE: plane,
        }, obj, "Plane.distance_from")

    def contains(self, obj, epsilon: float = PRECISION) -> bool:
        """True iff a point, line or segment lies in the plane."""
        def point(P):
            return self.distance_from(P) <= epsilon

        def line(other):
            return self.is_parallel_to(other, epsilon) and point(other.anchor)

        return dispatch({
            Kind.POINT: point,
            Kind.LINE: line,
            Kind.SEGMENT: lambda seg: point(seg.start) and point(seg.end),
        }, obj, "Plane.contains")

    def intersects(self, obj, epsilon: float = PRECISION) -> bool:
        """True iff the plane has a unique intersection with a line or plane,
        or crosses a segment."""
        return dispatch({
            Kind.LINE: lambda other: not self.is_parallel_to(other, epsilon),
            Kind.PLANE: lambda other: not self.is_parallel_to(other, epsilon),
            Kind.SEGMENT: lambda seg: seg.intersects(self),
        }, obj, "Plane.intersects")

    def intersection_with(self, obj, epsilon: float = PRECISION):
        """
        Intersection with a line (a point), segment (a point) or plane (a Line).

        Returns None when there is no unique intersection.
        """
        def line(other):
            if self.is_parallel_to(other, epsilon):
                return None
            A = other.anchor
            D = other.direction
            t = np.dot(self.anchor - A, self.normal) / np.dot(D, self.normal)
            return A + t * D

        def plane(other):
            if self.is_parallel_to(other, epsilon):
                return None
            from ..primitives.line import Line  # Local import to avoid cycles

            n1, n2 = self.normal, other.normal
            u = np.cross(n1, n2)
            d1 = np.dot(n1, self.anchor)
            d2 = np.dot(n2, other.anchor)
            point = (d1 * np.cross(n2, u) + d2 * np.cross(u, n1)) / np.dot(u, u)
            return Line(point, u)

        return dispatch({
            Kind.LINE: line,
            Kind.SEGMENT: lambda seg: seg.intersection_with(self),
            Kind.PLANE: plane,
        }, obj, "Plane.intersection_with")

    def point_closest_to(self, point) -> np.ndarray:
        """Orthogonal projection of ``point`` onto the plane."""
        P = to3d(point)
        return P - np.dot(P - self.anchor, self.normal) * self.normal

    def reflect_point(self, point) -> np.ndarray:
        """Mirror image of ``point`` in the plane."""
        P = to3d(point)
        return P - 2 * np.dot(P - self.anchor, self.normal) * self.normal


Plane.XY = Plane(np.zeros(3), [0, 0, 1])
Plane.YZ = Plane(np.zeros(3), [1, 0, 0])
Plane.ZX = Plane(np.zeros(3), [0, 1, 0])
