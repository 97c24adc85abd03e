"""
Infinite lines and bounded segments in 3D.

Both types accept points, lines, segments and planes as operands. Each
operation declares which operand kinds it supports in a table and routes
through ``dispatch``; unsupported kinds raise ``UnsupportedOperandError``.
Operations that are well defined but have no geometric answer (parallel
lines, a point off the line) return None.
"""

from typing import Optional

import numpy as np

from ..core.errors import DimensionalityMismatchError
from ..core.kinds import Kind, dispatch, kind_of
from ..core.plane import Plane
from ..core.precision import PRECISION
from ..core.vectors import (
    K,
    angle_between,
    is_antiparallel,
    points_equal,
    rotation_matrix,
    to3d,
)


class Line:
    """
    Infinite line through ``anchor`` along unit ``direction``.

    Parameters
    ----------
    anchor : array-like
        Any point on the line.
    direction : array-like
        Direction of the line. Normalized on construction.

    Raises
    ------
    DimensionalityMismatchError
        If ``direction`` has zero length.
    """

    kind = Kind.LINE

    def __init__(self, anchor, direction):
        anchor = to3d(anchor)
        direction = to3d(direction)
        mod = np.linalg.norm(direction)
        if mod == 0:
            raise DimensionalityMismatchError("Cannot create a line with a zero direction")
        self.anchor = anchor
        self.direction = direction / mod

    def __repr__(self):
        return f"Line(anchor={self.anchor.tolist()}, direction={self.direction.tolist()})"

    def eql(self, line: "Line", epsilon: float = PRECISION) -> bool:
        """True iff ``line`` occupies the same space as this line."""
        return self.is_parallel_to(line, epsilon) and self.contains(line.anchor, epsilon)

    def translate(self, vector) -> "Line":
        return Line(self.anchor + to3d(vector), self.direction)

    def is_parallel_to(self, obj, epsilon: float = PRECISION) -> bool:
        """
        True iff ``obj`` is parallel or antiparallel to this line.

        A plane is parallel when the line has no unique intersection with it.
        """
        def line(other):
            theta = angle_between(self.direction, other.direction)
            return abs(theta) <= epsilon or abs(theta - np.pi) <= epsilon

        return dispatch({
            Kind.LINE: line,
            Kind.SEGMENT: lambda seg: line(seg.line),
            Kind.PLANE: lambda plane: plane.is_parallel_to(self, epsilon),
        }, obj, "Line.is_parallel_to")

    def distance_from(self, obj) -> float:
        """Perpendicular distance to a point, line, segment or plane."""
        def point(P):
            AP = to3d(P) - self.anchor
            return float(np.linalg.norm(AP - np.dot(AP, self.direction) * self.direction))

        def line(other):
            if self.is_parallel_to(other):
                return point(other.anchor)
            N = np.cross(self.direction, other.direction)
            N /= np.linalg.norm(N)
            return float(abs(np.dot(self.anchor - other.anchor, N)))

        return dispatch({
            Kind.POINT: point,
            Kind.LINE: line,
            Kind.SEGMENT: lambda seg: seg.distance_from(self),
            Kind.PLANE: lambda plane: plane.distance_from(self),
        }, obj, "Line.distance_from")

    def contains(self, obj, epsilon: float = PRECISION) -> bool:
        """True iff ``obj`` is a point on the line, a segment lying on it, or
        the same line."""
        def point(P):
            return self.distance_from(P) <= epsilon

        return dispatch({
            Kind.POINT: point,
            Kind.SEGMENT: lambda seg: point(seg.start) and point(seg.end),
            Kind.LINE: lambda other: self.eql(other, epsilon),
        }, obj, "Line.contains")

    def position_of(self, point, epsilon: float = PRECISION) -> Optional[float]:
        """
        Signed distance of ``point`` from the anchor along the direction.

        Returns None if the point is not on the line.
        """
        if not self.contains(point, epsilon):
            return None
        return float(np.dot(to3d(point) - self.anchor, self.direction))

    def lies_in(self, plane: Plane, epsilon: float = PRECISION) -> bool:
        return plane.contains(self, epsilon)

    def intersects(self, obj, epsilon: float = PRECISION) -> bool:
        """True iff the line has a unique point of intersection with ``obj``."""
        return dispatch({
            Kind.LINE: lambda other: (
                not self.is_parallel_to(other, epsilon)
                and self.distance_from(other) <= epsilon
            ),
            Kind.SEGMENT: lambda seg: seg.intersects(self, epsilon),
            Kind.PLANE: lambda plane: plane.intersects(self, epsilon),
        }, obj, "Line.intersects")

    def intersection_with(self, obj, epsilon: float = PRECISION) -> Optional[np.ndarray]:
        """
        Unique intersection point with a line, segment or plane.

        Returns None if there is none.
        """
        def line(other):
            if not self.intersects(other, epsilon):
                return None
            return self._closest_approach(other)

        return dispatch({
            Kind.LINE: line,
            Kind.SEGMENT: lambda seg: seg.intersection_with(self, epsilon),
            Kind.PLANE: lambda plane: plane.intersection_with(self, epsilon),
        }, obj, "Line.intersection_with")

    def _closest_approach(self, other: "Line") -> np.ndarray:
        # Point on self nearest to a non-parallel line; both directions are unit
        X, Y = self.direction, other.direction
        QP = other.anchor - self.anchor
        XY = np.dot(X, Y)
        k = (np.dot(X, QP) - XY * np.dot(Y, QP)) / (1.0 - XY * XY)
        return self.anchor + k * X

    def point_closest_to(self, obj, epsilon: float = PRECISION) -> Optional[np.ndarray]:
        """
        Point on the line closest to a point, line, segment or plane.

        Returns None for a parallel line or plane, where no unique closest
        point exists.
        """
        def point(P):
            P = to3d(P)
            return self.anchor + np.dot(P - self.anchor, self.direction) * self.direction

        def line(other):
            if self.is_parallel_to(other, epsilon):
                return None
            return self._closest_approach(other)

        def segment(seg):
            if self.is_parallel_to(seg, epsilon):
                return None
            return point(seg.point_closest_to(self, epsilon))

        return dispatch({
            Kind.POINT: point,
            Kind.LINE: line,
            Kind.SEGMENT: segment,
            Kind.PLANE: lambda plane: plane.intersection_with(self, epsilon),
        }, obj, "Line.point_closest_to")

    def rotate(self, theta: float, axis) -> "Line":
        """
        Rotate the line by ``theta`` radians about ``axis``.

        The anchor is rotated about the axis' closest point to it and the
        direction is rotated about the axis direction, so the sense of the
        axis direction matters.

        Parameters
        ----------
        theta : float
            Rotation angle in radians.
        axis : Line or array-like
            Axis of rotation. A point is taken to mean the line through it
            parallel to the z axis (rotation within the xy plane).
        """
        if kind_of(axis) is not Kind.LINE:
            axis = Line(axis, K)
        R = rotation_matrix(theta, axis.direction)
        C = axis.point_closest_to(self.anchor)
        return Line(C + R @ (self.anchor - C), R @ self.direction)

    def reverse(self) -> "Line":
        return Line(self.anchor, -self.direction)

    def reflection_in(self, obj) -> "Line":
        """Mirror image of the line in a point, line or plane."""
        def point(P):
            return Line(2 * to3d(P) - self.anchor, self.direction)

        def plane(other):
            D = self.direction
            return Line(
                other.reflect_point(self.anchor),
                D - 2 * np.dot(D, other.normal) * other.normal,
            )

        return dispatch({
            Kind.POINT: point,
            Kind.LINE: lambda other: self.rotate(np.pi, other),
            Kind.PLANE: plane,
        }, obj, "Line.reflection_in")


class Segment:
    """
    Bounded segment from ``start`` to ``end``.

    Parameters
    ----------
    start, end : array-like
        Endpoints. Must be distinct.
    """

    kind = Kind.SEGMENT

    def __init__(self, start, end):
        start = to3d(start)
        end = to3d(end)
        self.line = Line(start, end - start)
        self.start = start
        self.end = end

    def __repr__(self):
        return f"Segment({self.start.tolist()}, {self.end.tolist()})"

    def eql(self, segment: "Segment", epsilon: float = PRECISION) -> bool:
        """True iff both segments have the same endpoints, in either order."""
        return (
            (points_equal(self.start, segment.start, epsilon) and points_equal(self.end, segment.end, epsilon))
            or (points_equal(self.start, segment.end, epsilon) and points_equal(self.end, segment.start, epsilon))
        )

    def length(self) -> float:
        return float(np.linalg.norm(self.end - self.start))

    def to_vector(self) -> np.ndarray:
        """The segment as a vector from ``start`` to ``end``."""
        return self.end - self.start

    def midpoint(self) -> np.ndarray:
        return (self.start + self.end) / 2

    def bisecting_plane(self) -> Plane:
        return Plane(self.midpoint(), self.to_vector())

    def translate(self, vector) -> "Segment":
        V = to3d(vector)
        return Segment(self.start + V, self.end + V)

    def is_parallel_to(self, obj, epsilon: float = PRECISION) -> bool:
        return self.line.is_parallel_to(obj, epsilon)

    def distance_from(self, obj, epsilon: float = PRECISION) -> float:
        """Distance from the segment's closest point to ``obj``."""
        kind = kind_of(obj)
        if kind is Kind.POINT:
            return float(np.linalg.norm(self.point_closest_to(obj, epsilon) - to3d(obj)))
        if self.is_parallel_to(obj, epsilon):
            if kind is Kind.SEGMENT:
                return min(
                    obj.distance_from(self.start, epsilon),
                    obj.distance_from(self.end, epsilon),
                    self.distance_from(obj.start, epsilon),
                    self.distance_from(obj.end, epsilon),
                )
            return obj.distance_from(self.start)
        return obj.distance_from(self.point_closest_to(obj, epsilon))

    def contains(self, obj, epsilon: float = PRECISION) -> bool:
        """True iff a point lies on the segment, or a segment lies within it."""
        def point(P):
            P = to3d(P)
            if points_equal(self.start, P, epsilon):
                return True
            V = self.start - P
            vect = self.to_vector()
            return (
                is_antiparallel(V, vect, epsilon)
                and np.linalg.norm(V) <= np.linalg.norm(vect) + epsilon
            )

        return dispatch({
            Kind.POINT: point,
            Kind.SEGMENT: lambda seg: point(seg.start) and point(seg.end),
        }, obj, "Segment.contains")

    def intersects(self, obj, epsilon: float = PRECISION) -> bool:
        return self.intersection_with(obj, epsilon) is not None

    def intersection_with(self, obj, epsilon: float = PRECISION) -> Optional[np.ndarray]:
        """
        Intersection point with a line, segment or plane.

        Returns None if the segment does not reach the intersection.
        """
        if not self.line.intersects(obj, epsilon):
            return None
        P = self.line.intersection_with(obj, epsilon)
        if P is None or not self.contains(P, epsilon):
            return None
        return P

    def point_closest_to(self, obj, epsilon: float = PRECISION) -> Optional[np.ndarray]:
        """
        Point on the segment closest to a point, line, segment or plane.

        Returns None when the segment is parallel to a line or plane operand.
        """
        if kind_of(obj) is Kind.PLANE:
            V = self.line.intersection_with(obj, epsilon)
            if V is None:
                return None
            return self._clamp(V, epsilon)

        P = self.line.point_closest_to(obj, epsilon)
        if P is None:
            return None
        return self._clamp(P, epsilon)

    def _clamp(self, P: np.ndarray, epsilon: float) -> np.ndarray:
        # P lies on the supporting line; snap it to the nearer endpoint if outside
        if self.contains(P, epsilon):
            return P
        return self.start if np.dot(P - self.start, self.line.direction) < 0 else self.end


Line.X = Line(np.zeros(3), [1, 0, 0])
Line.Y = Line(np.zeros(3), [0, 1, 0])
Line.Z = Line(np.zeros(3), [0, 0, 1])
Line.Segment = Segment
