"""
Polygon vertices and convex/reflex classification.
"""

from typing import TYPE_CHECKING

import numpy as np

from ..core.errors import InvalidOperationError
from ..core.precision import PRECISION
from ..core.vectors import angle_between, points_equal, to3d

if TYPE_CHECKING:
    from .polygon import Polygon


class Vertex:
    """
    One corner of a polygon.

    A vertex is an immutable 3D point. It implements the numpy array
    protocol, so it can be passed anywhere a point is expected. Identity is
    kept for ``==`` and hashing: the same vertex object is shared between a
    polygon's main ring and its convex/reflex partitions, and between a
    polygon and the polygons derived from it. Use ``eql`` for coordinate
    equality.

    Parameters
    ----------
    point : array-like
        Up to three coordinates; missing ones are 0.
    """

    __slots__ = ("elements",)

    def __init__(self, point):
        elements = to3d(point)
        elements.setflags(write=False)
        self.elements = elements

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.elements.copy()
        return self.elements.astype(dtype)

    def __getitem__(self, i):
        return self.elements[i]

    def __iter__(self):
        return iter(self.elements)

    def __len__(self):
        return 3

    def __repr__(self):
        return "Vertex(" + ", ".join(f"{c:g}" for c in self.elements) + ")"

    def to_array(self) -> np.ndarray:
        return self.elements.copy()

    def eql(self, other, epsilon: float = PRECISION) -> bool:
        """True iff ``other`` has the same coordinates within ``epsilon``."""
        return points_equal(self.elements, other, epsilon)

    def is_convex(self, polygon: "Polygon", epsilon: float = PRECISION) -> bool:
        """
        True iff the interior angle at this vertex is in [0, 180) degrees.

        The turn at the vertex is measured against the polygon's plane
        normal. A zero angle (the polygon doubles back on itself) counts as
        convex; a straight angle counts as reflex.

        Raises
        ------
        InvalidOperationError
            If the vertex is not in ``polygon``.
        """
        node = polygon.node_for(self)
        if node is None:
            raise InvalidOperationError("Provided vertex is not in the polygon")
        A = node.next.data.elements - self.elements
        B = node.prev.data.elements - self.elements
        theta = angle_between(A, B)
        if theta is None or theta <= epsilon:
            return True
        if abs(theta - np.pi) <= epsilon:
            return False
        return float(np.dot(np.cross(A, B), polygon.plane.normal)) > 0

    def is_reflex(self, polygon: "Polygon", epsilon: float = PRECISION) -> bool:
        """True iff the interior angle at this vertex is in [180, 360) degrees."""
        return not self.is_convex(polygon, epsilon)
