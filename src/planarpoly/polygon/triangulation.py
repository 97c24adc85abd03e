"""
Ear-clipping triangulation.

Follows 'Triangulation by ear clipping' (David Eberly, geometrictools.com).
An ear is a convex vertex whose triangle with its two neighbours contains
no other vertex of the polygon. Only reflex vertices can lie inside such a
triangle, so only they are tested. Clipping an ear leaves a smaller simple
polygon; repeating until three vertices remain yields ``n - 2`` triangles.

The starting candidate is chosen at random to avoid systematically poor
ear choices. Randomness only affects which valid triangulation is found.
The input must be a simple polygon; overlapping sections are not handled.
"""

import logging
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

from ..core.errors import TriangulationError
from ..core.plane import Plane
from ..core.precision import PRECISION

if TYPE_CHECKING:
    from .polygon import Polygon
    from .vertex import Vertex

logger = logging.getLogger(__name__)


def _find_ear(
    poly: "Polygon",
    plane: Plane,
    rng: np.random.Generator,
    epsilon: float
) -> Tuple["Polygon", "Vertex"]:
    """
    Find one clippable ear of ``poly``.

    Parameters
    ----------
    poly : Polygon
        Current (partially clipped) polygon.
    plane : Plane
        Plane given to the ear triangle.
    rng : np.random.Generator
        Chooses the first candidate.
    epsilon : float
        Tolerance for the containment tests.

    Returns
    -------
    tuple
        The ear triangle and its tip vertex.

    Raises
    ------
    TriangulationError
        If no convex vertex forms a valid ear.
    """
    candidates = poly.convex_vertices
    n_candidates = len(candidates)
    offset = int(rng.integers(n_candidates)) if n_candidates else 0

    for i in range(n_candidates):
        node = poly.node_for(candidates.at(offset + i))
        tip, nxt, prev = node.data, node.next.data, node.prev.data
        # For a convex tip this order keeps the polygon's winding
        ear = type(poly)([tip, nxt, prev], plane)

        blocked = any(
            ear.contains(vertex, epsilon) or ear.has_edge_containing(vertex, epsilon)
            for vertex in poly.reflex_vertices
            if vertex is not prev and vertex is not nxt
        )
        if not blocked:
            return ear, tip

    raise TriangulationError(
        f"Could not find any candidate vertices among {n_candidates} convex "
        f"vertices of {poly!r}, this is a bug"
    )


def triangulate_by_ear_clipping(
    polygon: "Polygon",
    rng=None,
    epsilon: float = PRECISION
) -> List["Polygon"]:
    """
    Split a simple polygon into triangles by ear clipping.

    Parameters
    ----------
    polygon : Polygon
        Polygon to triangulate.
    rng : np.random.Generator or int, optional
        Random generator or seed for ear selection. A fresh generator is
        used if None.
    epsilon : float
        Tolerance for the containment tests.

    Returns
    -------
    list of Polygon
        ``len(polygon) - 2`` triangles sharing the polygon's vertices and
        plane.

    Raises
    ------
    TriangulationError
        If an ear cannot be found, which means the polygon is not simple.
    """
    rng = np.random.default_rng(rng)
    poly = polygon
    triangles = []

    while not poly.is_triangle():
        ear, tip = _find_ear(poly, polygon.plane, rng, epsilon)
        triangles.append(ear)
        poly = poly.remove_vertex(tip)
        logger.debug("Clipped ear at %r, %d vertices remain", tip, len(poly))

    triangles.append(poly)
    return triangles
