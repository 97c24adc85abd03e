"""
In-plane coordinates and Shapely conversions.

A polygon's plane gets a right-handed orthonormal basis ``(u, v)`` with
``u x v`` equal to the plane normal, so a polygon wound counter-clockwise
about its normal is also counter-clockwise in ``(u, v)`` coordinates.
"""

from typing import Optional, Tuple

import numpy as np
from shapely.geometry import MultiPolygon, Polygon as ShapelyPolygon
from shapely.geometry.polygon import orient

from ..core.plane import Plane
from ..core.vectors import I, J, K, unit_vector
from ..polygon.polygon import Polygon


def plane_basis(normal) -> Tuple[np.ndarray, np.ndarray]:
    """
    Orthonormal in-plane basis for a plane with the given normal.

    For the xy plane with normal +z this is the identity basis ``(x, y)``.

    Parameters
    ----------
    normal : array-like
        Plane normal.

    Returns
    -------
    tuple of np.ndarray
        ``(u, v)`` with ``u x v == unit(normal)``.
    """
    n = unit_vector(normal)
    candidates = np.array([J, I, K])
    e = candidates[np.argmin(np.abs(candidates @ n))]
    u = unit_vector(np.cross(e, n))
    v = np.cross(n, u)
    return u, v


def to_plane_coordinates(polygon: Polygon) -> np.ndarray:
    """
    Vertices of ``polygon`` in its own plane's 2D coordinates.

    Returns
    -------
    np.ndarray
        Array of shape (N, 2).
    """
    u, v = plane_basis(polygon.plane.normal)
    rel = np.array([vertex.elements for vertex in polygon.vertices]) - polygon.plane.anchor
    return np.column_stack([rel @ u, rel @ v])


def from_plane_coordinates(points_2d: np.ndarray, plane: Plane) -> np.ndarray:
    """
    Lift 2D in-plane coordinates to 3D points on ``plane``.

    Returns
    -------
    np.ndarray
        Array of shape (N, 3).
    """
    points_2d = np.atleast_2d(np.asarray(points_2d, dtype=np.float64))
    u, v = plane_basis(plane.normal)
    return plane.anchor + points_2d[:, 0:1] * u + points_2d[:, 1:2] * v


def to_shapely(polygon: Polygon) -> ShapelyPolygon:
    """Convert a polygon to a Shapely polygon in its plane's 2D coordinates."""
    return ShapelyPolygon(to_plane_coordinates(polygon))


def from_shapely(geom, plane: Optional[Plane] = None) -> Polygon:
    """
    Convert a Shapely polygon to a polygon lying in ``plane``.

    Only the exterior ring is used. A MultiPolygon contributes its largest
    part. The ring is oriented counter-clockwise so the result winds about
    the plane normal.

    Parameters
    ----------
    geom : Polygon or MultiPolygon
        Shapely geometry object.
    plane : Plane, optional
        Target plane. Defaults to the xy plane.

    Returns
    -------
    Polygon
        Polygon with one vertex per distinct exterior coordinate.
    """
    if isinstance(geom, MultiPolygon):
        # Take the largest polygon if we got multiple
        geom = max(geom.geoms, key=lambda g: g.area)

    if not isinstance(geom, ShapelyPolygon):
        raise ValueError(f"Expected a shapely Polygon or MultiPolygon, got {type(geom).__name__}")

    if plane is None:
        plane = Plane.XY

    coords = np.array(orient(geom, sign=1.0).exterior.coords)[:, :2]
    # Remove the closing duplicate vertex that Shapely adds
    if np.allclose(coords[0], coords[-1]):
        coords = coords[:-1]

    return Polygon(from_plane_coordinates(coords, plane), plane)
