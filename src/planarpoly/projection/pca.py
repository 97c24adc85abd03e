"""
PCA Projection Module

Fits a plane to near-planar 3D points via Principal Component Analysis and
maps points between 3D and in-plane 2D coordinates. The plane is spanned by
the two principal components with highest variance; its normal is the
direction of smallest variance.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from sklearn.decomposition import PCA

from ..core.plane import Plane
from ..core.vectors import newell_normal
from ..polygon.polygon import Polygon

logger = logging.getLogger(__name__)


@dataclass
class ProjectionResult:
    """
    Container for projection results and metadata.

    Attributes
    ----------
    points_2d : np.ndarray
        Projected 2D coordinates of shape (N, 2).
    points_3d : np.ndarray
        Original 3D coordinates of shape (N, 3).
    normal : np.ndarray
        Unit normal of the projection plane, shape (3,). Equal to
        ``basis[0] x basis[1]``.
    basis : np.ndarray
        Orthonormal basis vectors spanning the projection plane of shape (2, 3).
    center_3d : np.ndarray
        Center point used for projection of shape (3,).
    explained_variance_ratio : np.ndarray
        PCA explained variance ratios of shape (3,).
    """
    points_2d: np.ndarray
    points_3d: np.ndarray
    normal: np.ndarray
    basis: np.ndarray
    center_3d: np.ndarray
    explained_variance_ratio: np.ndarray


def project_to_2d(
    points_3d: np.ndarray,
    center: Optional[np.ndarray] = None
) -> ProjectionResult:
    """
    Project 3D points onto their best-fit plane using PCA.

    Parameters
    ----------
    points_3d : np.ndarray
        Array of shape (N, 3) containing at least 3 points.
    center : np.ndarray, optional
        Center point for projection. Defaults to the centroid of the points.

    Returns
    -------
    ProjectionResult
        Container with projection data and metadata.
    """
    points_3d = np.asarray(points_3d, dtype=np.float64)

    if points_3d.ndim != 2 or points_3d.shape[1] != 3:
        raise ValueError(f"Expected points of shape (N, 3), got {points_3d.shape}")

    if len(points_3d) < 3:
        raise ValueError(f"Need at least 3 points, got {len(points_3d)}")

    if center is None:
        center = points_3d.mean(axis=0)
    else:
        center = np.asarray(center, dtype=np.float64)

    centered = points_3d - center
    pca = PCA(n_components=3)
    pca.fit(centered)

    basis = pca.components_[:2]  # Shape (2, 3)

    # Right-handed: u x v = normal
    normal = np.cross(basis[0], basis[1])

    points_2d = centered @ basis.T  # Shape (N, 2)

    return ProjectionResult(
        points_2d=points_2d,
        points_3d=points_3d,
        normal=normal,
        basis=basis,
        center_3d=center,
        explained_variance_ratio=pca.explained_variance_ratio_
    )


def lift_to_3d(
    points_2d: np.ndarray,
    projection: ProjectionResult
) -> np.ndarray:
    """
    Lift 2D points back to 3D on the projection plane.

    Parameters
    ----------
    points_2d : np.ndarray
        Array of shape (N, 2) containing 2D points.
    projection : ProjectionResult
        Projection result containing basis and center.

    Returns
    -------
    np.ndarray
        Array of shape (N, 3) containing 3D points on the projection plane.
    """
    points_2d = np.atleast_2d(points_2d)

    # point_3d = center + u * basis[0] + v * basis[1]
    points_3d = (
        projection.center_3d +
        points_2d[:, 0:1] * projection.basis[0] +
        points_2d[:, 1:2] * projection.basis[1]
    )

    return points_3d


def fit_plane(points_3d: np.ndarray) -> Plane:
    """
    Least-squares plane through a loop of near-planar points.

    The normal is oriented to follow the winding of the points, so a loop
    that is counter-clockwise seen from above gets an upward normal.

    Parameters
    ----------
    points_3d : np.ndarray
        Array of shape (N, 3), in boundary order.

    Returns
    -------
    Plane
        Plane through the centroid of the points.
    """
    projection = project_to_2d(points_3d)
    normal = projection.normal
    if np.dot(normal, newell_normal(projection.points_3d)) < 0:
        normal = -normal

    logger.debug(
        "Fitted plane through %d points, out-of-plane variance ratio %.3g",
        len(projection.points_3d), projection.explained_variance_ratio[2],
    )
    return Plane(projection.center_3d, normal)


def fit_polygon(points_3d: np.ndarray) -> Polygon:
    """
    Build a polygon from near-planar points.

    The points are snapped onto their best-fit plane before the polygon is
    constructed.

    Parameters
    ----------
    points_3d : np.ndarray
        Array of shape (N, 3), in boundary order.

    Returns
    -------
    Polygon
        Polygon lying exactly in the fitted plane.
    """
    points_3d = np.asarray(points_3d, dtype=np.float64)
    plane = fit_plane(points_3d)
    return Polygon([plane.point_closest_to(p) for p in points_3d], plane)
