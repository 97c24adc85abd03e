"""
Vector helpers on numpy arrays.

Points and directions are plain ``np.ndarray`` of shape (3,). Anything
array-like with up to three components is accepted and padded with zeros.
"""

from typing import Optional

import numpy as np
from scipy.spatial.transform import Rotation

from .errors import DimensionalityMismatchError
from .precision import PRECISION


I = np.array([1.0, 0.0, 0.0])
J = np.array([0.0, 1.0, 0.0])
K = np.array([0.0, 0.0, 1.0])


def to3d(vector) -> np.ndarray:
    """
    Canonicalize a point or direction to a float array of shape (3,).

    Parameters
    ----------
    vector : array-like
        One, two or three components. Missing components are 0.

    Returns
    -------
    np.ndarray
        New array of shape (3,).
    """
    arr = np.asarray(vector, dtype=np.float64).ravel()
    if arr.size > 3:
        raise DimensionalityMismatchError(
            f"Expected at most 3 components, got {arr.size}"
        )
    out = np.zeros(3)
    out[:arr.size] = arr
    return out


def modulus(vector) -> float:
    return float(np.linalg.norm(vector))


def unit_vector(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length. The zero vector is returned unchanged."""
    v = to3d(vector)
    mod = np.linalg.norm(v)
    if mod == 0:
        return v
    return v / mod


def angle_between(a, b) -> Optional[float]:
    """
    Angle between two vectors in radians, in [0, pi].

    Returns None when either vector has zero length.
    """
    a = to3d(a)
    b = to3d(b)
    if not np.any(a) or not np.any(b):
        return None
    # atan2 keeps precision near 0 and pi where arccos does not
    return float(np.arctan2(np.linalg.norm(np.cross(a, b)), np.dot(a, b)))


def is_parallel(a, b, epsilon: float = PRECISION) -> bool:
    """True iff ``a`` and ``b`` point the same way, within ``epsilon`` radians."""
    theta = angle_between(a, b)
    return theta is not None and theta <= epsilon


def is_antiparallel(a, b, epsilon: float = PRECISION) -> bool:
    """True iff ``a`` and ``b`` point in opposite directions, within ``epsilon`` radians."""
    theta = angle_between(a, b)
    return theta is not None and abs(theta - np.pi) <= epsilon


def is_perpendicular(a, b, epsilon: float = PRECISION) -> bool:
    theta = angle_between(a, b)
    return theta is not None and abs(theta - np.pi / 2) <= epsilon


def points_equal(a, b, epsilon: float = PRECISION) -> bool:
    """Component-wise equality within ``epsilon``."""
    return bool(np.all(np.abs(to3d(a) - to3d(b)) <= epsilon))


def rotation_matrix(theta: float, axis) -> np.ndarray:
    """
    Rotation matrix for a right-handed rotation of ``theta`` radians.

    Parameters
    ----------
    theta : float
        Rotation angle in radians.
    axis : array-like
        Rotation axis. Need not be normalized.

    Returns
    -------
    np.ndarray
        Matrix of shape (3, 3).
    """
    axis = unit_vector(axis)
    if not np.any(axis):
        raise DimensionalityMismatchError("Cannot rotate about a zero axis")
    return Rotation.from_rotvec(theta * axis).as_matrix()


def newell_normal(points) -> np.ndarray:
    """
    Unnormalized Newell normal of a closed loop of points.

    Its direction follows the loop's winding and its length is twice the
    enclosed area, so it is robust to collinear leading vertices.
    """
    pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
    nxt = np.roll(pts, -1, axis=0)
    return np.sum(np.cross(pts, nxt), axis=0)
