"""
Plane fitting, 2D projection and Shapely conversion utilities.
"""

from .pca import ProjectionResult, project_to_2d, lift_to_3d, fit_plane, fit_polygon
from .planar import (
    plane_basis,
    to_plane_coordinates,
    from_plane_coordinates,
    to_shapely,
    from_shapely,
)

__all__ = [
    'ProjectionResult',
    'project_to_2d',
    'lift_to_3d',
    'fit_plane',
    'fit_polygon',
    'plane_basis',
    'to_plane_coordinates',
    'from_plane_coordinates',
    'to_shapely',
    'from_shapely',
]
