"""
planarpoly - Planar polygon geometry in 3D space.

This package provides a small computational-geometry kernel for polygons
that lie in an arbitrary plane:
- Convex/reflex vertex classification relative to the plane normal
- Ear-clipping triangulation of simple polygons
- Strict point containment by winding number
- Area and centroid by signed triangle-fan integration
- Line, segment and plane primitives with distance, intersection and
  closest-point queries

Main Classes
------------
Polygon : Planar polygon with triangulation, containment and integrals
Vertex : Polygon corner with convexity predicates
Line, Segment, Plane : Supporting primitives

Example
-------
>>> from planarpoly import Polygon

>>> square = Polygon([[0, 0], [1, 0], [1, 1], [0, 1]])
>>> square.area()
1.0
>>> square.contains([0.5, 0.5])
True
>>> len(square.to_triangles())
2
"""

from .core.errors import (
    GeometryError,
    InvalidOperationError,
    DimensionalityMismatchError,
    UnsupportedOperandError,
    TriangulationError,
)
from .core.plane import Plane
from .core.precision import PRECISION
from .core.ring import Ring, RingNode
from .core.vectors import rotation_matrix, to3d
from .logging_config import setup_logging
from .polygon import Polygon, Vertex, polygon_stats, triangulate_by_ear_clipping
from .primitives import Line, Segment
from .projection import (
    ProjectionResult,
    project_to_2d,
    lift_to_3d,
    fit_plane,
    fit_polygon,
    to_shapely,
    from_shapely,
)
from .visualization import plot_polygon, plot_polygon_3d

__all__ = [
    # Errors
    'GeometryError',
    'InvalidOperationError',
    'DimensionalityMismatchError',
    'UnsupportedOperandError',
    'TriangulationError',
    # Core
    'PRECISION',
    'Plane',
    'Ring',
    'RingNode',
    'rotation_matrix',
    'to3d',
    # Primitives
    'Line',
    'Segment',
    # Polygons
    'Polygon',
    'Vertex',
    'polygon_stats',
    'triangulate_by_ear_clipping',
    # Projection
    'ProjectionResult',
    'project_to_2d',
    'lift_to_3d',
    'fit_plane',
    'fit_polygon',
    'to_shapely',
    'from_shapely',
    # Visualization
    'plot_polygon',
    'plot_polygon_3d',
    # Logging
    'setup_logging',
]
