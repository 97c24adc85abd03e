"""
Polygons, vertex classification and triangulation.
"""

from .polygon import Polygon, polygon_stats
from .triangulation import triangulate_by_ear_clipping
from .vertex import Vertex

__all__ = ['Polygon', 'polygon_stats', 'triangulate_by_ear_clipping', 'Vertex']
