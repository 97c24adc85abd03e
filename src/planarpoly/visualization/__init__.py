"""
Visualization utilities.
"""

from .plotting import plot_polygon, plot_polygon_3d

__all__ = ['plot_polygon', 'plot_polygon_3d']
