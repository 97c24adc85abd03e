"""
Visualization utilities for polygon plotting.

Contains plotting functions for:
- 2D view of a polygon in its own plane, with its triangulation
- 3D view of a polygon and its normal
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D

from ..polygon.polygon import Polygon, polygon_stats
from ..projection.planar import plane_basis, to_plane_coordinates


def plot_polygon(
    polygon: Polygon,
    points: Optional[np.ndarray] = None,
    ax: Optional[plt.Axes] = None,
    show_triangles: bool = True,
    title: str = "Polygon",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a polygon in its plane's 2D coordinates.

    Parameters
    ----------
    polygon : Polygon
        Polygon to draw.
    points : np.ndarray, optional
        3D query points of shape (N, 3). Coloured by containment and drawn
        at their projection onto the polygon's plane.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    show_triangles : bool
        Whether to draw the ear-clipping triangulation.
    title : str
        Plot title.
    show_stats : bool
        Whether to show polygon statistics.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    poly = to_plane_coordinates(polygon)
    u, v = plane_basis(polygon.plane.normal)
    anchor = polygon.plane.anchor

    def flatten(pts):
        rel = np.atleast_2d(pts) - anchor
        return np.column_stack([rel @ u, rel @ v])

    if show_triangles:
        for trig in polygon.to_triangles():
            tri = flatten([vertex.elements for vertex in trig.vertices])
            closed_tri = np.vstack([tri, tri[0]])
            ax.plot(closed_tri[:, 0], closed_tri[:, 1], color='gray',
                    linewidth=0.8, linestyle='--', zorder=2)

    if points is not None:
        points = np.atleast_2d(np.asarray(points, dtype=np.float64))
        inside_mask = np.array([polygon.contains(p) for p in points], dtype=bool)
        flat = flatten(points)
        ax.scatter(
            flat[inside_mask, 0], flat[inside_mask, 1],
            c='steelblue', alpha=0.6, s=20, label='Inside', zorder=3
        )
        ax.scatter(
            flat[~inside_mask, 0], flat[~inside_mask, 1],
            c='coral', alpha=0.6, s=20, label='Outside', zorder=3
        )

    closed_poly = np.vstack([poly, poly[0]])
    ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=2, zorder=4)
    ax.fill(poly[:, 0], poly[:, 1], alpha=0.15, color='green', zorder=1)

    convex = flatten([vertex.elements for vertex in polygon.convex_vertices])
    ax.scatter(convex[:, 0], convex[:, 1], c='black', s=50, marker='s',
               label='Convex', zorder=5)
    if len(polygon.reflex_vertices):
        reflex = flatten([vertex.elements for vertex in polygon.reflex_vertices])
        ax.scatter(reflex[:, 0], reflex[:, 1], c='red', s=70, marker='^',
                   label='Reflex', zorder=5)

    if show_stats:
        stats = polygon_stats(polygon)
        stats_text = (
            f"Vertices: {stats['num_vertices']} "
            f"({stats['num_convex']} convex, {stats['num_reflex']} reflex)\n"
            f"Triangles: {stats['num_triangles']}\n"
            f"Area: {stats['area']:.4g}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('u')
    ax.set_ylabel('v')
    ax.set_title(title)
    ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax


def plot_polygon_3d(
    polygon: Polygon,
    ax: Optional[Axes3D] = None,
    show_normal: bool = True,
    title: str = "Polygon"
) -> Axes3D:
    """
    Visualize a polygon in 3D.

    Parameters
    ----------
    polygon : Polygon
        Polygon to draw.
    ax : Axes3D, optional
        Matplotlib 3D axes. Creates new figure if None.
    show_normal : bool
        Whether to draw the plane normal at the centroid.
    title : str
        Plot title.

    Returns
    -------
    Axes3D
        The matplotlib 3D axes object.
    """
    if ax is None:
        fig = plt.figure(figsize=(8, 8))
        ax = fig.add_subplot(1, 1, 1, projection='3d')

    coords = np.array([vertex.elements for vertex in polygon.vertices])
    closed = np.vstack([coords, coords[0]])
    ax.plot(closed[:, 0], closed[:, 1], closed[:, 2], 'k-', linewidth=2, label='Boundary')
    ax.scatter(coords[:, 0], coords[:, 1], coords[:, 2], c='black', s=50, marker='s')

    if show_normal:
        center = polygon.centroid()
        extent = np.max(np.ptp(coords, axis=0))
        normal_end = center + polygon.plane.normal * extent * 0.3
        ax.plot(
            [center[0], normal_end[0]],
            [center[1], normal_end[1]],
            [center[2], normal_end[2]],
            'g--', linewidth=2, label='Normal'
        )
        ax.scatter([center[0]], [center[1]], [center[2]],
                   c='red', s=150, marker='*', label='Centroid')

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_zlabel('Z')
    ax.set_title(title)
    ax.legend(loc='upper left', fontsize=8)

    return ax
