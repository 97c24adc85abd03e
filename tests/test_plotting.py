"""
Smoke tests for polygon plotting.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
import matplotlib.pyplot as plt

from planarpoly import Polygon, plot_polygon, plot_polygon_3d
from planarpoly.primitives.line import Line


L_SHAPE = [[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]]


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


class TestPlotPolygon:
    """Tests for the in-plane 2D view."""

    def test_creates_axes(self):
        ax = plot_polygon(Polygon(L_SHAPE))
        assert ax.get_title() == "Polygon"
        # Boundary plus one dashed outline per triangle
        assert len(ax.lines) == 1 + 4

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        result = plot_polygon(Polygon(L_SHAPE), ax=ax, show_triangles=False, title="L")
        assert result is ax
        assert ax.get_title() == "L"
        assert len(ax.lines) == 1

    def test_points_and_tilted_polygon(self):
        tilted = Polygon(L_SHAPE).rotate(np.pi / 4, Line.X)
        rng = np.random.default_rng(0)
        points = rng.uniform(-1, 3, size=(50, 3))
        ax = plot_polygon(tilted, points=points, show_stats=False)
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert 'Outside' in labels
        assert 'Reflex' in labels


class TestPlotPolygon3d:
    """Tests for the 3D view."""

    def test_creates_axes(self):
        tilted = Polygon(L_SHAPE).rotate(np.pi / 6, Line.Y)
        ax = plot_polygon_3d(tilted, title="Tilted L")
        assert ax.get_title() == "Tilted L"
        assert ax.name == '3d'

    def test_without_normal(self):
        fig = plt.figure()
        ax = fig.add_subplot(1, 1, 1, projection='3d')
        result = plot_polygon_3d(Polygon(L_SHAPE), ax=ax, show_normal=False)
        assert result is ax
        assert len(ax.lines) == 1
