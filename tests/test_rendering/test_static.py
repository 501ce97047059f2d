"""Tests for the static matplotlib renderer."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.figure import Figure

from orbitframes.rendering.static import render_mpl
from orbitframes.shapes.filled import filled_cube
from orbitframes.shapes.wireframe import wireframe_cone, wireframe_cube


class TestRenderMpl:
    def test_saves_png(self, tmp_path):
        out = tmp_path / "cube.png"
        fig = render_mpl(filled_cube(30, 20), out)
        assert isinstance(fig, Figure)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_filled_uses_poly_collection(self):
        fig, ax = plt.subplots()
        render_mpl(filled_cube(30, 20), ax=ax)
        polys = [c for c in ax.collections if isinstance(c, PolyCollection)]
        assert len(polys) == 1
        assert len(polys[0].get_paths()) == 3
        plt.close(fig)

    def test_wireframe_uses_line_collection(self):
        fig, ax = plt.subplots()
        render_mpl(wireframe_cube(30, 20), ax=ax)
        assert len(ax.collections) == 1
        assert isinstance(ax.collections[0], LineCollection)
        assert len(ax.collections[0].get_segments()) == 12
        plt.close(fig)

    def test_mixed_primitives_keep_paint_order(self):
        fig, ax = plt.subplots()
        render_mpl(wireframe_cone(30, 20), ax=ax)
        zorders = [c.get_zorder() for c in ax.collections]
        assert len(zorders) == 2
        assert zorders[0] < zorders[1]
        plt.close(fig)

    def test_y_axis_points_down(self):
        fig, ax = plt.subplots()
        render_mpl(wireframe_cube(0, 0), ax=ax)
        assert ax.get_ylim() == (400.0, 0.0)
        plt.close(fig)

    def test_returns_parent_figure_for_ax(self):
        fig, ax = plt.subplots()
        assert render_mpl(wireframe_cube(0, 0), ax=ax) is fig
        plt.close(fig)

    def test_ax_without_figure_raises(self):

        class _Detached:
            def get_figure(self):
                return None

        with pytest.raises(ValueError, match="not attached"):
            render_mpl(wireframe_cube(0, 0), ax=_Detached())  # type: ignore[arg-type]
