"""Tests for the animated plotly grid-row preview."""

import pytest

go = pytest.importorskip("plotly.graph_objects")

from orbitframes.grid import build_frame_grid
from orbitframes.render_plotly import render_plotly


class TestRenderPlotly:
    def test_returns_figure(self, small_grid):
        fig = render_plotly(small_grid)
        assert isinstance(fig, go.Figure)

    def test_one_animation_frame_per_column(self, small_grid):
        fig = render_plotly(small_grid)
        assert len(fig.frames) == 4
        assert [f.name for f in fig.frames] == ["0", "-90", "-180", "-270"]

    def test_segments_merged_into_one_trace(self, small_grid):
        fig = render_plotly(small_grid)
        assert len(fig.data) == 1

    def test_filled_one_trace_per_face(self):
        grid = build_frame_grid("Cube", filled=True, cols=2, rows=3)
        fig = render_plotly(grid, row=0)
        assert len(fig.data) == 1  # From directly below only the bottom face shows.
        assert fig.data[0].fill == "toself"

    def test_single_column_no_animation(self):
        grid = build_frame_grid("Torus", cols=1, rows=3)
        fig = render_plotly(grid)
        assert len(fig.frames) == 0

    def test_row_out_of_range(self, small_grid):
        with pytest.raises(IndexError):
            render_plotly(small_grid, row=3)
