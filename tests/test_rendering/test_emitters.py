"""Tests for primitive emitters."""

import numpy as np

from orbitframes.model.frame import Polygon, Polyline, RenderedFrame, Segment
from orbitframes.model.style import FrameStyle
from orbitframes.rendering.emitters import compose, filled_polygon, polyline, segment


class TestEmitters:
    def test_segment_uses_stroke_style(self, default_style):
        seg = segment(np.array([1.0, 2.0]), np.array([3.0, 4.0]), default_style)
        assert seg == Segment((1.0, 2.0), (3.0, 4.0), "#818cf8", 2.0)

    def test_segment_points_are_python_floats(self, default_style):
        seg = segment(np.array([1.0, 2.0]), np.array([3.0, 4.0]), default_style)
        assert type(seg.start[0]) is float

    def test_polyline(self, default_style):
        pts = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
        line = polyline(pts, default_style, opacity=0.5)
        assert isinstance(line, Polyline)
        assert line.points == ((0.0, 0.0), (1.0, 1.0), (2.0, 0.0))
        assert line.opacity == 0.5

    def test_filled_polygon(self, default_style):
        pts = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
        poly = filled_polygon(pts, (0.0, 1.0, 0.0), default_style, outline_width=0.5)
        assert poly == Polygon(tuple(pts), "#00ff00", "#000", 0.5)

    def test_custom_style_colours(self):
        style = FrameStyle(stroke_colour="white", stroke_width=1.0)
        seg = segment((0.0, 0.0), (1.0, 1.0), style)
        assert seg.stroke == "white"
        assert seg.width == 1.0

    def test_compose(self, default_style):
        seg = segment((0.0, 0.0), (1.0, 1.0), default_style)
        frame = compose(iter([seg, seg]), default_style)
        assert isinstance(frame, RenderedFrame)
        assert frame.size == 400
        assert frame.background == "#0a0a14"
        assert frame.primitives == (seg, seg)
