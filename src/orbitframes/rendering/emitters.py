"""Primitive emitters: projected screen points to frame primitives.

Emitters never see world coordinates.  Shapes project through an
:class:`~orbitframes.model.camera.OrbitCamera` first and hand the 2D
results here, so every shape shares the same camera behaviour.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from orbitframes.model.colour import Colour, svg_colour
from orbitframes.model.frame import (
    Point2D,
    Polygon,
    Polyline,
    Primitive,
    RenderedFrame,
    Segment,
)
from orbitframes.model.style import FrameStyle


def _points(points: Sequence[Sequence[float]] | np.ndarray) -> tuple[Point2D, ...]:
    return tuple((float(x), float(y)) for x, y in points)


def segment(
    start: Sequence[float],
    end: Sequence[float],
    style: FrameStyle,
) -> Segment:
    """Stroked line between two projected points."""
    return Segment(
        start=(float(start[0]), float(start[1])),
        end=(float(end[0]), float(end[1])),
        stroke=svg_colour(style.stroke_colour),
        width=style.stroke_width,
    )


def polyline(
    points: Sequence[Sequence[float]] | np.ndarray,
    style: FrameStyle,
    *,
    opacity: float = 1.0,
) -> Polyline:
    """Unfilled path through projected curve samples."""
    return Polyline(
        points=_points(points),
        stroke=svg_colour(style.stroke_colour),
        width=style.stroke_width,
        opacity=opacity,
    )


def filled_polygon(
    points: Sequence[Sequence[float]] | np.ndarray,
    colour: Colour,
    style: FrameStyle,
    *,
    outline_width: float,
) -> Polygon:
    """Closed polygon filled with *colour* and outlined in the style's outline colour."""
    return Polygon(
        points=_points(points),
        fill=svg_colour(colour),
        stroke=svg_colour(style.outline_colour),
        width=outline_width,
    )


def compose(primitives: Iterable[Primitive], style: FrameStyle) -> RenderedFrame:
    """Wrap *primitives* on a background canvas as a :class:`RenderedFrame`."""
    return RenderedFrame(
        size=style.canvas_size,
        background=svg_colour(style.background),
        primitives=tuple(primitives),
    )
