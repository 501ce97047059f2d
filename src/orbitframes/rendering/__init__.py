"""Rendering: primitive emitters, backface test, and matplotlib output."""

from orbitframes.rendering.emitters import compose, filled_polygon, polyline, segment
from orbitframes.rendering.static import render_mpl
from orbitframes.rendering.visibility import is_front_facing, signed_area

__all__ = [
    "compose",
    "filled_polygon",
    "is_front_facing",
    "polyline",
    "render_mpl",
    "segment",
    "signed_area",
]
