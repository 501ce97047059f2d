"""Core data model for orbitframes: vectors, camera, colours, styles, frames.

Everything is re-exported here so that ``from orbitframes.model import
OrbitCamera`` works without knowing the submodule layout.
"""

from orbitframes.model.camera import OrbitCamera, clamp_elevation, project_points
from orbitframes.model.colour import Colour, normalise_colour, svg_colour
from orbitframes.model.frame import (
    Point2D,
    Polygon,
    Polyline,
    Primitive,
    RenderedFrame,
    Segment,
)
from orbitframes.model.style import FrameStyle
from orbitframes.model.vector import cross, dot, normalise

__all__ = [
    "Colour",
    "FrameStyle",
    "OrbitCamera",
    "Point2D",
    "Polygon",
    "Polyline",
    "Primitive",
    "RenderedFrame",
    "Segment",
    "clamp_elevation",
    "cross",
    "dot",
    "normalise",
    "normalise_colour",
    "project_points",
    "svg_colour",
]
