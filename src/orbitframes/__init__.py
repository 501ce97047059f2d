"""orbitframes: procedural turntable previews of primitive solids.

orbitframes projects six primitive solids (cube, cylinder, sphere,
pyramid, torus, cone) through a camera orbiting the origin and emits
each view as a small vector drawing.  A frame grid covers every
azimuth and elevation, ready for sprite-sequence playback.

Example usage::

    from orbitframes import build_frame_grid, render_shape

    frame = render_shape("Cube", azimuth=30, elevation=20, filled=True)
    svg = frame.to_svg()

    grid = build_frame_grid("Torus", filled=True)   # 13 rows x 72 cols
    uris = grid.to_data_uris()
"""

from orbitframes.export import save_grid, save_svg, to_data_uri, to_svg
from orbitframes.grid import (
    FrameGrid,
    build_frame_grid,
    grid_azimuths,
    grid_elevations,
)
from orbitframes.model import (
    Colour,
    FrameStyle,
    OrbitCamera,
    Polygon,
    Polyline,
    RenderedFrame,
    Segment,
    normalise_colour,
    project_points,
)
from orbitframes.rendering.static import render_mpl
from orbitframes.shapes import (
    SHAPE_NAMES,
    ShapeName,
    get_generator,
    render_shape,
)
from orbitframes.styles import load_style, save_style

__all__ = [
    "Colour",
    "FrameGrid",
    "FrameStyle",
    "OrbitCamera",
    "Polygon",
    "Polyline",
    "RenderedFrame",
    "SHAPE_NAMES",
    "Segment",
    "ShapeName",
    "build_frame_grid",
    "get_generator",
    "grid_azimuths",
    "grid_elevations",
    "load_style",
    "normalise_colour",
    "project_points",
    "render_mpl",
    "render_shape",
    "save_grid",
    "save_style",
    "save_svg",
    "to_data_uri",
    "to_svg",
]
