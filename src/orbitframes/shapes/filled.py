"""Filled generators: colour-per-face renderings with backface culling.

Each face is projected and kept only if its first three screen vertices
wind counter-clockwise (see :func:`~orbitframes.rendering.visibility.is_front_facing`).
Faces are painted in definition order with no depth sort.  Culling
alone resolves visibility for convex solids only; the torus keeps this
rule as well, and any new non-convex mesh needs a painter's sort or a
depth buffer rather than these helpers.

Face winding is fixed by construction.  Parametric caps depend on the
loop direction: the cone's base and the cylinder's y = -h cap loop in
ascending angle, the cylinder's y = +h cap in descending angle.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from orbitframes.model.camera import OrbitCamera
from orbitframes.model.colour import Colour
from orbitframes.model.frame import Polygon, RenderedFrame
from orbitframes.model.style import FrameStyle
from orbitframes.rendering.emitters import compose, filled_polygon
from orbitframes.rendering.visibility import is_front_facing
from orbitframes.shapes.geometry import (
    CUBE_FACES,
    CUBE_VERTICES,
    circle_angles,
    ring,
    sphere_point,
    torus_points,
)

_DEFAULT_STYLE = FrameStyle()

# Side panels cycle through the first six palette entries; caps use the
# seventh and eighth.
_SIDE_COLOURS = 6
_CAP_COLOUR = 6
_SECOND_CAP_COLOUR = 7

_SEGMENTS = 16


def _camera(azimuth: float, elevation: float, style: FrameStyle) -> OrbitCamera:
    return OrbitCamera(azimuth, elevation, canvas_size=style.canvas_size)


def _face(
    xy: np.ndarray,
    colour: Colour,
    style: FrameStyle,
    width: float,
) -> Polygon | None:
    """Return a filled polygon for projected face *xy*, or ``None`` if it faces away."""
    if not is_front_facing(xy):
        return None
    return filled_polygon(xy, colour, style, outline_width=width)


def _indexed_faces(
    camera: OrbitCamera,
    vertices: np.ndarray,
    faces: Sequence[Sequence[int]],
    style: FrameStyle,
    width: float,
) -> Iterable[Polygon | None]:
    xy = camera.project(vertices)
    for k, face in enumerate(faces):
        yield _face(xy[list(face)], style.face_colour(k), style, width)


def _visible(polys: Iterable[Polygon | None]) -> list[Polygon]:
    return [p for p in polys if p is not None]


def filled_cube(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Cube with one palette colour per face."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    polys = _indexed_faces(camera, CUBE_VERTICES, CUBE_FACES, style, 1.0)
    return compose(_visible(polys), style)


def filled_pyramid(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Square pyramid, apex up, with four sides and a base."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    s, h = 80.0, 100.0
    verts = np.array([
        [0.0, h, 0.0],
        [-s, -h / 2, -s], [s, -h / 2, -s], [s, -h / 2, s], [-s, -h / 2, s],
    ])
    faces = ((0, 2, 1), (0, 3, 2), (0, 4, 3), (0, 1, 4), (1, 2, 3, 4))
    polys = _indexed_faces(camera, verts, faces, style, 1.0)
    return compose(_visible(polys), style)


def filled_cylinder(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Cylinder of 16 side panels plus two caps."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    radius, h = 70.0, 80.0
    width = 0.5
    angles = circle_angles(_SEGMENTS)
    low = camera.project(ring(-h, radius, angles))
    high = camera.project(ring(h, radius, angles))

    polys: list[Polygon | None] = []
    for i in range(_SEGMENTS):
        quad = np.array([low[i], high[i], high[i + 1], low[i + 1]])
        polys.append(_face(quad, style.face_colour(i % _SIDE_COLOURS), style, width))

    polys.append(_face(low[:-1], style.face_colour(_CAP_COLOUR), style, width))
    polys.append(
        _face(high[-2::-1], style.face_colour(_SECOND_CAP_COLOUR), style, width)
    )
    return compose(_visible(polys), style)


def filled_cone(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Cone, apex up, of 16 triangular sides plus a base cap."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    radius, h = 70.0, 100.0
    width = 0.5
    base = camera.project(ring(-h / 2, radius, circle_angles(_SEGMENTS)))
    apex = camera.project(np.array([[0.0, h / 2, 0.0]]))[0]

    polys: list[Polygon | None] = []
    for i in range(_SEGMENTS):
        tri = np.array([apex, base[i + 1], base[i]])
        polys.append(_face(tri, style.face_colour(i % _SIDE_COLOURS), style, width))

    polys.append(_face(base[:-1], style.face_colour(_CAP_COLOUR), style, width))
    return compose(_visible(polys), style)


def filled_sphere(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """UV sphere of 8 latitude by 12 longitude bands, triangle fans at the poles."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    radius, lat_segs, lon_segs = 80.0, 8, 12
    width = 0.3

    def project(phi: float, theta: float) -> np.ndarray:
        return camera.project(sphere_point(phi, theta, radius))[0]

    thetas = [lon / lon_segs * 2 * np.pi for lon in range(lon_segs + 1)]
    polys: list[Polygon | None] = []
    north, south = camera.project(
        np.array([[0.0, radius, 0.0], [0.0, -radius, 0.0]])
    )

    phi = np.pi / lat_segs
    for lon in range(lon_segs):
        p1, p2 = project(phi, thetas[lon]), project(phi, thetas[lon + 1])
        tri = np.array([north, p2, p1])
        polys.append(_face(tri, style.face_colour(lon % _SIDE_COLOURS), style, width))

    for lat in range(1, lat_segs - 1):
        phi1 = lat / lat_segs * np.pi
        phi2 = (lat + 1) / lat_segs * np.pi
        for lon in range(lon_segs):
            t1, t2 = thetas[lon], thetas[lon + 1]
            quad = np.array([
                project(phi1, t1), project(phi1, t2),
                project(phi2, t2), project(phi2, t1),
            ])
            colour = style.face_colour((lat + lon) % _SIDE_COLOURS)
            polys.append(_face(quad, colour, style, width))

    phi = (lat_segs - 1) / lat_segs * np.pi
    for lon in range(lon_segs):
        p1, p2 = project(phi, thetas[lon]), project(phi, thetas[lon + 1])
        tri = np.array([south, p1, p2])
        polys.append(_face(tri, style.face_colour(lon % _SIDE_COLOURS), style, width))
    return compose(_visible(polys), style)


def filled_torus(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Torus (major 60, minor 25) of 16 ring by 12 tube quads."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    major, minor = 60.0, 25.0
    ring_segs, tube_segs = 16, 12
    width = 0.3

    thetas = circle_angles(ring_segs)
    phis = circle_angles(tube_segs)
    t, p = np.meshgrid(thetas, phis, indexing="ij")
    grid = camera.project(
        torus_points(t.ravel(), p.ravel(), major, minor)
    ).reshape(ring_segs + 1, tube_segs + 1, 2)

    polys: list[Polygon | None] = []
    for i in range(ring_segs):
        for j in range(tube_segs):
            quad = np.array([
                grid[i, j], grid[i + 1, j], grid[i + 1, j + 1], grid[i, j + 1],
            ])
            colour = style.face_colour((i + j) % _SIDE_COLOURS)
            polys.append(_face(quad, colour, style, width))
    return compose(_visible(polys), style)
