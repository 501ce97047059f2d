"""Wireframe generators: edge and curve renderings of the six solids.

Every generator has the signature
``(azimuth, elevation, *, style=None) -> RenderedFrame`` and rebuilds
its geometry from scratch on each call; nothing is cached between
calls.
"""

from __future__ import annotations

import numpy as np

from orbitframes.model.camera import OrbitCamera
from orbitframes.model.frame import Primitive, RenderedFrame
from orbitframes.model.style import FrameStyle
from orbitframes.rendering.emitters import compose, polyline, segment
from orbitframes.shapes.geometry import (
    CUBE_EDGES,
    CUBE_VERTICES,
    circle_angles,
    ring,
    torus_points,
)

_DEFAULT_STYLE = FrameStyle()

# Samples per closed ring.
_RING_SEGMENTS = 24


def _camera(azimuth: float, elevation: float, style: FrameStyle) -> OrbitCamera:
    return OrbitCamera(azimuth, elevation, canvas_size=style.canvas_size)


def wireframe_cube(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Cube of half-extent 80 drawn as its 12 edges."""
    style = style or _DEFAULT_STYLE
    xy = _camera(azimuth, elevation, style).project(CUBE_VERTICES)
    return compose((segment(xy[i], xy[j], style) for i, j in CUBE_EDGES), style)


def wireframe_cylinder(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Cylinder (radius 70, half-height 80): two rings and 8 struts."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    radius, half_height = 70.0, 80.0
    angles = circle_angles(_RING_SEGMENTS)

    prims: list[Primitive] = [
        polyline(camera.project(ring(-half_height, radius, angles)), style),
        polyline(camera.project(ring(half_height, radius, angles)), style),
    ]
    struts = circle_angles(8, closed=False)
    low = camera.project(ring(-half_height, radius, struts))
    high = camera.project(ring(half_height, radius, struts))
    prims.extend(segment(a, b, style) for a, b in zip(low, high))
    return compose(prims, style)


def wireframe_sphere(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Sphere (radius 80): 5 latitude rings and 8 meridians."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    radius = 80.0
    prims: list[Primitive] = []

    # Latitudes, poles excluded.
    lat_angles = circle_angles(32)
    for i in range(1, 6):
        y = (i / 6 - 0.5) * 2 * radius
        r = np.sqrt(radius * radius - y * y)
        prims.append(polyline(camera.project(ring(y, r, lat_angles)), style))

    # Meridians: half circles from the south pole to the north pole.
    phi = np.arange(25) / 24 * np.pi
    for i in range(8):
        a = i / 8 * np.pi
        pts = np.column_stack([
            np.sin(phi) * np.cos(a) * radius,
            -np.cos(phi) * radius,
            np.sin(phi) * np.sin(a) * radius,
        ])
        prims.append(polyline(camera.project(pts), style))
    return compose(prims, style)


def wireframe_pyramid(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Square pyramid: 4 base edges and 4 edges up to the apex."""
    style = style or _DEFAULT_STYLE
    s, h = 80.0, 100.0
    verts = np.array([
        [-s, h / 2, -s], [s, h / 2, -s], [s, h / 2, s], [-s, h / 2, s],
        [0.0, -h, 0.0],
    ])
    xy = _camera(azimuth, elevation, style).project(verts)
    base, apex = xy[:4], xy[4]
    prims = [segment(base[i], base[(i + 1) % 4], style) for i in range(4)]
    prims.extend(segment(base[i], apex, style) for i in range(4))
    return compose(prims, style)


def wireframe_torus(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Torus (major 70, minor 25): 12 tube sections and 16 faded ring curves."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    major, minor = 70.0, 25.0
    prims: list[Primitive] = []

    tube = circle_angles(16)
    for i in range(12):
        theta = i / 12 * 2 * np.pi
        pts = torus_points(theta, tube, major, minor)
        prims.append(polyline(camera.project(pts), style))

    around = circle_angles(_RING_SEGMENTS)
    for i in range(16):
        phi = i / 16 * 2 * np.pi
        pts = torus_points(around, phi, major, minor)
        prims.append(
            polyline(camera.project(pts), style, opacity=style.secondary_opacity)
        )
    return compose(prims, style)


def wireframe_cone(
    azimuth: float, elevation: float, *, style: FrameStyle | None = None,
) -> RenderedFrame:
    """Cone (radius 70, height 120): base ring and 12 struts to the apex."""
    style = style or _DEFAULT_STYLE
    camera = _camera(azimuth, elevation, style)
    radius, height = 70.0, 120.0

    prims: list[Primitive] = [
        polyline(
            camera.project(ring(height / 2, radius, circle_angles(_RING_SEGMENTS))),
            style,
        ),
    ]
    base = camera.project(ring(height / 2, radius, circle_angles(12, closed=False)))
    apex = camera.project(np.array([[0.0, -height / 2, 0.0]]))[0]
    prims.extend(segment(p, apex, style) for p in base)
    return compose(prims, style)
