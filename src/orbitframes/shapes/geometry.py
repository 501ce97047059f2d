"""World-space geometry shared by the wireframe and filled shapes.

All shapes are centred on the origin with +y as the vertical axis.
Parametric helpers return ``(n, 3)`` arrays ready for
:meth:`OrbitCamera.project`.
"""

from __future__ import annotations

import numpy as np

CUBE_HALF_EXTENT = 80.0

# Corner order: the z = -s square (0-3), then the z = +s square (4-7),
# each running (-,-), (+,-), (+,+), (-,+) in (x, y).
CUBE_VERTICES = np.array([
    [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1],
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
], dtype=float) * CUBE_HALF_EXTENT

CUBE_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

# Wound so the outward side projects with positive signed area.
CUBE_FACES: tuple[tuple[int, ...], ...] = (
    (0, 3, 2, 1),  # z = -s
    (4, 5, 6, 7),  # z = +s
    (0, 4, 7, 3),  # x = -s
    (1, 2, 6, 5),  # x = +s
    (3, 7, 6, 2),  # y = +s
    (0, 1, 5, 4),  # y = -s
)


def circle_angles(segments: int, *, closed: bool = True) -> np.ndarray:
    """Evenly spaced angles around a full turn.

    With *closed* the first angle is repeated at ``2*pi`` so a curve
    drawn through the samples ends where it started.
    """
    n = segments + 1 if closed else segments
    return np.arange(n) / segments * 2 * np.pi


def ring(y: float, radius: float, angles: np.ndarray) -> np.ndarray:
    """Points on a horizontal circle of *radius* at height *y*."""
    return np.column_stack([
        np.cos(angles) * radius,
        np.full(len(angles), y),
        np.sin(angles) * radius,
    ])


def sphere_point(phi: float, theta: float, radius: float) -> np.ndarray:
    """Point at polar angle *phi* (from +y) and azimuth *theta*."""
    return np.array([
        np.sin(phi) * np.cos(theta) * radius,
        np.cos(phi) * radius,
        np.sin(phi) * np.sin(theta) * radius,
    ])


def torus_points(
    theta: np.ndarray | float,
    phi: np.ndarray | float,
    major: float,
    minor: float,
) -> np.ndarray:
    """Torus surface points; *theta* goes around the ring, *phi* around the tube.

    Either angle may be an array; the result has shape ``(n, 3)``.
    """
    theta, phi = np.broadcast_arrays(
        np.atleast_1d(np.asarray(theta, dtype=float)),
        np.atleast_1d(np.asarray(phi, dtype=float)),
    )
    rho = major + minor * np.cos(phi)
    return np.column_stack([
        rho * np.cos(theta),
        minor * np.sin(phi),
        rho * np.sin(theta),
    ])
