from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from orbitframes._constants import (
    CAMERA_DISTANCE,
    CANVAS_SIZE,
    FOCAL_LENGTH,
    MIN_DEPTH,
    POLE_THRESHOLD,
)
from orbitframes.model.vector import cross, normalise

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def clamp_elevation(elevation: float) -> float:
    """Clamp *elevation* (degrees) into ``[-90, 90]``."""
    return min(max(float(elevation), -90.0), 90.0)


@dataclass(frozen=True)
class OrbitCamera:
    """A perspective camera orbiting the world origin.

    The camera sits on a sphere of radius :attr:`distance` and always
    looks at the origin; there is no independent target.  Azimuth
    rotates the camera about the vertical (+y) axis and is periodic, so
    it is never wrapped explicitly.  Elevation tilts the camera above or
    below the horizon and is clamped to ``[-90, 90]``.

    Near the poles the usual world-up reference becomes parallel to the
    viewing direction.  For ``|elevation| > 89`` the reference vector is
    replaced by ``(-sin(az), 0, -cos(az))``, which keeps the right/up
    basis well conditioned and continuous with the surrounding views.

    Attributes:
        azimuth: Horizontal orbit angle in degrees.
        elevation: Vertical orbit angle in degrees.
        distance: Orbit radius in world units.
        focal_length: Perspective scale factor.
        canvas_size: Edge length of the square screen in pixels.

    Raises:
        ValueError: If an angle is not finite or a size is not positive.
    """

    azimuth: float = 0.0
    elevation: float = 0.0
    distance: float = CAMERA_DISTANCE
    focal_length: float = FOCAL_LENGTH
    canvas_size: float = CANVAS_SIZE

    def __post_init__(self) -> None:
        for name in ("azimuth", "elevation"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.distance <= 0:
            raise ValueError(f"distance must be positive, got {self.distance}")
        if self.focal_length <= 0:
            raise ValueError(
                f"focal_length must be positive, got {self.focal_length}"
            )
        if self.canvas_size <= 0:
            raise ValueError(
                f"canvas_size must be positive, got {self.canvas_size}"
            )

    @property
    def centre(self) -> float:
        """Screen coordinate of the canvas centre (same for x and y)."""
        return self.canvas_size / 2

    @property
    def position(self) -> np.ndarray:
        """Camera position in world coordinates, shape ``(3,)``."""
        az = math.radians(self.azimuth)
        el = math.radians(clamp_elevation(self.elevation))
        return np.array([
            self.distance * math.cos(el) * math.sin(az),
            self.distance * math.sin(el),
            self.distance * math.cos(el) * math.cos(az),
        ])

    def basis(self) -> np.ndarray:
        """Return the camera basis as a ``(3, 3)`` array.

        Rows are the *right*, *up* and *forward* unit vectors, so
        ``basis() @ (p - position)`` maps a world point into camera
        space.
        """
        forward = normalise(-self.position)
        if abs(clamp_elevation(self.elevation)) > POLE_THRESHOLD:
            az = math.radians(self.azimuth)
            reference = np.array([-math.sin(az), 0.0, -math.cos(az)])
        else:
            reference = _WORLD_UP
        right = normalise(cross(reference, forward))
        up = cross(forward, right)
        return np.array([right, up, forward])

    def to_camera_space(self, coords: np.ndarray) -> np.ndarray:
        """Map world coordinates of shape ``(n, 3)`` into camera space.

        Column 2 of the result is the depth along the viewing direction
        (larger = further from the camera).
        """
        coords = np.asarray(coords, dtype=float).reshape(-1, 3)
        return (coords - self.position) @ self.basis().T

    def project(self, coords: np.ndarray) -> np.ndarray:
        """Project world coordinates of shape ``(n, 3)`` to the screen.

        Depth is floored at :data:`MIN_DEPTH` so points at or behind the
        camera neither blow up nor flip sign.  Screen y grows downwards.

        Returns:
            Array of shape ``(n, 2)`` of pixel coordinates.
        """
        cam = self.to_camera_space(coords)
        depth = np.maximum(cam[:, 2], MIN_DEPTH)
        scale = self.focal_length / depth
        xy = np.empty((len(cam), 2))
        xy[:, 0] = self.centre + cam[:, 0] * scale
        xy[:, 1] = self.centre - cam[:, 1] * scale
        return xy


def project_points(
    coords: np.ndarray,
    azimuth: float,
    elevation: float,
    *,
    canvas_size: float = CANVAS_SIZE,
) -> np.ndarray:
    """Project *coords* as seen from an :class:`OrbitCamera`.

    Convenience wrapper for one-off projections; generators build a
    single camera and reuse it for every point of a frame.
    """
    camera = OrbitCamera(azimuth, elevation, canvas_size=canvas_size)
    return camera.project(coords)
