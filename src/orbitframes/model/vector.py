"""Small 3D vector helpers used by the camera model."""

from __future__ import annotations

import numpy as np

_DEFAULT_DIRECTION = np.array([0.0, 0.0, 1.0])


def normalise(v: np.ndarray) -> np.ndarray:
    """Return *v* scaled to unit length.

    A zero-length vector has no direction, so ``(0, 0, 1)`` is returned
    instead of dividing by zero.
    """
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length > 0:
        return v / length
    return _DEFAULT_DIRECTION.copy()


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Cross product of two 3-vectors."""
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two 3-vectors."""
    return float(np.dot(a, b))
