"""Screen-space winding test used for backface culling."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def signed_area(points: Sequence[Sequence[float]] | np.ndarray) -> float:
    """Return the z-component of ``(p1 - p0) x (p2 - p0)``.

    Only the first three points are used.  A positive value means the
    points turn counter-clockwise in the usual y-up sense of the cross
    product; on a y-down screen that order is drawn clockwise.
    """
    (x0, y0), (x1, y1), (x2, y2) = points[0], points[1], points[2]
    ax, ay = x1 - x0, y1 - y0
    bx, by = x2 - x0, y2 - y0
    return float(ax * by - ay * bx)


def is_front_facing(points: Sequence[Sequence[float]] | np.ndarray) -> bool:
    """Return ``True`` if a projected face winds towards the camera.

    Faces are defined so that their outward side projects with positive
    :func:`signed_area`; zero-area (edge-on) faces count as hidden.
    """
    return signed_area(points) > 0
