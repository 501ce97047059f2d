"""Frame grids: one rendered frame per (elevation, azimuth) sample.

A grid is what a sprite-sequence turntable control plays back: dragging
horizontally steps through columns (azimuth), dragging vertically
through rows (elevation).
"""

from __future__ import annotations

import logging
import pickle
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from itertools import product

from orbitframes._constants import DEFAULT_COLS, DEFAULT_ROWS
from orbitframes.model.camera import clamp_elevation
from orbitframes.model.frame import RenderedFrame
from orbitframes.model.style import FrameStyle
from orbitframes.shapes.registry import ShapeGenerator, ShapeName, get_generator

logger = logging.getLogger(__name__)


def grid_elevations(rows: int) -> tuple[float, ...]:
    """Elevation (degrees) of each row, from -90 up to +90 inclusive.

    A single row sits on the horizon.
    """
    if rows < 1:
        raise ValueError(f"rows must be at least 1, got {rows}")
    if rows == 1:
        return (0.0,)
    return tuple(-90.0 + (i / (rows - 1)) * 180.0 for i in range(rows))


def grid_azimuths(cols: int) -> tuple[float, ...]:
    """Azimuth (degrees) of each column.

    Column 0 is 0 degrees and azimuth decreases with column index, so a
    rightward drag that advances the column turns the object the way
    the pointer moves.
    """
    if cols < 1:
        raise ValueError(f"cols must be at least 1, got {cols}")
    return tuple(-(j / cols) * 360.0 + 0.0 for j in range(cols))


@dataclass(frozen=True)
class FrameGrid:
    """A ``rows x cols`` array of frames covering the orbit sphere.

    Attributes:
        frames: ``frames[row][col]``; row 0 is the lowest elevation.
        elevations: Elevation of each row in degrees.
        azimuths: Azimuth of each column in degrees.
    """

    frames: tuple[tuple[RenderedFrame, ...], ...]
    elevations: tuple[float, ...]
    azimuths: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.frames) != len(self.elevations):
            raise ValueError(
                f"expected {len(self.elevations)} rows, got {len(self.frames)}"
            )
        for i, row in enumerate(self.frames):
            if len(row) != len(self.azimuths):
                raise ValueError(
                    f"row {i} has {len(row)} frames, "
                    f"expected {len(self.azimuths)}"
                )

    @property
    def shape(self) -> tuple[int, int]:
        """``(rows, cols)``."""
        return len(self.elevations), len(self.azimuths)

    def frame_at(self, row: int, col: int) -> RenderedFrame:
        return self.frames[row][col]

    def nearest_index(self, azimuth: float, elevation: float) -> tuple[int, int]:
        """Return ``(row, col)`` of the sample closest to an orientation.

        Azimuth wraps around; elevation is clamped to ``[-90, 90]``.
        """
        rows, cols = self.shape
        if rows == 1:
            row = 0
        else:
            row = round((clamp_elevation(elevation) + 90.0) / 180.0 * (rows - 1))
        col = round((-azimuth % 360.0) / 360.0 * cols) % cols
        return row, col

    def nearest(self, azimuth: float, elevation: float) -> RenderedFrame:
        """Return the frame closest to ``(azimuth, elevation)``."""
        row, col = self.nearest_index(azimuth, elevation)
        return self.frames[row][col]

    def to_data_uris(self) -> list[list[str]]:
        """Every frame as a base64 SVG data URI, in ``[row][col]`` order."""
        from orbitframes.export import to_data_uri

        return [[to_data_uri(f) for f in row] for row in self.frames]


def _render_cell(
    args: tuple[ShapeGenerator, float, float, FrameStyle | None],
) -> RenderedFrame:
    generator, azimuth, elevation, style = args
    return generator(azimuth, elevation, style=style)


def _check_picklable(generator: ShapeGenerator) -> None:
    """Raise if *generator* cannot be sent to worker processes."""
    try:
        pickle.dumps(generator)
    except (pickle.PicklingError, AttributeError, TypeError) as exc:
        name = getattr(generator, "__qualname__", repr(generator))
        raise ValueError(
            f"generator {name} cannot be pickled; max_workers > 1 needs a "
            "module-level generator function"
        ) from exc


def build_frame_grid(
    shape: ShapeName | str | Callable[..., RenderedFrame],
    filled: bool = False,
    cols: int = DEFAULT_COLS,
    rows: int = DEFAULT_ROWS,
    *,
    style: FrameStyle | None = None,
    max_workers: int | None = None,
) -> FrameGrid:
    """Render *shape* at every sample of a ``rows x cols`` orbit grid.

    Row ``i`` is elevation ``-90 + i / (rows - 1) * 180`` and column
    ``j`` is azimuth ``-(j / cols) * 360``.  With the defaults (72 x 13)
    that is one frame per 5 degrees of azimuth and 15 degrees of
    elevation, with row 6 on the horizon.

    Cells are independent.  With *max_workers* greater than 1 they are
    rendered in a process pool; the result is identical to the serial
    path.

    Example usage::

        grid = build_frame_grid("Torus", filled=True)
        grid.frame_at(6, 0).to_svg()

    Args:
        shape: A :class:`ShapeName`, its string value, or a generator
            callable ``(azimuth, elevation, *, style=None)``.
        filled: Use the filled generator when *shape* is a name.
        cols: Number of azimuth samples.
        rows: Number of elevation samples.
        style: Style applied to every frame.  ``None`` uses defaults.
        max_workers: Worker processes for parallel rendering.  ``None``
            or ``1`` renders serially in the calling process.

    Returns:
        A :class:`FrameGrid` of shape ``(rows, cols)``.

    Raises:
        ValueError: If *cols* or *rows* is less than 1, or if
            *max_workers* is greater than 1 and the generator cannot be
            pickled (lambdas and nested functions).
    """
    elevations = grid_elevations(rows)
    azimuths = grid_azimuths(cols)
    generator = shape if callable(shape) else get_generator(shape, filled)

    cells = [
        (generator, az, el, style)
        for el, az in product(elevations, azimuths)
    ]
    logger.debug(
        "Rendering %d x %d grid with %s (max_workers=%s)",
        rows, cols, getattr(generator, "__name__", generator), max_workers,
    )

    if max_workers is not None and max_workers > 1:
        _check_picklable(generator)
        with ProcessPoolExecutor(max_workers=max_workers) as pool:
            flat = list(pool.map(_render_cell, cells, chunksize=cols))
    else:
        flat = [_render_cell(cell) for cell in cells]

    frames = tuple(
        tuple(flat[r * cols:(r + 1) * cols]) for r in range(rows)
    )
    return FrameGrid(frames=frames, elevations=elevations, azimuths=azimuths)
