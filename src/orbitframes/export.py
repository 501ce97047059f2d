"""Packaging of rendered frames: SVG text, data URIs and files on disk."""

from __future__ import annotations

import base64
import logging
from pathlib import Path

from orbitframes.grid import FrameGrid
from orbitframes.model.frame import RenderedFrame

logger = logging.getLogger(__name__)

_DATA_URI_PREFIX = "data:image/svg+xml;base64,"


def to_svg(frame: RenderedFrame) -> str:
    """Serialise *frame* as a standalone SVG document."""
    return frame.to_svg()


def to_data_uri(frame: RenderedFrame) -> str:
    """Encode *frame* as a ``data:image/svg+xml;base64,...`` URI.

    This is the form an ``<img src=...>`` element can display directly.
    """
    payload = base64.b64encode(frame.to_svg().encode("utf-8")).decode("ascii")
    return _DATA_URI_PREFIX + payload


def save_svg(frame: RenderedFrame, path: str | Path) -> Path:
    """Write *frame* to *path* as SVG and return the path."""
    path = Path(path)
    path.write_text(frame.to_svg(), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path


def save_grid(
    grid: FrameGrid,
    directory: str | Path,
    *,
    prefix: str = "frame",
) -> list[list[Path]]:
    """Write every frame of *grid* into *directory* as SVG files.

    Files are named ``{prefix}_r{row:02d}_c{col:02d}.svg``.  The
    directory is created if needed.

    Returns:
        Written paths in ``[row][col]`` order.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    paths: list[list[Path]] = []
    for r, row in enumerate(grid.frames):
        row_paths = []
        for c, frame in enumerate(row):
            path = directory / f"{prefix}_r{r:02d}_c{c:02d}.svg"
            path.write_text(frame.to_svg(), encoding="utf-8")
            row_paths.append(path)
        paths.append(row_paths)
    rows, cols = grid.shape
    logger.info("Wrote %d frames to %s", rows * cols, directory)
    return paths
