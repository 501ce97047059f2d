"""Frame style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from orbitframes.model.style import FrameStyle

_VALID_SECTIONS = frozenset({"frame_style"})


def save_style(path: str | Path, style: FrameStyle) -> None:
    """Save a frame style to a JSON file.

    Only fields that differ from the defaults are written.  The file is
    human-readable with two-space indentation.

    Args:
        path: Destination file path.
        style: The style to save.
    """
    data = {"frame_style": style.to_dict()}
    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_style(path: str | Path) -> FrameStyle:
    """Load a frame style from a JSON file.

    A file without a ``"frame_style"`` section yields the default style.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`FrameStyle`.

    Raises:
        ValueError: If the file contains unknown top-level keys or
            invalid style values.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )
    return FrameStyle.from_dict(data.get("frame_style", {}))
