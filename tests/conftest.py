"""Shared test fixtures for orbitframes."""

import pytest

from orbitframes.grid import build_frame_grid
from orbitframes.model.style import FrameStyle


@pytest.fixture
def default_style():
    """Return a default FrameStyle."""
    return FrameStyle()


@pytest.fixture
def small_grid():
    """Return a 3-row, 4-column wireframe cube grid."""
    return build_frame_grid("Cube", cols=4, rows=3)
