"""Shape names and lookup of their generator functions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from orbitframes.model.frame import RenderedFrame
from orbitframes.shapes.filled import (
    filled_cone,
    filled_cube,
    filled_cylinder,
    filled_pyramid,
    filled_sphere,
    filled_torus,
)
from orbitframes.shapes.wireframe import (
    wireframe_cone,
    wireframe_cube,
    wireframe_cylinder,
    wireframe_pyramid,
    wireframe_sphere,
    wireframe_torus,
)

logger = logging.getLogger(__name__)

#: ``generator(azimuth, elevation, *, style=None) -> RenderedFrame``
ShapeGenerator = Callable[..., RenderedFrame]


class ShapeName(StrEnum):
    """The fixed set of primitive solids.

    Attributes:
        CUBE: Axis-aligned cube.
        CYLINDER: Upright cylinder.
        SPHERE: Latitude/longitude sphere.
        PYRAMID: Square-based pyramid.
        TORUS: Ring torus lying in the horizontal plane.
        CONE: Upright cone.
    """

    CUBE = "Cube"
    CYLINDER = "Cylinder"
    SPHERE = "Sphere"
    PYRAMID = "Pyramid"
    TORUS = "Torus"
    CONE = "Cone"


SHAPE_NAMES: tuple[str, ...] = tuple(name.value for name in ShapeName)
"""Shape names in their canonical order."""

_WIREFRAME: dict[ShapeName, ShapeGenerator] = {
    ShapeName.CUBE: wireframe_cube,
    ShapeName.CYLINDER: wireframe_cylinder,
    ShapeName.SPHERE: wireframe_sphere,
    ShapeName.PYRAMID: wireframe_pyramid,
    ShapeName.TORUS: wireframe_torus,
    ShapeName.CONE: wireframe_cone,
}

_FILLED: dict[ShapeName, ShapeGenerator] = {
    ShapeName.CUBE: filled_cube,
    ShapeName.CYLINDER: filled_cylinder,
    ShapeName.SPHERE: filled_sphere,
    ShapeName.PYRAMID: filled_pyramid,
    ShapeName.TORUS: filled_torus,
    ShapeName.CONE: filled_cone,
}


def get_generator(name: ShapeName | str, filled: bool = False) -> ShapeGenerator:
    """Return the generator for shape *name* in wireframe or filled mode.

    Names are matched against the :class:`ShapeName` values
    (``"Cube"``, ``"Cylinder"``, ...).  An unrecognised name never
    raises: it resolves to the wireframe cube, whatever *filled* says,
    and a warning is logged.

    Args:
        name: A :class:`ShapeName` or its string value.
        filled: ``True`` for the colour-per-face generator, ``False``
            for the wireframe generator.

    Returns:
        A callable ``(azimuth, elevation, *, style=None)`` returning a
        :class:`~orbitframes.model.frame.RenderedFrame`.
    """
    try:
        shape = ShapeName(name)
    except ValueError:
        logger.warning("Unknown shape %r; falling back to wireframe cube", name)
        return wireframe_cube
    table = _FILLED if filled else _WIREFRAME
    return table[shape]


def render_shape(
    name: ShapeName | str,
    azimuth: float,
    elevation: float,
    *,
    filled: bool = False,
    **kwargs: object,
) -> RenderedFrame:
    """Render one frame of shape *name*; extra kwargs go to the generator."""
    return get_generator(name, filled)(azimuth, elevation, **kwargs)
