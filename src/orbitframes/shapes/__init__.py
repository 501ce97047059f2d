"""Procedural shapes: wireframe and filled generators plus the registry."""

from orbitframes.shapes.registry import (
    SHAPE_NAMES,
    ShapeGenerator,
    ShapeName,
    get_generator,
    render_shape,
)

__all__ = [
    "SHAPE_NAMES",
    "ShapeGenerator",
    "ShapeName",
    "get_generator",
    "render_shape",
]
