"""Rendered frames: an immutable scene graph of 2D vector primitives."""

from __future__ import annotations

from dataclasses import dataclass

Point2D = tuple[float, float]


def _fmt(value: float) -> str:
    """Format a coordinate or width for SVG output.

    Values are rounded to three decimals with trailing zeros removed;
    negative zero is printed as ``0``.
    """
    return f"{round(float(value), 3) + 0.0:.3f}".rstrip("0").rstrip(".")


def _path_data(points: tuple[Point2D, ...], closed: bool) -> str:
    d = " ".join(
        f"{'M' if i == 0 else 'L'}{_fmt(x)},{_fmt(y)}"
        for i, (x, y) in enumerate(points)
    )
    return d + "Z" if closed else d


@dataclass(frozen=True)
class Segment:
    """A straight stroked line between two screen points.

    Attributes:
        start: ``(x, y)`` of the first endpoint.
        end: ``(x, y)`` of the second endpoint.
        stroke: SVG stroke colour.
        width: Stroke width in pixels.
    """

    start: Point2D
    end: Point2D
    stroke: str
    width: float

    def to_svg(self) -> str:
        (x1, y1), (x2, y2) = self.start, self.end
        return (
            f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" '
            f'x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
            f'stroke="{self.stroke}" stroke-width="{_fmt(self.width)}" '
            f'stroke-linecap="round"/>'
        )


@dataclass(frozen=True)
class Polyline:
    """An unfilled stroked path through sampled screen points.

    Closed curves repeat their first sample as the last point.

    Attributes:
        points: Ordered ``(x, y)`` samples.
        stroke: SVG stroke colour.
        width: Stroke width in pixels.
        opacity: Whole-path opacity in ``[0, 1]``.
    """

    points: tuple[Point2D, ...]
    stroke: str
    width: float
    opacity: float = 1.0

    def to_svg(self) -> str:
        opacity = "" if self.opacity >= 1.0 else f' opacity="{_fmt(self.opacity)}"'
        return (
            f'<path d="{_path_data(self.points, closed=False)}" '
            f'stroke="{self.stroke}" stroke-width="{_fmt(self.width)}" '
            f'fill="none"{opacity}/>'
        )


@dataclass(frozen=True)
class Polygon:
    """A closed, filled and outlined polygon.

    Attributes:
        points: Vertices in winding order.
        fill: SVG fill colour.
        stroke: SVG outline colour.
        width: Outline width in pixels.
    """

    points: tuple[Point2D, ...]
    fill: str
    stroke: str
    width: float

    def to_svg(self) -> str:
        return (
            f'<path d="{_path_data(self.points, closed=True)}" '
            f'fill="{self.fill}" stroke="{self.stroke}" '
            f'stroke-width="{_fmt(self.width)}"/>'
        )


Primitive = Segment | Polyline | Polygon


@dataclass(frozen=True)
class RenderedFrame:
    """A self-contained vector drawing of one shape from one orientation.

    Frames are plain values: two frames built from the same inputs
    compare equal and serialise to identical SVG text, which lets
    callers cache them by their inputs.

    Attributes:
        size: Edge length of the square canvas in pixels.
        background: SVG fill colour of the canvas.
        primitives: Drawing primitives in paint order.
    """

    size: int
    background: str
    primitives: tuple[Primitive, ...] = ()

    def count(self, kind: type) -> int:
        """Return how many primitives are instances of *kind*."""
        return sum(1 for p in self.primitives if isinstance(p, kind))

    def to_svg(self) -> str:
        """Serialise the frame as a standalone SVG document."""
        size = _fmt(self.size)
        body = "".join(p.to_svg() for p in self.primitives)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" '
            f'height="{size}" viewBox="0 0 {size} {size}">'
            f'<rect width="{size}" height="{size}" fill="{self.background}"/>'
            f"{body}</svg>"
        )
