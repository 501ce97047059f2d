from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from orbitframes._constants import CANVAS_SIZE, FACE_PALETTE
from orbitframes.model.colour import Colour, normalise_colour


@dataclass(frozen=True)
class FrameStyle:
    """Canvas and stroke/fill settings shared by every primitive of a frame.

    One style applies to a whole render; generators never vary it
    between primitives except where a shape draws secondary curves at
    :attr:`secondary_opacity`.

    Attributes:
        canvas_size: Edge length of the square canvas in pixels.  The
            camera projects onto the centre of this canvas.
        background: Canvas fill colour.
        stroke_colour: Line colour for wireframe primitives.
        stroke_width: Line width for wireframe primitives.
        outline_colour: Outline colour drawn around filled faces.
        palette: Fill colours cycled across faces of filled shapes.
            Must hold at least eight entries, since the cylinder caps
            use the seventh and eighth colours.
        secondary_opacity: Opacity of secondary wireframe curves (the
            around-ring curves of the torus).
    """

    canvas_size: int = CANVAS_SIZE
    background: Colour = "#0a0a14"
    stroke_colour: Colour = "#818cf8"
    stroke_width: float = 2.0
    outline_colour: Colour = "#000"
    palette: tuple[Colour, ...] = FACE_PALETTE
    secondary_opacity: float = 0.5

    def __post_init__(self) -> None:
        # Lists would make the style unhashable.
        for name in ("background", "stroke_colour", "outline_colour"):
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))
        object.__setattr__(self, "palette", tuple(
            tuple(c) if isinstance(c, list) else c for c in self.palette
        ))
        if self.canvas_size <= 0:
            raise ValueError(
                f"canvas_size must be positive, got {self.canvas_size}"
            )
        if self.stroke_width < 0:
            raise ValueError(
                f"stroke_width must be non-negative, got {self.stroke_width}"
            )
        if not 0.0 <= self.secondary_opacity <= 1.0:
            raise ValueError(
                f"secondary_opacity must be in [0, 1], "
                f"got {self.secondary_opacity}"
            )
        if len(self.palette) < len(FACE_PALETTE):
            raise ValueError(
                f"palette must have at least {len(FACE_PALETTE)} colours, "
                f"got {len(self.palette)}"
            )
        for colour in (self.background, self.stroke_colour,
                       self.outline_colour, *self.palette):
            normalise_colour(colour)

    def face_colour(self, index: int) -> Colour:
        """Return the palette colour for face *index*, cycling."""
        return self.palette[index % len(self.palette)]

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        d: dict = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value == f.default:
                continue
            if f.name == "palette":
                value = [_json_colour(c) for c in value]
            elif isinstance(value, (tuple, list)):
                value = list(value)
            d[f.name] = value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> FrameStyle:
        """Deserialise from a dictionary.  Unknown keys are ignored."""
        kwargs: dict = {}
        for f in dataclasses.fields(cls):
            if f.name not in d:
                continue
            val = d[f.name]
            if f.name == "palette":
                val = tuple(
                    tuple(c) if isinstance(c, list) else c for c in val
                )
            elif isinstance(val, list):
                val = tuple(val)
            kwargs[f.name] = val
        return cls(**kwargs)


def _json_colour(colour: Colour) -> Colour:
    if isinstance(colour, tuple):
        return list(colour)
    return colour
