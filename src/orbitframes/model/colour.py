"""Colour values and their conversion to RGB tuples and SVG paint strings."""

from __future__ import annotations

from matplotlib.colors import to_hex, to_rgb

#: Any colour value orbitframes accepts: a CSS name or hex string
#: (``"red"``, ``"#818cf8"``, ``"#000"``), a grey level as a float in
#: ``[0, 1]``, or an ``(r, g, b)`` sequence with components in ``[0, 1]``.
Colour = str | float | tuple[float, float, float] | list[float]


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert any accepted colour value to an ``(r, g, b)`` float tuple.

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, str):
        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}") from None

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        rgb = tuple(float(c) for c in colour)
        for value in rgb:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"RGB component {value} outside [0, 1]")
        return rgb  # type: ignore[return-value]

    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        grey = float(colour)
        if not 0.0 <= grey <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {grey}")
        return (grey, grey, grey)

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def svg_colour(colour: Colour) -> str:
    """Return *colour* in a form suitable for an SVG paint attribute.

    Strings are validated and passed through unchanged so that hex
    shorthands such as ``"#000"`` appear verbatim in the output; other
    values are converted to a ``#rrggbb`` hex string.

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    rgb = normalise_colour(colour)
    if isinstance(colour, str):
        return colour
    return to_hex(rgb)
