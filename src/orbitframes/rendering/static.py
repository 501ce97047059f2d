"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from itertools import groupby
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure

from orbitframes.model.colour import normalise_colour
from orbitframes.model.frame import Polygon, Polyline, RenderedFrame, Segment


def _points_per_pixel(ax: Axes, frame: RenderedFrame) -> float:
    """Scale from canvas pixels to matplotlib points for this axes."""
    fig = ax.get_figure()
    width_in = fig.get_figwidth() * ax.get_position().width
    return width_in * 72.0 / frame.size


def _draw_frame(ax: Axes, frame: RenderedFrame) -> None:
    """Draw every primitive of *frame* into *ax* in paint order.

    Consecutive primitives of the same kind are batched into a single
    collection; successive batches get increasing z-order so the SVG
    paint order is preserved.
    """
    ax.set_facecolor(normalise_colour(frame.background))
    scale = _points_per_pixel(ax, frame)

    for zorder, (kind, group) in enumerate(groupby(frame.primitives, type)):
        items = list(group)
        if kind is Polygon:
            coll = PolyCollection(
                [p.points for p in items],
                facecolors=[normalise_colour(p.fill) for p in items],
                edgecolors=[normalise_colour(p.stroke) for p in items],
                linewidths=[p.width * scale for p in items],
                closed=True,
            )
        elif kind is Segment:
            coll = LineCollection(
                [(p.start, p.end) for p in items],
                colors=[normalise_colour(p.stroke) for p in items],
                linewidths=[p.width * scale for p in items],
                capstyle="round",
            )
        elif kind is Polyline:
            coll = LineCollection(
                [p.points for p in items],
                colors=[to_rgba(normalise_colour(p.stroke), p.opacity) for p in items],
                linewidths=[p.width * scale for p in items],
            )
        else:
            raise TypeError(f"Cannot draw primitive of type {kind.__name__}")
        coll.set_zorder(zorder + 1)
        ax.add_collection(coll)

    # Screen convention: origin top-left, y down.
    ax.set_xlim(0, frame.size)
    ax.set_ylim(frame.size, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)


def render_mpl(
    frame: RenderedFrame,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (4.0, 4.0),
    dpi: int = 100,
    show: bool | None = None,
) -> Figure:
    """Render a frame as a static matplotlib figure.

    Useful for rasterising frames (``.png``) or placing several
    orientations side by side in one figure.

    Example usage::

        from orbitframes import render_shape
        from orbitframes.rendering.static import render_mpl

        frame = render_shape("Cube", 30, 20, filled=True)
        render_mpl(frame, "cube.png")

        # Several views in one figure:
        fig, axes = plt.subplots(1, 3)
        for ax, az in zip(axes, (0, 45, 90)):
            render_mpl(render_shape("Torus", az, 30), ax=ax)

    Args:
        frame: The frame to draw.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is provided.
        ax: Optional matplotlib :class:`~matplotlib.axes.Axes` to draw
            into.  The caller keeps control of the parent figure; the
            *output*, *figsize*, *dpi*, and *show* parameters are
            ignored.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``, ``False`` when saving to a file.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_frame(ax, frame)
        return fig

    fig = plt.figure(figsize=figsize, dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    fig.set_facecolor(normalise_colour(frame.background))
    _draw_frame(ax, frame)

    if output is not None:
        fig.savefig(str(output), dpi=dpi, facecolor=fig.get_facecolor())

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
