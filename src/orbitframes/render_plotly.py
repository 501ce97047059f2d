"""Interactive plotly flip-book preview of a frame grid row."""

from __future__ import annotations

from orbitframes.grid import FrameGrid
from orbitframes.model.colour import normalise_colour
from orbitframes.model.frame import Polygon, Polyline, RenderedFrame, Segment


def _rgb_string(colour: str) -> str:
    """Convert a colour value to a plotly-compatible ``rgb(r,g,b)`` string."""
    r, g, b = normalise_colour(colour)
    return f"rgb({int(r * 255)}, {int(g * 255)}, {int(b * 255)})"


def _build_traces(frame: RenderedFrame) -> list:
    """Build plotly traces for a single frame.

    All stroked primitives sharing colour, width and opacity are merged
    into one trace (separated by ``None`` gaps); each filled polygon
    gets its own trace so it can carry its fill colour.
    """
    import plotly.graph_objects as go

    traces = []
    lines: dict[tuple[str, float, float], tuple[list, list]] = {}
    for prim in frame.primitives:
        if isinstance(prim, Polygon):
            xs = [p[0] for p in prim.points] + [prim.points[0][0]]
            ys = [p[1] for p in prim.points] + [prim.points[0][1]]
            traces.append(go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                fill="toself",
                fillcolor=_rgb_string(prim.fill),
                line=dict(color=_rgb_string(prim.stroke), width=prim.width),
                hoverinfo="skip",
            ))
            continue
        if isinstance(prim, Segment):
            points = (prim.start, prim.end)
            key = (prim.stroke, prim.width, 1.0)
        elif isinstance(prim, Polyline):
            points = prim.points
            key = (prim.stroke, prim.width, prim.opacity)
        else:
            raise TypeError(f"Cannot draw primitive of type {type(prim).__name__}")
        xs, ys = lines.setdefault(key, ([], []))
        xs.extend([p[0] for p in points] + [None])
        ys.extend([p[1] for p in points] + [None])

    for (stroke, width, opacity), (xs, ys) in lines.items():
        traces.append(go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            line=dict(color=_rgb_string(stroke), width=width),
            opacity=opacity,
            hoverinfo="skip",
        ))
    return traces


def render_plotly(
    grid: FrameGrid,
    *,
    row: int | None = None,
    duration: int = 50,
    width: int = 500,
    height: int = 500,
):
    """Render one row of a frame grid as an animated plotly figure.

    The animation steps through the row's columns, i.e. a full azimuth
    turn at a fixed elevation, with a slider and play/pause buttons.

    Args:
        grid: The frame grid to preview.
        row: Row (elevation sample) to animate.  ``None`` uses the
            middle row, which is the horizon for odd row counts.
        duration: Milliseconds per frame during playback.
        width: Figure width in pixels.
        height: Figure height in pixels.

    Returns:
        A plotly ``Figure`` object.

    Raises:
        ImportError: If plotly is not installed.
        IndexError: If *row* is out of range.
    """
    try:
        import plotly.graph_objects as go
    except ImportError:
        raise ImportError(
            "plotly is required for render_plotly(). "
            "Install it with: pip install plotly"
        )

    rows, cols = grid.shape
    idx = rows // 2 if row is None else row
    if not 0 <= idx < rows:
        raise IndexError(f"row {idx} out of range for grid with {rows} rows")
    frames = grid.frames[idx]

    fig = go.Figure(data=_build_traces(frames[0]))

    if cols > 1:
        animation_frames = [
            go.Frame(data=_build_traces(f), name=f"{az:g}")
            for f, az in zip(frames, grid.azimuths)
        ]
        fig.frames = animation_frames

        sliders = [dict(
            active=0,
            steps=[
                dict(
                    args=[[f.name], dict(frame=dict(duration=0, redraw=True), mode="immediate")],
                    label=f.name,
                    method="animate",
                )
                for f in animation_frames
            ],
            currentvalue=dict(prefix="Azimuth: "),
        )]

        updatemenus = [dict(
            type="buttons",
            showactive=False,
            buttons=[
                dict(
                    label="Play",
                    method="animate",
                    args=[None, dict(frame=dict(duration=duration, redraw=True), fromcurrent=True)],
                ),
                dict(
                    label="Pause",
                    method="animate",
                    args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate")],
                ),
            ],
        )]

        fig.update_layout(sliders=sliders, updatemenus=updatemenus)

    size = frames[0].size
    bg = _rgb_string(frames[0].background)
    fig.update_layout(
        xaxis=dict(range=[0, size], visible=False),
        yaxis=dict(range=[size, 0], visible=False, scaleanchor="x"),
        plot_bgcolor=bg,
        paper_bgcolor=bg,
        width=width,
        height=height,
        title=f"Elevation {grid.elevations[idx]:g}°",
        showlegend=False,
    )

    return fig
