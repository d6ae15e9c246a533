"""Plotly rendering of the scene and the info window next to it."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import plotly.graph_objects as go
from dash import html

from ..visualization.canvas import MARKER_EXTENT
from ..visualization.colors import hex_to_rgb
from ..visualization.renderer import render_scene
from . import theme

if TYPE_CHECKING:
    from ..explorer.session import ViewerSession
    from ..geometry import Pixel, Point

# Canvas shape name -> Plotly marker symbol
_SYMBOLS = {"circle": "circle", "square": "square", "triangle": "triangle-up"}


def _css(color: str) -> str:
    r, g, b = hex_to_rgb(color)
    return f"rgb({r},{g},{b})"


class PlotlyCanvas:
    """Canvas that assembles a ``go.Figure`` with axes pinned to pixels.

    Lines become layout shapes drawn below the data. Consecutive text
    labels and consecutive markers are each batched into one scatter
    trace, so labels and markers stack in the order they were drawn.
    """

    def __init__(self) -> None:
        self.clear(0, 0)

    def clear(self, width, height):
        self.width = width
        self.height = height
        self._shapes: List[dict] = []
        self._traces: List[go.Scatter] = []
        self._kind: str | None = None
        self._batch: dict | None = None

    def _start(self, kind: str, keys) -> dict:
        if self._kind != kind:
            self._flush()
            self._kind = kind
            self._batch = {k: [] for k in keys}
        return self._batch

    def _flush(self) -> None:
        if self._batch is None:
            return
        b = self._batch
        if self._kind == "text":
            self._traces.append(go.Scatter(
                x=b["x"],
                y=b["y"],
                mode="text",
                text=b["text"],
                showlegend=False,
                hoverinfo="skip",
                textposition="middle center",
                textfont=dict(family=theme.FONT_STACK, size=10, color=b["color"]),
            ))
        else:
            self._traces.append(go.Scatter(
                x=b["x"],
                y=b["y"],
                mode="markers",
                showlegend=False,
                hoverinfo="none",
                marker=dict(
                    symbol=b["symbol"],
                    size=b["size"],
                    color=b["fill"],
                    line=dict(color=b["stroke"], width=b["stroke_width"]),
                ),
            ))
        self._kind = None
        self._batch = None

    def line(self, x0, y0, x1, y1, *, color, width):
        self._shapes.append(dict(
            type="line", xref="x", yref="y", layer="below",
            x0=x0, y0=y0, x1=x1, y1=y1,
            line=dict(color=_css(color), width=width),
        ))

    def text(self, x, y, text, *, color):
        b = self._start("text", ("x", "y", "text", "color"))
        b["x"].append(x)
        b["y"].append(y)
        b["text"].append(text)
        b["color"].append(_css(color))

    def marker(self, x, y, shape, *, fill, stroke=None, stroke_width=0.0):
        b = self._start("marker", ("x", "y", "symbol", "size", "fill",
                                   "stroke", "stroke_width"))
        b["x"].append(x)
        b["y"].append(y)
        b["symbol"].append(_SYMBOLS.get(shape, "circle"))
        b["size"].append(2 * MARKER_EXTENT.get(shape, MARKER_EXTENT["circle"]))
        b["fill"].append(_css(fill))
        b["stroke"].append(_css(stroke) if stroke else "rgba(0,0,0,0)")
        b["stroke_width"].append(stroke_width if stroke else 0)

    def to_figure(self) -> go.Figure:
        self._flush()
        fig = go.Figure(data=self._traces)
        fig.update_layout(_base_layout(self.width, self.height))
        fig.update_layout(shapes=self._shapes)
        return fig


def _base_layout(width: int, height: int) -> dict:
    """Layout kwargs mapping axis units one-to-one onto pixels."""
    axis = dict(
        visible=False,
        showgrid=False,
        zeroline=False,
        fixedrange=True,
    )
    return dict(
        width=width,
        height=height,
        autosize=False,
        margin=dict(l=0, r=0, t=0, b=0),
        dragmode=False,
        hovermode="closest",
        clickmode="event",
        paper_bgcolor="white",
        plot_bgcolor="white",
        font=dict(family=theme.FONT_STACK, size=11, color=theme.BASE00),
        xaxis=dict(axis, range=[0, width]),
        yaxis=dict(axis, range=[height, 0]),
    )


def build_scene_figure(session: ViewerSession) -> go.Figure:
    """Render the session's current scene as a Plotly figure."""
    canvas = PlotlyCanvas()
    render_scene(
        canvas, session.dataset, session.mapper, session.view_state,
        session.config.colors, session.config.canvas.tick_step,
    )
    return canvas.to_figure()


def build_info_window(point: Point | None, anchor: Pixel | None) -> html.Div | None:
    """Floating details panel for the selected point, or ``None``."""
    if point is None or anchor is None:
        return None
    return html.Div(
        className="info-window",
        style={
            "position": "absolute",
            "left": f"{anchor[0] + theme.INFO_OFFSET}px",
            "top": f"{anchor[1] + theme.INFO_OFFSET}px",
            "background": "white",
            "color": "black",
            "padding": "8px",
            "border": "1px solid black",
            "borderRadius": "5px",
            "boxShadow": "2px 2px 10px rgba(0,0,0,0.3)",
            "zIndex": 1000,
            "pointerEvents": "none",
        },
        children=[
            html.P([html.Strong("Label:"), f" {point.label}"]),
            html.P([html.Strong("X:"), f" {point.x:.2f}"]),
            html.P([html.Strong("Y:"), f" {point.y:.2f}"]),
        ],
    )
