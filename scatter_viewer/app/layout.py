"""Dash layout: left sidebar (controls, legend), canvas, right sidebar."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from . import theme

if TYPE_CHECKING:
    from ..config import DatasetConfig
    from .app import ServerState

CLICK_PLAIN = "plain"
CLICK_MODIFIED = "modified"

# Legend glyph for each canvas shape
_GLYPHS = {"circle": "●", "square": "■", "triangle": "▲"}


def build_layout(state: ServerState) -> html.Div:
    """Return the complete app layout."""
    config = state.session.config
    canvas = config.canvas
    dataset_options = [
        {"label": ds.title, "value": key} for key, ds in config.datasets.items()
    ]

    return html.Div(
        className="app-container",
        style={
            "display": "flex",
            "backgroundColor": theme.BASE3,
            "fontFamily": theme.FONT_STACK,
            "color": theme.BASE00,
        },
        children=[
            # ── Left sidebar ──
            html.Div(
                className="left-sidebar",
                style={"width": theme.SIDEBAR_WIDTH, "padding": "12px",
                       "backgroundColor": theme.BASE2},
                children=[
                    html.Div("Scatter Viewer", className="sidebar-header"),
                    html.Label("Dataset"),
                    html.Div(
                        className="ctrl-row",
                        children=[
                            dcc.RadioItems(
                                id="dataset-toggle",
                                options=dataset_options,
                                value=state.session.requested_key,
                                inline=True,
                            ),
                        ],
                    ),
                    html.Label("Click Mode"),
                    html.Div(
                        className="ctrl-row",
                        children=[
                            dcc.RadioItems(
                                id="click-mode",
                                options=[
                                    {"label": "Quadrants", "value": CLICK_PLAIN},
                                    {"label": "Neighbors (Ctrl)", "value": CLICK_MODIFIED},
                                ],
                                value=CLICK_PLAIN,
                            ),
                        ],
                    ),
                    html.H4("Legend"),
                    html.Div(
                        id="legend",
                        children=build_legend(state.session.dataset.config,
                                              config.colors.default),
                    ),
                    html.Div(
                        id="status-bar",
                        className="sidebar-status",
                        style={"marginTop": "12px", "fontSize": "11px"},
                        children="",
                    ),
                ],
            ),
            # ── Canvas ──
            html.Div(
                className="main-area",
                style={"position": "relative", "width": f"{canvas.width}px",
                       "height": f"{canvas.height}px"},
                children=[
                    dcc.Graph(
                        id="scatter-canvas",
                        figure=state.figure,
                        config={"displayModeBar": False, "scrollZoom": False},
                        style={"width": f"{canvas.width}px",
                               "height": f"{canvas.height}px"},
                    ),
                    html.Div(id="info-window"),
                ],
            ),
            # ── Right sidebar ──
            html.Div(
                className="right-sidebar",
                style={"width": theme.RIGHT_SIDEBAR_WIDTH, "padding": "12px"},
                children=[
                    html.H4("Selection"),
                    html.Div(id="coords-display", className="coords-display",
                             children="Click a point"),
                    html.H4(
                        "Nearest Neighbors",
                        style={
                            "margin": "12px 0 6px 0",
                            "fontSize": "11px",
                            "fontWeight": "700",
                            "color": theme.BASE01,
                            "textTransform": "uppercase",
                            "letterSpacing": "0.5px",
                        },
                    ),
                    html.Div(id="neighbors-list"),
                ],
            ),
        ],
    )


def build_legend(dataset: DatasetConfig, color: str) -> list:
    """One row per label of *dataset*, drawn with its marker shape."""
    if not dataset.shape_map:
        return [html.Div("No labels configured", style={"color": theme.BASE1})]
    return [
        html.Div(
            className="legend-item",
            children=[
                html.Span(_GLYPHS.get(shape, _GLYPHS["circle"]),
                          style={"color": color, "marginRight": "6px"}),
                html.Span(f"Label: {label}"),
            ],
        )
        for label, shape in dataset.shape_map.items()
    ]
