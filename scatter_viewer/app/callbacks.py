"""All Dash callbacks for the scatter viewer app."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import Input, Output, State, html, no_update
from dash.exceptions import PreventUpdate

from ..io import DatasetLoadError
from ..neighbors import distances
from . import theme
from .figures import build_info_window
from .layout import CLICK_MODIFIED, build_legend

if TYPE_CHECKING:
    from .app import ServerState

# Outputs shared by the dataset and click callbacks, in this order
_SCENE_OUTPUTS = [
    ("scatter-canvas", "figure"),
    ("info-window", "children"),
    ("coords-display", "children"),
    ("neighbors-list", "children"),
    ("status-bar", "children"),
]


def _status_text(state: ServerState, error: str | None = None):
    if error:
        return html.Span(error, style={"color": theme.RED})
    session = state.session
    ds = session.dataset
    return f"{len(ds.points):,} points · {ds.config.title} · {session.view_state.mode}"


def _coords_text(state: ServerState) -> str:
    selected = state.session.view_state.selected
    if selected is None:
        return "Click a point"
    return f"{selected.label} ({selected.x:.2f}, {selected.y:.2f})"


def _neighbor_rows(state: ServerState):
    view = state.session.view_state
    if not view.neighbors:
        return []
    colors = state.session.config.colors
    rows = []
    for rank, (point, dist) in enumerate(
        zip(view.neighbors, distances(view.selected, view.neighbors)), start=1
    ):
        rows.append(
            html.Div(
                className="nn-row",
                children=[
                    html.Span(className="color-dot",
                              style={"backgroundColor": colors.neighbor}),
                    html.Span(f"#{rank}", className="nn-field"),
                    html.Span(point.label, className="nn-field"),
                    html.Span(f"({point.x:.2f}, {point.y:.2f})", className="nn-field"),
                    html.Span(f"{dist:.3f}", className="nn-dist"),
                ],
            )
        )
    return rows


def scene_outputs(state: ServerState, error: str | None = None) -> tuple:
    """Values for :data:`_SCENE_OUTPUTS` from the current session."""
    view = state.session.view_state
    return (
        state.figure,
        build_info_window(view.selected, view.anchor),
        _coords_text(state),
        _neighbor_rows(state),
        _status_text(state, error),
    )


def switch_dataset(state: ServerState, key: str) -> tuple:
    """Load *key* into the session; load errors end up in the status bar."""
    error = None
    try:
        state.session.load(key)
    except DatasetLoadError as exc:
        error = f"Load failed: {exc}"
    legend = build_legend(state.session.dataset.config,
                          state.session.config.colors.default)
    return (*scene_outputs(state, error), legend)


def handle_click(state: ServerState, click_data: dict | None, click_mode: str) -> tuple:
    """Apply a Plotly click to the session.

    Plotly reports the centre of the clicked marker, not the pointer, in
    axis units, which are canvas pixels here. That centre is both the
    picked pixel and the info-window anchor. The trailing ``None`` clears
    ``clickData`` so a second click on the same marker fires again.
    """
    if not click_data or not click_data.get("points"):
        raise PreventUpdate
    point = click_data["points"][0]
    if "x" not in point or "y" not in point:
        raise PreventUpdate

    pixel = (float(point["x"]), float(point["y"]))
    changed = state.session.click(pixel, modified=click_mode == CLICK_MODIFIED)
    if not changed:
        return (*[no_update] * len(_SCENE_OUTPUTS), None)
    return (*scene_outputs(state), None)


def register(app):
    """Register all callbacks on the Dash app instance."""

    # ------------------------------------------------------------------ #
    #  Dataset toggle (also performs the initial load)
    # ------------------------------------------------------------------ #

    @app.callback(
        *[Output(cid, prop) for cid, prop in _SCENE_OUTPUTS],
        Output("legend", "children"),
        Input("dataset-toggle", "value"),
    )
    def on_dataset(key):
        from .app import state
        if state is None or not key:
            raise PreventUpdate
        return switch_dataset(state, key)

    # ------------------------------------------------------------------ #
    #  Canvas click
    # ------------------------------------------------------------------ #

    @app.callback(
        *[Output(cid, prop, allow_duplicate=True) for cid, prop in _SCENE_OUTPUTS],
        Output("scatter-canvas", "clickData"),
        Input("scatter-canvas", "clickData"),
        State("click-mode", "value"),
        prevent_initial_call=True,
    )
    def on_click(click_data, click_mode):
        from .app import state
        if state is None:
            raise PreventUpdate
        return handle_click(state, click_data, click_mode)
