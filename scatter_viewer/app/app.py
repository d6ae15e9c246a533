"""Dash app factory and server-side state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import plotly.graph_objects as go

from ..explorer.session import ViewerSession
from .figures import build_scene_figure

logger = logging.getLogger(__name__)


@dataclass
class ServerState:
    """Mutable server-side state for the single-user Dash app.

    The session notifies on every change; each notification re-renders
    the figure once, and callbacks hand out the cached result.
    """

    session: ViewerSession
    figure: go.Figure = field(init=False)
    redraws: int = 0

    def __post_init__(self) -> None:
        self.figure = build_scene_figure(self.session)
        self.session.subscribe(self._redraw)

    def _redraw(self, session: ViewerSession) -> None:
        self.figure = build_scene_figure(session)
        self.redraws += 1
        logger.debug("redraw %d: %s, %s", self.redraws,
                     session.dataset.key, session.view_state.mode)


# Module-level singleton — set by create_app()
state: ServerState | None = None


def create_app(session: ViewerSession) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    session : ViewerSession
        Session to serve. Its initial dataset is loaded by the first
        dataset-toggle callback.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global state
    state = ServerState(session=session)

    app = dash.Dash(__name__, suppress_callback_exceptions=True)
    app.title = "Scatter Viewer"
    app.layout = build_layout(state)
    callbacks.register(app)

    return app
