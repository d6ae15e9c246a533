"""Dash front end for the scatter viewer."""

from .app import ServerState, create_app

__all__ = ["ServerState", "create_app"]
