"""Dash front end for the dynamic clustering app."""

from .app import SessionState, create_app

__all__ = ["SessionState", "create_app"]
