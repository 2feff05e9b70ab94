"""All Dash callbacks for the clustering app."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dash import Input, Output, callback_context
from dash.exceptions import PreventUpdate

from .. import config
from ..coordinator import ReclusterOutcome
from ..scene import build_scene
from .figures import CLICK_LAYER_CURVE, build_scene_figure

if TYPE_CHECKING:
    from .app import SessionState

logger = logging.getLogger(__name__)


def apply_event(state: SessionState, trigger_id: str, click_data: dict | None) -> str:
    """Apply one UI event to the session and return the notification text."""
    if trigger_id == "cluster-graph":
        if not click_data or not click_data.get("points"):
            raise PreventUpdate
        point = click_data["points"][0]
        if point.get("curveNumber") != CLICK_LAYER_CURVE:
            raise PreventUpdate
        if point.get("x") is None or point.get("y") is None:
            raise PreventUpdate
        state.coordinator.add_point(float(point["x"]), float(point["y"]))
        return ""

    if trigger_id == "go-btn":
        outcome = state.coordinator.request_recluster()
        if outcome is ReclusterOutcome.FAILED:
            return config.MSG_FIT_FAILED
        return ""

    if trigger_id == "clear-btn":
        state.clear()
        return ""

    # Initial render or display toggle
    return ""


def model_summary(scene) -> str:
    if scene.fit is None:
        return "No clustering yet"
    prefix = "Preview" if scene.preview else "Last clustering"
    return f"{prefix}: {scene.fit.summary()}"


def register(app):
    """Register all callbacks on the Dash app instance."""

    @app.callback(
        Output("cluster-graph", "figure"),
        Output("status-bar", "children"),
        Output("notification", "children"),
        Output("model-summary", "children"),
        Output("cluster-graph", "clickData"),
        Input("cluster-graph", "clickData"),
        Input("go-btn", "n_clicks"),
        Input("clear-btn", "n_clicks"),
        Input("display-options", "value"),
    )
    def on_event(click_data, go_clicks, clear_clicks, display_options):
        from .app import state
        if state is None:
            raise PreventUpdate

        ctx = callback_context
        trigger_id = ""
        if ctx.triggered:
            trigger_id = ctx.triggered[0]["prop_id"].split(".")[0]
        if trigger_id == "go-btn" and not go_clicks:
            raise PreventUpdate
        if trigger_id == "clear-btn" and not clear_clicks:
            raise PreventUpdate

        notification = apply_event(state, trigger_id, click_data)
        if notification:
            logger.info("notified user: %s", notification)

        scene = build_scene(state.coordinator, state.preview)
        fig = build_scene_figure(
            scene,
            state.color_map,
            show_ellipses="ellipses" in (display_options or []),
        )
        # Resetting clickData lets a second click on the same cell register
        return fig, scene.status, notification, model_summary(scene), None
