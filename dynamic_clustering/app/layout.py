"""Dash layout: sidebar with actions and instructions, click-to-add plot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from . import theme

if TYPE_CHECKING:
    from .app import SessionState


def build_layout(state: SessionState) -> html.Div:
    """Return the complete app layout."""
    return html.Div(
        className="app-container",
        children=[
            # ── Sidebar ──
            html.Div(
                className="left-sidebar",
                style={"width": theme.SIDEBAR_WIDTH},
                children=[
                    html.Div("Dynamic Clustering", className="sidebar-header"),
                    html.Div(
                        className="ctrl-row flex-row",
                        children=[
                            html.Button("Go (re-cluster)", id="go-btn",
                                        className="btn-success"),
                            html.Button("Clear Points", id="clear-btn",
                                        className="btn-danger"),
                        ],
                    ),
                    dcc.Checklist(
                        id="display-options",
                        options=[{"label": "Show component ellipses",
                                  "value": "ellipses"}],
                        value=["ellipses"] if state.show_ellipses else [],
                        className="ctrl-row",
                    ),
                    html.H4("Instructions"),
                    html.Div(
                        "Click on the plot to add points. The first clustering "
                        "is performed automatically when there are at least 2 "
                        "points.",
                        className="instructions",
                    ),
                    html.Div(
                        "After clustering, newly added points are shown as "
                        "unclustered (black open circles). Click 'Go' to "
                        "cluster all points.",
                        className="instructions",
                    ),
                    html.H4("Model"),
                    html.Div(id="model-summary", className="model-summary",
                             children="No clustering yet"),
                ],
            ),
            # ── Main area ──
            html.Div(
                className="main-area",
                children=[
                    dcc.Graph(
                        id="cluster-graph",
                        config={"displayModeBar": False},
                        style={"height": theme.PLOT_HEIGHT, "width": "100%"},
                    ),
                    html.Div(
                        id="notification",
                        className="notification",
                        style={"color": theme.ORANGE},
                    ),
                    html.Pre(
                        id="status-bar",
                        className="status-bar",
                        children=state.coordinator.status_text(),
                    ),
                ],
            ),
        ],
    )
