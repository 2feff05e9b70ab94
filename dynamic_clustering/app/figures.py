"""Build the Plotly figure for a clustering scene."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import plotly.graph_objects as go

from .. import config
from ..visualization.colors import PENDING_COLOR
from ..visualization.ellipses import add_component_ellipses
from . import theme

if TYPE_CHECKING:
    from ..scene import Scene
    from ..visualization.colors import PersistentColorMap

# The click layer is always the first trace; marker traces skip hover so
# every click on the plot area lands on it
CLICK_LAYER_CURVE = 0


def build_scene_figure(
    scene: Scene,
    color_map: PersistentColorMap,
    *,
    point_size: int = theme.POINT_SIZE,
    show_ellipses: bool = True,
) -> go.Figure:
    """Render *scene* as a click-capturing Plotly figure.

    Parameters
    ----------
    scene : Scene
        Output of :func:`~dynamic_clustering.scene.build_scene`.
    color_map : PersistentColorMap
        Keeps cluster colours stable between re-fits.
    point_size : int
        Marker size in px; pending markers are drawn slightly larger.
    show_ellipses : bool
        Draw the fitted components' 95% covariance ellipses.

    Returns
    -------
    go.Figure
    """
    fig = go.Figure()
    _add_click_layer(fig, scene.viewport)

    clustered = [m for m in scene.markers if m.is_clustered]
    plain = [m for m in scene.markers if m.label is None]
    pending = [m for m in scene.markers if m.is_pending]

    if show_ellipses and scene.fit is not None and clustered:
        add_component_ellipses(fig, scene.fit, color_map, scene.cluster_labels)

    for label in scene.cluster_labels:
        group = [m for m in clustered if m.label == label]
        fig.add_trace(go.Scatter(
            x=[m.point.x for m in group],
            y=[m.point.y for m in group],
            mode="markers",
            name=f"Cluster {label}",
            marker=dict(
                size=point_size,
                color=color_map.color_for(label),
                line=dict(width=1, color="white"),
            ),
            hoverinfo="skip",
        ))

    if plain:
        fig.add_trace(go.Scatter(
            x=[m.point.x for m in plain],
            y=[m.point.y for m in plain],
            mode="markers",
            name="Points",
            showlegend=False,
            marker=dict(size=point_size, color=color_map.color_for(None)),
            hoverinfo="skip",
        ))

    if pending:
        fig.add_trace(go.Scatter(
            x=[m.point.x for m in pending],
            y=[m.point.y for m in pending],
            mode="markers",
            name="Not yet clustered",
            marker=dict(
                size=int(point_size * 1.2),
                symbol="circle-open",
                color=PENDING_COLOR,
                line=dict(width=2, color=PENDING_COLOR),
            ),
            hoverinfo="skip",
        ))

    if scene.advisory:
        fig.add_annotation(_advisory_annotation(scene))

    if scene.preview:
        fig.add_annotation(
            text="preview (not yet saved)",
            xref="paper", yref="paper", x=1.0, y=1.0,
            xanchor="right", yanchor="bottom",
            showarrow=False,
            font=dict(size=10, color=theme.BASE1),
        )

    fig.update_layout(_base_layout(scene.viewport))
    return fig


def _add_click_layer(fig: go.Figure, viewport) -> None:
    """Cover the viewport with a transparent heatmap so empty space is clickable."""
    x_min, x_max, y_min, y_max = viewport
    n = config.CLICK_GRID_SIZE
    xs = np.linspace(x_min, x_max, n)
    ys = np.linspace(y_min, y_max, n)
    fig.add_trace(go.Heatmap(
        x=xs,
        y=ys,
        z=np.zeros((n, n)),
        opacity=0,
        showscale=False,
        colorscale=[[0, "rgba(0,0,0,0)"], [1, "rgba(0,0,0,0)"]],
        hovertemplate="(%{x:.2f}, %{y:.2f})<extra></extra>",
        name="click-layer",
    ))


def _advisory_annotation(scene: Scene) -> dict:
    x_min, x_max, y_min, y_max = scene.viewport
    # Stale hints sit near the bottom so they do not cover clustered points
    if scene.pending_count:
        y = y_min + 0.12 * (y_max - y_min)
    else:
        y = (y_min + y_max) / 2
    return dict(
        text=scene.advisory.replace("\n", "<br>"),
        x=(x_min + x_max) / 2,
        y=y,
        showarrow=False,
        font=dict(size=13, color=theme.BASE02),
        bgcolor="rgba(253,246,227,0.8)",
    )


def _base_layout(viewport) -> dict:
    """Return common layout kwargs with the fixed square viewport."""
    x_min, x_max, y_min, y_max = viewport
    return dict(
        uirevision="constant",
        hovermode="closest",
        paper_bgcolor=theme.BASE3,
        plot_bgcolor=theme.BASE3,
        font=dict(family=theme.FONT_STACK, size=11, color=theme.BASE00),
        margin=dict(l=40, r=10, t=20, b=40),
        xaxis=dict(
            range=[x_min, x_max],
            fixedrange=True,
            showgrid=False,
            zeroline=False,
            color=theme.BASE00,
        ),
        yaxis=dict(
            range=[y_min, y_max],
            fixedrange=True,
            showgrid=False,
            zeroline=False,
            color=theme.BASE00,
            scaleanchor="x",
            scaleratio=1,
        ),
        legend=dict(
            font=dict(size=10),
            bgcolor="rgba(0,0,0,0)",
            borderwidth=0,
        ),
    )
