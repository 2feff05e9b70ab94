"""Covariance ellipses for fitted mixture components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Tuple

import numpy as np
import plotly.graph_objects as go

from .colors import hex_to_rgb

if TYPE_CHECKING:
    from ..oracle import FitResult
    from .colors import PersistentColorMap

# sqrt of the 95% chi-square quantile with 2 degrees of freedom
CHI2_95_2D = 2.4477


def covariance_ellipse(
    mean: np.ndarray,
    cov: np.ndarray,
    *,
    scale: float = CHI2_95_2D,
    n_points: int = 72,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return closed ``(x, y)`` outlines of the ellipse for *mean*, *cov*.

    Parameters
    ----------
    mean : np.ndarray
        Component centre, shape ``(2,)``.
    cov : np.ndarray
        Covariance matrix, shape ``(2, 2)``.
    scale : float
        Radius in standard deviations along each principal axis.
    n_points : int
        Number of vertices; the first vertex is repeated at the end.
    """
    eigvals, eigvecs = np.linalg.eigh(np.asarray(cov, dtype=float))
    eigvals = np.clip(eigvals, 0.0, None)
    theta = np.linspace(0.0, 2.0 * np.pi, n_points)
    circle = np.vstack((np.cos(theta), np.sin(theta)))
    outline = eigvecs @ (scale * np.sqrt(eigvals)[:, np.newaxis] * circle)
    outline[:, -1] = outline[:, 0]
    return outline[0] + mean[0], outline[1] + mean[1]


def add_component_ellipses(
    fig: go.Figure,
    fit: FitResult,
    color_map: PersistentColorMap,
    labels: Iterable[int] | None = None,
    *,
    fill_alpha: float = 0.12,
) -> None:
    """Draw one ellipse and centre marker per fitted component.

    Only components whose 1-based label is in *labels* are drawn when
    *labels* is given.
    """
    if fit.means is None or fit.covariances is None:
        return

    wanted = set(labels) if labels is not None else None
    for idx, (mean, cov) in enumerate(zip(fit.means, fit.covariances)):
        label = idx + 1
        if wanted is not None and label not in wanted:
            continue
        color = color_map.color_for(label)
        r, g, b = hex_to_rgb(color)
        xs, ys = covariance_ellipse(mean, cov)
        fig.add_trace(go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            line=dict(color=color, width=1.5, dash="dot"),
            fill="toself",
            fillcolor=f"rgba({r},{g},{b},{fill_alpha})",
            showlegend=False,
            hoverinfo="skip",
        ))
        fig.add_trace(go.Scatter(
            x=[mean[0]],
            y=[mean[1]],
            mode="markers",
            marker=dict(symbol="x-thin", size=10, line=dict(width=2, color=color)),
            showlegend=False,
            hoverinfo="skip",
        ))
