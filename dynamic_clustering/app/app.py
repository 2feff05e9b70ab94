"""Dash app factory and server-side session state."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..coordinator import ClusteringCoordinator
from ..oracle import Oracle, PreviewFitter
from ..visualization.colors import PersistentColorMap


@dataclass
class SessionState:
    """Mutable server-side state for the single-user Dash app."""

    coordinator: ClusteringCoordinator
    color_map: PersistentColorMap = field(default_factory=PersistentColorMap)
    preview: PreviewFitter = field(init=False)
    show_ellipses: bool = True

    def __post_init__(self) -> None:
        self.preview = PreviewFitter(self.coordinator.oracle)

    def clear(self) -> None:
        """Reset the session and forget display-only caches."""
        self.coordinator.reset()
        self.preview.clear()
        self.color_map.reset()


# Module-level singleton — set by create_app()
state: SessionState | None = None


def create_app(oracle: Oracle | None = None) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    oracle : callable, optional
        Clustering oracle; defaults to
        :class:`~dynamic_clustering.oracle.GaussianMixtureOracle`.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global state
    state = SessionState(coordinator=ClusteringCoordinator(oracle))

    assets_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")

    app = dash.Dash(
        __name__,
        assets_folder=assets_dir,
        title="Dynamic Clustering",
    )
    app.layout = build_layout(state)
    callbacks.register(app)

    return app
