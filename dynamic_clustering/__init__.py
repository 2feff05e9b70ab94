"""dynamic_clustering — click-to-add points with incremental mixture-model clustering."""

from .coordinator import ClusteringCoordinator, ReclusterOutcome
from .oracle import FitFailure, FitResult, GaussianMixtureOracle, PreviewFitter
from .points import Point, PointStore
from .scene import PENDING, Marker, Scene, build_scene
from .state import ClusteringState, ClusterSnapshot, derive_state
from .visualization.colors import PersistentColorMap, hex_to_rgb

__all__ = [
    # points
    "Point",
    "PointStore",
    # oracle
    "FitFailure",
    "FitResult",
    "GaussianMixtureOracle",
    "PreviewFitter",
    # state
    "ClusterSnapshot",
    "ClusteringState",
    "derive_state",
    # coordinator
    "ClusteringCoordinator",
    "ReclusterOutcome",
    # scene
    "PENDING",
    "Marker",
    "Scene",
    "build_scene",
    # visualization
    "PersistentColorMap",
    "hex_to_rgb",
]
