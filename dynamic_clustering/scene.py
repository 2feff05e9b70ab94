"""Derive a renderable scene from the coordinator's current state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Tuple, Union

from . import config
from .oracle import FitResult
from .points import Point

if TYPE_CHECKING:
    from .coordinator import ClusteringCoordinator
    from .oracle import PreviewFitter

PENDING = "pending"


class Marker(NamedTuple):
    """One point to draw: a cluster label, ``PENDING``, or ``None`` (plain)."""

    point: Point
    label: Union[int, str, None] = None

    @property
    def is_pending(self) -> bool:
        return self.label == PENDING

    @property
    def is_clustered(self) -> bool:
        return self.label is not None and self.label != PENDING


@dataclass(frozen=True)
class Scene:
    """Everything the renderer needs and nothing it may change."""

    markers: Tuple[Marker, ...]
    advisory: str | None
    viewport: Tuple[float, float, float, float] = config.VIEWPORT
    fit: FitResult | None = None
    preview: bool = False
    status: str = ""

    @property
    def pending_count(self) -> int:
        return sum(1 for m in self.markers if m.is_pending)

    @property
    def cluster_labels(self) -> list[int]:
        """Sorted distinct labels among clustered markers."""
        return sorted({m.label for m in self.markers if m.is_clustered})


def build_scene(
    coordinator: ClusteringCoordinator,
    preview: PreviewFitter | None = None,
) -> Scene:
    """Build the scene for the current points and snapshot.

    Reads *coordinator* only.  When no snapshot exists and at least two
    points are present, *preview* supplies a display-only fit that is never
    written back.
    """
    points = coordinator.points
    snapshot = coordinator.snapshot
    status = coordinator.status_text()
    n = len(points)

    if snapshot is not None:
        k = snapshot.covered_count
        markers = [Marker(p, label) for p, label in zip(points[:k], snapshot.labels)]
        markers.extend(Marker(p, PENDING) for p in points[k:])
        advisory = config.MSG_STALE if n > k else None
        return Scene(
            markers=tuple(markers),
            advisory=advisory,
            fit=snapshot.fit,
            status=status,
        )

    if n == 0:
        return Scene(markers=(), advisory=config.MSG_EMPTY, status=status)

    if n == 1:
        return Scene(
            markers=(Marker(points[0]),), advisory=config.MSG_SINGLE, status=status
        )

    fit = preview.preview(points) if preview is not None else None
    if fit is None:
        return Scene(
            markers=tuple(Marker(p) for p in points),
            advisory=config.MSG_UNCLUSTERABLE,
            status=status,
        )
    return Scene(
        markers=tuple(Marker(p, label) for p, label in zip(points, fit.labels)),
        advisory=None,
        fit=fit,
        preview=True,
        status=status,
    )
