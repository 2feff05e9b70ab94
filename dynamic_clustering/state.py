"""Clustering snapshot and the states derived from it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .oracle import FitResult


class ClusteringState(str, Enum):
    """Session state as derived from point count and snapshot."""

    EMPTY = "empty"
    INSUFFICIENT = "insufficient"
    UNFITTED = "unfitted"
    FITTED_CURRENT = "fitted_current"
    FITTED_STALE = "fitted_stale"


@dataclass(frozen=True)
class ClusterSnapshot:
    """Result of the most recent successful fit.

    ``labels[i]`` is the cluster of the i-th point by arrival order; the
    snapshot covers the first ``covered_count`` points only.
    """

    covered_count: int
    labels: Tuple[int, ...]
    fit: FitResult | None = None

    def __post_init__(self) -> None:
        if self.covered_count < 0:
            raise ValueError("covered_count must be non-negative")
        if len(self.labels) != self.covered_count:
            raise ValueError(
                f"expected {self.covered_count} labels, got {len(self.labels)}"
            )

    @classmethod
    def from_fit(cls, fit: FitResult) -> "ClusterSnapshot":
        return cls(covered_count=len(fit.labels), labels=tuple(fit.labels), fit=fit)


def derive_state(size: int, snapshot: ClusterSnapshot | None) -> ClusteringState:
    """Map a point count and an optional snapshot to a :class:`ClusteringState`."""
    if snapshot is not None:
        if snapshot.covered_count < size:
            return ClusteringState.FITTED_STALE
        return ClusteringState.FITTED_CURRENT
    if size == 0:
        return ClusteringState.EMPTY
    if size == 1:
        return ClusteringState.INSUFFICIENT
    return ClusteringState.UNFITTED
