"""Incremental clustering state machine.

Every user action runs to completion synchronously: the point store is
mutated first, then the fit triggers are evaluated.  Two kinds of fit change
state, the automatic first fit and the manual "Go" re-fit.  Display-only
previews live in :class:`~dynamic_clustering.oracle.PreviewFitter` and never
reach this object.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple

from . import config
from .oracle import FitFailure, FitResult, GaussianMixtureOracle, Oracle
from .points import Point, PointStore
from .state import ClusteringState, ClusterSnapshot, derive_state

logger = logging.getLogger(__name__)

MIN_POINTS_TO_FIT = 2


class ReclusterOutcome(str, Enum):
    """Result of a manual re-fit request."""

    SKIPPED = "skipped"
    FITTED = "fitted"
    FAILED = "failed"


class ClusteringCoordinator:
    """Owns the points, the current snapshot and the auto-fit gate.

    The gate is armed while no snapshot has existed since construction or
    the last :meth:`reset`.  While armed, each addition that leaves at least
    two points attempts a fit; a failed attempt leaves it armed.
    """

    def __init__(self, oracle: Oracle | None = None) -> None:
        self.oracle: Oracle = oracle if oracle is not None else GaussianMixtureOracle()
        self._store = PointStore()
        self._snapshot: ClusterSnapshot | None = None
        self._auto_fit_armed = True

    # ------------------------------------------------------------------ #
    #  Read-only views
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> ClusteringState:
        return derive_state(self._store.size(), self._snapshot)

    @property
    def snapshot(self) -> ClusterSnapshot | None:
        return self._snapshot

    @property
    def covered_count(self) -> int:
        return self._snapshot.covered_count if self._snapshot is not None else 0

    @property
    def pending_count(self) -> int:
        if self._snapshot is None:
            return 0
        return self._store.size() - self._snapshot.covered_count

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._store.points

    @property
    def auto_fit_armed(self) -> bool:
        return self._auto_fit_armed

    def size(self) -> int:
        return self._store.size()

    def status_text(self) -> str:
        return (
            f"Points: {self.size()}   "
            f"(Points used in last clustering: {self.covered_count})"
        )

    # ------------------------------------------------------------------ #
    #  Actions
    # ------------------------------------------------------------------ #

    def add_point(self, x: float, y: float) -> ClusteringState:
        """Append a point, then run the automatic first fit if still armed."""
        self._store.append(Point(x, y))
        n = self._store.size()
        logger.debug("added point %d at (%.3f, %.3f)", n, x, y)

        if self._auto_fit_armed and n >= MIN_POINTS_TO_FIT:
            try:
                self._apply(self._fit_all())
            except FitFailure as exc:
                logger.debug("automatic fit on %d points failed: %s", n, exc)
        return self.state

    def request_recluster(self) -> ReclusterOutcome:
        """Re-fit all stored points ("Go").

        Fewer than two points is a no-op.  On failure the previous snapshot
        is kept unchanged and a warning is logged.
        """
        n = self._store.size()
        if n < MIN_POINTS_TO_FIT:
            logger.debug("re-cluster skipped: only %d point(s)", n)
            return ReclusterOutcome.SKIPPED

        try:
            fit = self._fit_all()
        except FitFailure as exc:
            logger.warning("%s (%s)", config.MSG_FIT_FAILED, exc)
            return ReclusterOutcome.FAILED

        self._apply(fit)
        return ReclusterOutcome.FITTED

    def reset(self) -> ClusteringState:
        """Discard all points and the snapshot, and re-arm the gate ("Clear")."""
        self._store.reset()
        self._snapshot = None
        self._auto_fit_armed = True
        logger.debug("session cleared")
        return self.state

    # ------------------------------------------------------------------ #
    #  Internals
    # ------------------------------------------------------------------ #

    def _fit_all(self) -> FitResult:
        X = self._store.as_array()
        result = self.oracle(X)
        if result is None or len(result.labels) != len(X):
            raise FitFailure(
                f"oracle returned {0 if result is None else len(result.labels)} "
                f"labels for {len(X)} points"
            )
        return result

    def _apply(self, fit: FitResult) -> None:
        self._snapshot = ClusterSnapshot.from_fit(fit)
        self._auto_fit_armed = False
        logger.info(
            "clustered %d points: %s", self._snapshot.covered_count, fit.summary()
        )
