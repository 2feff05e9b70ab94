"""Tests for snapshots and state derivation."""

import pytest

from dynamic_clustering.oracle import FitResult
from dynamic_clustering.state import ClusteringState, ClusterSnapshot, derive_state


def test_snapshot_rejects_label_count_mismatch():
    with pytest.raises(ValueError):
        ClusterSnapshot(covered_count=3, labels=(1, 1))


def test_snapshot_from_fit():
    fit = FitResult(labels=(1, 2, 2))
    snap = ClusterSnapshot.from_fit(fit)
    assert snap.covered_count == 3
    assert snap.labels == (1, 2, 2)
    assert snap.fit is fit


@pytest.mark.parametrize(
    "size, snapshot, expected",
    [
        (0, None, ClusteringState.EMPTY),
        (1, None, ClusteringState.INSUFFICIENT),
        (2, None, ClusteringState.UNFITTED),
        (7, None, ClusteringState.UNFITTED),
        (2, ClusterSnapshot(2, (1, 1)), ClusteringState.FITTED_CURRENT),
        (3, ClusterSnapshot(2, (1, 1)), ClusteringState.FITTED_STALE),
    ],
)
def test_derive_state(size, snapshot, expected):
    assert derive_state(size, snapshot) is expected
