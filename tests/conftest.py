"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from dynamic_clustering.coordinator import ClusteringCoordinator
from dynamic_clustering.oracle import FitFailure, FitResult


class FakeOracle:
    """Deterministic oracle: label 1 left of x=3, label 2 otherwise.

    Set ``fail = True`` to make every call raise :class:`FitFailure`.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[np.ndarray] = []

    def __call__(self, points: np.ndarray) -> FitResult:
        self.calls.append(np.array(points, copy=True))
        if self.fail:
            raise FitFailure("scripted failure")
        labels = tuple(1 if x < 3 else 2 for x, _ in points)
        return FitResult(labels=labels, n_components=len(set(labels)))


class ShortOracle:
    """Returns one label too few, which counts as a failed fit."""

    def __call__(self, points: np.ndarray) -> FitResult:
        return FitResult(labels=tuple(1 for _ in range(len(points) - 1)))


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture
def failing_oracle() -> FakeOracle:
    return FakeOracle(fail=True)


@pytest.fixture
def coordinator(oracle) -> ClusteringCoordinator:
    return ClusteringCoordinator(oracle)


@pytest.fixture
def blobs() -> tuple[np.ndarray, np.ndarray]:
    """Three tight, well-separated blobs of 25 points each and their blob ids."""
    rng = np.random.default_rng(0)
    centres = np.array([[-1.2, -1.2], [1.2, -1.2], [0.0, 1.2]])
    X = np.vstack([c + rng.normal(scale=0.08, size=(25, 2)) for c in centres])
    ids = np.repeat(np.arange(3), 25)
    return X, ids
