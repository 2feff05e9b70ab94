"""Tests for the Gaussian-mixture oracle."""

import numpy as np
import pytest

from dynamic_clustering.oracle import FitFailure, FitResult, GaussianMixtureOracle


def test_recovers_separated_blobs(blobs):
    X, ids = blobs
    result = GaussianMixtureOracle()(X)

    assert result.n_components == 3
    labels = np.array(result.labels)
    assert len(labels) == len(X)
    for blob in range(3):
        assert len(set(labels[ids == blob])) == 1
    assert len(set(labels)) == 3
    assert set(labels) <= {1, 2, 3}


def test_result_carries_component_geometry(blobs):
    X, _ = blobs
    result = GaussianMixtureOracle(covariance_types=("full",))(X)
    assert result.covariance_type == "full"
    assert result.means.shape == (result.n_components, 2)
    assert result.covariances.shape == (result.n_components, 2, 2)


@pytest.mark.parametrize("cov_type", ["full", "tied", "diag", "spherical"])
def test_covariances_expand_to_full_matrices(blobs, cov_type):
    X, _ = blobs
    result = GaussianMixtureOracle(max_components=3, covariance_types=(cov_type,))(X)
    assert result.covariances.shape == (result.n_components, 2, 2)
    for cov in result.covariances:
        np.testing.assert_allclose(cov, cov.T)


def test_two_points_can_be_fitted():
    result = GaussianMixtureOracle()(np.array([[0.0, 0.0], [1.0, 1.0]]))
    assert len(result.labels) == 2


def test_deterministic_on_identical_input(blobs):
    X, _ = blobs
    oracle = GaussianMixtureOracle()
    assert oracle(X) == oracle(X)


def test_too_few_points_fails():
    with pytest.raises(FitFailure):
        GaussianMixtureOracle()(np.array([[0.0, 0.0]]))


def test_non_finite_points_fail():
    with pytest.raises(FitFailure):
        GaussianMixtureOracle()(np.array([[0.0, 0.0], [np.nan, 1.0]]))


def test_invalid_max_components():
    with pytest.raises(ValueError):
        GaussianMixtureOracle(max_components=0)


def test_summary():
    fit = FitResult(labels=(1, 2), n_components=2, covariance_type="full", bic=12.34)
    assert fit.summary() == "2 components, full covariance, BIC 12.3"
    assert FitResult(labels=(1, 1, 2)).summary() == "2 clusters"


def test_two_points_form_one_cluster():
    result = GaussianMixtureOracle()(np.array([[0.0, 0.0], [1.0, 1.0]]))
    assert result.labels == (1, 1)
    assert result.n_components == 1


def test_small_groups_are_not_split_per_point():
    X = np.array([
        [-1.0, -1.0], [-0.95, -1.02], [-1.03, -0.94],
        [1.0, 1.0], [1.04, 0.97], [0.96, 1.05],
    ])
    result = GaussianMixtureOracle()(X)
    assert result.n_components == 2
    labels = result.labels
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] == labels[4] == labels[5]
    assert labels[0] != labels[3]


def test_five_clicks_give_a_single_component():
    X = np.array([[0.0, 0.0], [1.0, 1.0], [-0.5, 0.8], [0.6, -0.4], [-1.2, -0.9]])
    result = GaussianMixtureOracle()(X)
    assert result.n_components == 1
    assert set(result.labels) == {1}


def test_every_component_holds_at_least_three_points(blobs):
    X, _ = blobs
    result = GaussianMixtureOracle()(X[::5])
    counts = np.bincount(result.labels)[1:]
    assert counts[counts > 0].min() >= 3


def test_identical_points_fail():
    with pytest.raises(FitFailure):
        GaussianMixtureOracle()(np.zeros((4, 2)))
