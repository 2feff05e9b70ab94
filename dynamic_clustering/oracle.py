"""Gaussian-mixture clustering oracle with BIC model selection."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Callable, Sequence, Tuple

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.mixture import GaussianMixture

from . import config

logger = logging.getLogger(__name__)

# Covariance eigenvalues within this multiple of reg_covar count as singular
SINGULAR_FACTOR = 10.0


class FitFailure(Exception):
    """The oracle could not produce labels for the given points."""


@dataclass(frozen=True)
class FitResult:
    """Outcome of one successful mixture fit."""

    labels: Tuple[int, ...]
    n_components: int = 0
    covariance_type: str = ""
    bic: float | None = None
    means: np.ndarray | None = field(default=None, compare=False, repr=False)
    covariances: np.ndarray | None = field(default=None, compare=False, repr=False)

    def summary(self) -> str:
        """Return a one-line description of the selected model."""
        if not self.covariance_type or self.bic is None:
            return f"{len(set(self.labels))} clusters"
        noun = "component" if self.n_components == 1 else "components"
        return (
            f"{self.n_components} {noun}, {self.covariance_type} covariance, "
            f"BIC {self.bic:.1f}"
        )


# Any callable taking an (n, 2) array and returning a FitResult or raising
# FitFailure can stand in for the Gaussian-mixture oracle.
Oracle = Callable[[np.ndarray], FitResult]


def _full_covariances(gmm: GaussianMixture) -> np.ndarray:
    """Expand fitted covariances to shape ``(k, d, d)`` whatever the type."""
    k, d = gmm.means_.shape
    cov = gmm.covariances_
    if gmm.covariance_type == "full":
        return np.asarray(cov)
    if gmm.covariance_type == "tied":
        return np.repeat(cov[np.newaxis, :, :], k, axis=0)
    if gmm.covariance_type == "diag":
        return np.array([np.diag(c) for c in cov])
    return np.array([v * np.eye(d) for v in cov])


class GaussianMixtureOracle:
    """Fit Gaussian mixtures over a grid of models and keep the best by BIC.

    Each combination of component count (``1..max_components``, capped at
    the number of points) and covariance type is tried.  Candidates that
    fail numerically or are singular (a component on fewer than three
    points, or with a collapsed covariance) are skipped, as Mclust drops
    models with an undefined BIC; if none survives, :class:`FitFailure` is
    raised.  Labels are 1-based.
    """

    def __init__(
        self,
        max_components: int = config.MAX_COMPONENTS,
        covariance_types: Sequence[str] = config.COVARIANCE_TYPES,
        random_state: int = config.RANDOM_STATE,
        n_init: int = config.N_INIT,
        reg_covar: float = config.REG_COVAR,
    ) -> None:
        if max_components < 1:
            raise ValueError("max_components must be at least 1")
        self.max_components = max_components
        self.covariance_types = tuple(covariance_types)
        self.random_state = random_state
        self.n_init = n_init
        self.reg_covar = reg_covar

    def __call__(self, points: np.ndarray) -> FitResult:
        return self.fit(points)

    def fit(self, points: np.ndarray) -> FitResult:
        """Select and fit the best mixture for *points*.

        Parameters
        ----------
        points : np.ndarray
            Array of shape ``(n, 2)`` with ``n >= 2``.

        Returns
        -------
        FitResult

        Raises
        ------
        FitFailure
            If no candidate model could be fitted.
        """
        X = np.asarray(points, dtype=float)
        if X.ndim != 2 or len(X) < 2:
            raise FitFailure(f"need at least 2 points, got {len(X)}")
        if not np.isfinite(X).all():
            raise FitFailure("points contain non-finite coordinates")

        best: GaussianMixture | None = None
        best_bic = np.inf
        last_error: Exception | None = None

        for k in range(1, min(self.max_components, len(X)) + 1):
            for cov_type in self.covariance_types:
                gmm = GaussianMixture(
                    n_components=k,
                    covariance_type=cov_type,
                    n_init=self.n_init,
                    reg_covar=self.reg_covar,
                    random_state=self.random_state,
                )
                try:
                    with warnings.catch_warnings():
                        warnings.simplefilter("ignore", ConvergenceWarning)
                        gmm.fit(X)
                    bic = float(gmm.bic(X))
                except (ValueError, np.linalg.LinAlgError) as exc:
                    last_error = exc
                    logger.debug("k=%d %s: fit failed (%s)", k, cov_type, exc)
                    continue
                if not np.isfinite(bic):
                    continue
                reason = self._degenerate_reason(gmm, X)
                if reason:
                    logger.debug("k=%d %s: rejected (%s)", k, cov_type, reason)
                    continue
                logger.debug("k=%d %s: BIC=%.2f", k, cov_type, bic)
                if bic < best_bic:
                    best, best_bic = gmm, bic

        if best is None:
            raise FitFailure("no mixture model could be fitted") from last_error

        labels = best.predict(X) + 1
        result = FitResult(
            labels=tuple(int(v) for v in labels),
            n_components=best.n_components,
            covariance_type=best.covariance_type,
            bic=best_bic,
            means=best.means_.copy(),
            covariances=_full_covariances(best),
        )
        logger.debug("selected %s for %d points", result.summary(), len(X))
        return result

    def _degenerate_reason(self, gmm: GaussianMixture, X: np.ndarray) -> str:
        """Return why *gmm* is singular, or an empty string if it is usable.

        A component needs at least ``d + 1`` assigned points and a covariance
        whose smallest eigenvalue stays clear of the ``reg_covar`` floor;
        otherwise its likelihood is unbounded and BIC would always favour it.
        The point-count rule is waived for a single component.
        """
        d = X.shape[1]
        if gmm.n_components > 1:
            counts = np.bincount(gmm.predict(X), minlength=gmm.n_components)
            if counts.min() < d + 1:
                return f"component with {counts.min()} point(s)"
        floor = self.reg_covar * SINGULAR_FACTOR
        smallest = min(np.linalg.eigvalsh(c).min() for c in _full_covariances(gmm))
        if smallest <= floor:
            return f"singular covariance (eigenvalue {smallest:.2e})"
        return ""


class PreviewFitter:
    """Display-only fits for the scene when no snapshot exists yet.

    Holds no reference to any coordinator, so a preview can never become
    persisted clustering state.  The most recent outcome is cached per
    point set because the oracle is deterministic on identical input.
    """

    def __init__(self, oracle: Oracle) -> None:
        self.oracle = oracle
        self._cache_key: Tuple | None = None
        self._cache_value: FitResult | None = None

    def preview(self, points: Sequence) -> FitResult | None:
        """Return a fit for *points*, or ``None`` if it cannot be fitted."""
        key = tuple((float(p[0]), float(p[1])) for p in points)
        if len(key) < 2:
            return None
        if key == self._cache_key:
            return self._cache_value

        try:
            result = self.oracle(np.asarray(key, dtype=float))
        except FitFailure as exc:
            logger.debug("preview fit failed: %s", exc)
            result = None
        if result is not None and len(result.labels) != len(key):
            result = None

        self._cache_key = key
        self._cache_value = result
        return result

    def clear(self) -> None:
        self._cache_key = None
        self._cache_value = None
