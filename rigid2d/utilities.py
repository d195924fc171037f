"""Random sampling helpers and small numeric utilities."""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "get_generator",
    "sample_normal_distribution",
    "sample_uniform_distribution",
    "sample_standard_normal",
    "sample_multivariate_distribution",
    "euclidean_distance",
]

_GENERATOR = np.random.default_rng()


def get_generator() -> np.random.Generator:
    """Return the shared random number generator."""
    return _GENERATOR


def sample_normal_distribution(mu: float, sigma: float) -> float:
    """Draw one sample from a normal distribution."""
    return float(get_generator().normal(mu, sigma))


def sample_uniform_distribution(low: float, high: float) -> float:
    """Draw one sample from a uniform distribution on [low, high)."""
    return float(get_generator().uniform(low, high))


def sample_standard_normal(n: int) -> np.ndarray:
    """Draw ``n`` independent samples from the standard normal distribution."""
    return get_generator().standard_normal(n)


def sample_multivariate_distribution(cov) -> np.ndarray:
    """Draw one zero-mean sample with covariance ``cov``.

    Raises numpy.linalg.LinAlgError if ``cov`` is not positive definite.
    """
    cov = np.asarray(cov, dtype=float)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise ValueError("covariance matrix must be square")
    lower = np.linalg.cholesky(cov)
    return lower @ sample_standard_normal(cov.shape[1])


def euclidean_distance(x0: float, y0: float, x1: float, y1: float) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(x0 - x1, y0 - y1)