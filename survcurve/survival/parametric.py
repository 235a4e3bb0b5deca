"""
Parametric survival and hazard curves.

Parameterised like R's dweibull/pweibull/dgamma: ``shape`` is alpha and
``scale`` is 1/lambda. For the Weibull,

    S(t) = exp(-(t / scale)^shape)
    h(t) = (shape / scale) (t / scale)^(shape - 1)
    E(T) = scale · Γ(1 + 1/shape)
    t_med = scale · log(2)^(1/shape)

The gamma hazard has no closed form and is computed as f(t) / S(t) on the
log scale, which stays finite far into the tail.

A tabulated hazard can be turned back into a survival curve with
survival_from_hazard(), and any survival curve integrated to a mean with
mean_survival_time().
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import special, stats

from survcurve.core.exceptions import InvalidInputError
from survcurve.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_non_negative,
    check_positive_scalar,
)


def _times(t: ArrayLike) -> NDArray:
    arr = check_array(t, "t")
    check_finite(arr, "t")
    check_non_negative(arr, "t")
    return arr


def _hazard(dist, t: NDArray) -> NDArray:
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.exp(dist.logpdf(t) - dist.logsf(t))


def _scalar_or_array(out: NDArray):
    if np.ndim(out) == 0:
        return float(out)
    return out


# -- Weibull --

def weibull_survival(t: ArrayLike, shape: float, scale: float):
    """Weibull survival function S(t)."""
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    return _scalar_or_array(stats.weibull_min.sf(_times(t), shape, scale=scale))


def weibull_hazard(t: ArrayLike, shape: float, scale: float):
    """Weibull hazard h(t) = f(t) / S(t).

    At t = 0 the hazard is 0 for shape > 1, 1/scale for shape == 1 and
    infinite for shape < 1.
    """
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    t = _times(t)
    with np.errstate(divide='ignore'):
        out = (shape / scale) * (t / scale) ** (shape - 1.0)
    return _scalar_or_array(out)


def weibull_cumhaz(t: ArrayLike, shape: float, scale: float):
    """Weibull cumulative hazard H(t) = (t / scale)^shape."""
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    return _scalar_or_array((_times(t) / scale) ** shape)


def weibull_mean(shape: float, scale: float) -> float:
    """Theoretical mean scale · Γ(1 + 1/shape)."""
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    return float(scale * special.gamma(1.0 + 1.0 / shape))


def weibull_median(shape: float, scale: float) -> float:
    """Theoretical median scale · log(2)^(1/shape)."""
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    return float(scale * np.log(2.0) ** (1.0 / shape))


def weibull_sample(
    n: int,
    shape: float,
    scale: float,
    rng: np.random.Generator | int | None = None,
) -> NDArray:
    """Draw n Weibull survival times (R's rweibull)."""
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    if int(n) != n or n < 1:
        raise InvalidInputError(f"n must be a positive integer, got {n}")
    rng = np.random.default_rng(rng)
    return scale * rng.weibull(shape, size=int(n))


# -- Exponential --

def exponential_survival(t: ArrayLike, rate: float):
    """Exponential survival exp(-rate · t)."""
    rate = check_positive_scalar(rate, "rate")
    return _scalar_or_array(np.exp(-rate * _times(t)))


def exponential_hazard(t: ArrayLike, rate: float):
    """Exponential hazard: constant at ``rate``."""
    rate = check_positive_scalar(rate, "rate")
    return _scalar_or_array(np.full_like(_times(t), rate))


# -- Gamma --

def gamma_survival(t: ArrayLike, shape: float, scale: float):
    """Gamma survival function S(t)."""
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    return _scalar_or_array(stats.gamma.sf(_times(t), shape, scale=scale))


def gamma_hazard(t: ArrayLike, shape: float, scale: float):
    """Gamma hazard h(t) = f(t) / S(t).

    Increasing for shape > 1, constant (1/scale) for shape == 1 and
    decreasing for shape < 1.
    """
    shape = check_positive_scalar(shape, "shape")
    scale = check_positive_scalar(scale, "scale")
    dist = stats.gamma(shape, scale=scale)
    return _scalar_or_array(_hazard(dist, _times(t)))


# -- Numerical relationships --

def survival_from_hazard(time: ArrayLike, hazard: ArrayLike) -> NDArray:
    """Recover S(t) from a hazard tabulated on a time grid.

    The cumulative hazard is accumulated as a left Riemann sum,
    H(t_k) = Σ_{j<k} h(t_j) (t_{j+1} - t_j), and S(t) = exp(-H(t)).

    Parameters
    ----------
    time : array-like
        (k,) strictly increasing, non-negative grid.
    hazard : array-like
        (k,) hazard values on the grid, non-negative.

    Returns
    -------
    NDArray
        (k,) survival probabilities, S(time[0]) = 1.
    """
    time = check_array(time, "time")
    hazard = check_array(hazard, "hazard")
    check_1d(time, "time")
    check_1d(hazard, "hazard")
    check_consistent_length(time, hazard, names=("time", "hazard"))
    check_min_samples(time, 1, "time")
    check_finite(time, "time")
    check_non_negative(time, "time")
    check_finite(hazard, "hazard")
    check_non_negative(hazard, "hazard")
    if np.any(np.diff(time) <= 0):
        raise InvalidInputError("time: grid must be strictly increasing")

    increments = hazard[:-1] * np.diff(time)
    cumhaz = np.concatenate(([0.0], np.cumsum(increments)))
    return np.exp(-cumhaz)


def mean_survival_time(time: ArrayLike, survival: ArrayLike) -> float:
    """Integrate S(t) over the grid (trapezoid rule): E(T) = ∫ S(t) dt.

    The grid should extend far enough that S has effectively reached 0;
    otherwise the result is the mean restricted to the grid.
    """
    time = check_array(time, "time")
    survival = check_array(survival, "survival")
    check_1d(time, "time")
    check_consistent_length(time, survival, names=("time", "survival"))
    check_min_samples(time, 2, "time")
    check_finite(time, "time")
    check_finite(survival, "survival")
    if np.any(np.diff(time) <= 0):
        raise InvalidInputError("time: grid must be strictly increasing")
    return float(np.sum(np.diff(time) * (survival[1:] + survival[:-1]) / 2.0))
