"""
Pointwise confidence intervals for a survival curve.

All intervals start from the delta-method variance of log S(t),

    var(log S(t)) ≈ Σ_{t_i <= t} d_i / (n_i (n_i - d_i))

and differ in the scale on which the normal approximation is applied:

    log-log : var(log(-log S)) = var(log S) / (log S)^2,
              bounds S^exp(±z·se), always inside [0, 1]
    plain   : S ± z·S·sqrt(var(log S)), may leave [0, 1]
    log     : exp(log S ± z·sqrt(var(log S))), upper may exceed 1

Bounds are never clipped. Bounds outside [0, 1] are flagged row-wise in
``out_of_range``; bounds that cannot be computed are NaN.

References:
    Kalbfleisch, J. D. & Prentice, R. L. (1980). The Statistical Analysis
        of Failure Time Data, section 1.3.
    R Core Team. survival::survfit, conf.type argument.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats

CONF_TYPES = ("log-log", "plain", "log", "none")


def normal_quantile(conf_level: float) -> float:
    """Two-sided normal critical value, e.g. 1.959964 for 0.95."""
    return float(stats.norm.ppf((1.0 + conf_level) / 2.0))


def confidence_bounds(
    survival: NDArray,
    var_log_survival: NDArray,
    conf_level: float,
    conf_type: str,
) -> tuple[NDArray, NDArray, NDArray]:
    """Compute confidence bounds for S(t).

    Parameters
    ----------
    survival : NDArray
        S(t) at each row.
    var_log_survival : NDArray
        Cumulative var(log S(t)); +inf once a risk set has fully failed.
    conf_level : float
        Confidence level in (0, 1).
    conf_type : str
        "log-log", "plain", "log" or "none".

    Returns
    -------
    (ci_lower, ci_upper, out_of_range)
    """
    if conf_type not in CONF_TYPES:
        raise ValueError(
            f"Unknown conf_type '{conf_type}'. "
            f"Choose from {', '.join(repr(c) for c in CONF_TYPES)}."
        )

    m = len(survival)
    if conf_type == "none":
        nan = np.full(m, np.nan)
        return nan, nan.copy(), np.zeros(m, dtype=bool)

    z = normal_quantile(conf_level)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if conf_type == "log-log":
            log_s = np.log(survival)
            se_loglog = np.sqrt(var_log_survival) / np.abs(log_s)
            ci_lower = survival ** np.exp(z * se_loglog)
            ci_upper = survival ** np.exp(-z * se_loglog)

        elif conf_type == "plain":
            se = survival * np.sqrt(var_log_survival)
            ci_lower = survival - z * se
            ci_upper = survival + z * se

        else:
            log_s = np.log(survival)
            se_log = np.sqrt(var_log_survival)
            ci_lower = np.exp(log_s - z * se_log)
            ci_upper = np.exp(log_s + z * se_log)

    # No events yet: S = 1 with zero variance
    flat = var_log_survival == 0
    ci_lower = np.where(flat, survival, ci_lower)
    ci_upper = np.where(flat, survival, ci_upper)

    # S = 0 or infinite variance: no interval exists
    undefined = (survival == 0) | np.isinf(var_log_survival)
    ci_lower = np.where(undefined, np.nan, ci_lower)
    ci_upper = np.where(undefined, np.nan, ci_upper)

    with np.errstate(invalid='ignore'):
        out_of_range = (ci_lower < 0) | (ci_upper > 1)

    return ci_lower, ci_upper, out_of_range
