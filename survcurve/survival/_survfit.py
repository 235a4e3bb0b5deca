"""
Product-limit and Nelson-Aalen survival curve estimators.

Matches R's survival::survfit(Surv(time, event) ~ 1) and, for left-truncated
data, survfit(Surv(entry, time, event, type="counting") ~ 1):

- Product-limit (Kaplan-Meier): S(t) = ∏_{t_i <= t} (1 - d_i / n_i)
- Nelson-Aalen / Fleming-Harrington (type="fh"):
      H(t) = Σ_{t_i <= t} d_i / n_i,  S(t) = exp(-H(t))
- Delta-method variance of log S(t), shared by both estimators:
      var(log S(t)) ≈ Σ_{t_i <= t} d_i / (n_i (n_i - d_i))

A term with n_i == d_i has a zero denominator. Its contribution is +inf and
the sum stays +inf from that row on, where R reports NA.

References:
    Kaplan, E. L., & Meier, P. (1958). Nonparametric estimation from
        incomplete observations. JASA, 53(282), 457-481.
    Fleming, T. R. & Harrington, D. P. (1984). Nonparametric estimation of
        the survival distribution in censored data. Comm. Statist. 13,
        2469-2486.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from survcurve.survival._ci import confidence_bounds
from survcurve.survival._common import RiskSetTable, SurvfitParams
from survcurve.survival._risk import check_risk_set_coverage, risk_set_table

METHODS = ("kaplan-meier", "nelson-aalen")


def survfit_fit(
    entry: NDArray,
    time: NDArray,
    event: NDArray,
    method: str,
    conf_level: float,
    conf_type: str,
    truncated: bool = False,
) -> SurvfitParams:
    """Compute a survival curve with pointwise confidence bounds.

    Parameters
    ----------
    entry : NDArray
        (n,) entry times (zeros for ordinary right-censored data).
    time : NDArray
        (n,) exit times.
    event : NDArray
        (n,) event indicator (1=event, 0=censored).
    method : str
        "kaplan-meier" or "nelson-aalen".
    conf_level : float
        Confidence level for CI (e.g. 0.95).
    conf_type : str
        CI type: "log-log" (default), "plain", "log", "none".
    truncated : bool
        Recorded on the result; risk sets always honour entry times.

    Returns
    -------
    SurvfitParams

    Raises
    ------
    EmptyRiskSetError
        If nobody is at risk over some interval inside the follow-up.
    """
    if method not in METHODS:
        raise ValueError(
            f"Unknown method '{method}'. Choose from 'kaplan-meier', 'nelson-aalen'."
        )

    check_risk_set_coverage(entry, time)
    table = risk_set_table(entry, time, event)

    survival, cumhaz = _survival_curve(table, method)
    var_log = _greenwood_sum(table)

    with np.errstate(invalid='ignore'):
        std_err = survival * np.sqrt(var_log)
    std_err = np.where((survival == 0) | np.isinf(var_log), np.nan, std_err)

    ci_lower, ci_upper, out_of_range = confidence_bounds(
        survival, var_log, conf_level, conf_type,
    )

    columns = dict(
        time=table.time,
        n_risk=table.n_risk,
        n_events=table.n_events,
        n_censored=table.n_censored,
        n_enter=table.n_enter,
        survival=survival,
        cumhaz=cumhaz,
        var_log_survival=var_log,
        std_err=std_err,
        ci_lower=ci_lower,
        ci_upper=ci_upper,
        out_of_range=out_of_range,
    )
    for arr in columns.values():
        arr.setflags(write=False)

    return SurvfitParams(
        **columns,
        method=method,
        conf_level=conf_level,
        conf_type=conf_type,
        truncated=truncated,
        n_observations=len(time),
        n_events_total=int(np.sum(event)),
    )


def _survival_curve(table: RiskSetTable, method: str) -> tuple[NDArray, NDArray]:
    """Return (S(t), H(t)) for the requested estimator.

    H(t) is the Nelson-Aalen cumulative hazard for both methods, as in
    R's survfit()$cumhaz.
    """
    hazard = table.n_events / table.n_risk
    cumhaz = np.cumsum(hazard)

    if method == "kaplan-meier":
        survival = np.cumprod(1.0 - hazard)
    else:
        survival = np.exp(-cumhaz)

    return survival, cumhaz


def _greenwood_sum(table: RiskSetTable) -> NDArray:
    """Cumulative Σ d_i / (n_i (n_i - d_i)), +inf from the first n_i == d_i."""
    d = table.n_events
    n = table.n_risk
    denom = n * (n - d)
    with np.errstate(divide='ignore', invalid='ignore'):
        terms = np.where(d > 0, d / denom, 0.0)
    return np.cumsum(terms)
