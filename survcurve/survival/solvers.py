"""
Public API for survival curve estimation.

    survfit(time, event, ...) → SurvfitSolution
    kaplan_meier(time, event, ...) → SurvfitSolution
    nelson_aalen(time, event, ...) → SurvfitSolution

Each function validates inputs, creates a SurvivalDesign, runs the
estimator, and wraps the Result in a Solution.
"""

from __future__ import annotations

import warnings
from typing import Literal

import numpy as np

from survcurve.core.compute.timing import Timer
from survcurve.core.exceptions import InvalidInputError
from survcurve.core.result import Result
from survcurve.core.validation import check_open_unit_interval
from survcurve.survival._ci import CONF_TYPES
from survcurve.survival._survfit import survfit_fit
from survcurve.survival._common import SurvfitParams
from survcurve.survival.design import SurvivalDesign
from survcurve.survival.solution import SurvfitSolution

_METHOD_ALIASES = {
    "kaplan-meier": "kaplan-meier",
    "product-limit": "kaplan-meier",
    "km": "kaplan-meier",
    "nelson-aalen": "nelson-aalen",
    "fleming-harrington": "nelson-aalen",
    "fh": "nelson-aalen",
}

MethodName = Literal[
    "kaplan-meier", "product-limit", "km",
    "nelson-aalen", "fleming-harrington", "fh",
]
ConfType = Literal["log-log", "plain", "log", "none"]


def survfit(
    time,
    event,
    *,
    entry=None,
    method: MethodName = "kaplan-meier",
    conf_level: float = 0.95,
    conf_type: ConfType = "log-log",
    truncation: bool = False,
) -> SurvfitSolution:
    """Nonparametric survival curve estimation.

    Matches R's survival::survfit(Surv(time, event) ~ 1) and, with entry
    times, survfit(Surv(entry, time, event, type="counting") ~ 1).

    Parameters
    ----------
    time : array-like
        Exit time: time to event or censoring.
    event : array-like
        Event indicator (1=event, 0=censored).
    entry : array-like or None
        Entry times for left-truncated data. Requires ``truncation=True``
        unless all zero.
    method : str
        "kaplan-meier" (alias "product-limit", "km") or "nelson-aalen"
        (alias "fleming-harrington", "fh").
    conf_level : float
        Confidence level for CI (default 0.95).
    conf_type : str
        CI transformation: "log-log" (default), "plain", "log", "none".
    truncation : bool
        Allow late entry times; a subject is at risk at t when
        entry < t <= time.

    Returns
    -------
    SurvfitSolution

    Raises
    ------
    InvalidInputError
        If the observations or options are malformed.
    EmptyRiskSetError
        If the risk set empties out inside the follow-up.
    """
    if method not in _METHOD_ALIASES:
        raise InvalidInputError(
            f"method must be one of {sorted(_METHOD_ALIASES)}, got '{method}'"
        )
    method = _METHOD_ALIASES[method]

    conf_level = check_open_unit_interval(conf_level, "conf_level")

    if conf_type not in CONF_TYPES:
        raise InvalidInputError(
            f"conf_type must be 'log-log', 'plain', 'log', or 'none', "
            f"got '{conf_type}'"
        )

    design = SurvivalDesign.for_survival(
        time, event, entry, truncation=truncation,
    )

    timer = Timer()
    timer.start()

    with timer.section("estimate"):
        params = survfit_fit(
            design.entry, design.time, design.event,
            method=method,
            conf_level=conf_level,
            conf_type=conf_type,
            truncated=design.truncated,
        )

    with timer.section("diagnostics"):
        warnings_list = _diagnostics(params)

    timer.stop()

    n_out = int(np.sum(params.out_of_range))
    if n_out:
        warnings.warn(
            f"{conf_type} confidence bounds fall outside [0, 1] at {n_out} "
            f"time(s); bounds are not clipped (see out_of_range)",
            RuntimeWarning,
            stacklevel=2,
        )

    result = Result(
        params=params,
        info={
            "method": method,
            "conf_type": conf_type,
            "truncation": design.truncated,
            "n_times": len(params.time),
        },
        timing=timer.result(),
        backend_name="cpu_survfit",
        warnings=tuple(warnings_list),
    )

    return SurvfitSolution(_result=result)


def kaplan_meier(
    time,
    event,
    *,
    entry=None,
    conf_level: float = 0.95,
    conf_type: ConfType = "log-log",
    truncation: bool = False,
) -> SurvfitSolution:
    """Product-limit (Kaplan-Meier) estimate. See survfit()."""
    return survfit(
        time, event,
        entry=entry,
        method="kaplan-meier",
        conf_level=conf_level,
        conf_type=conf_type,
        truncation=truncation,
    )


def nelson_aalen(
    time,
    event,
    *,
    entry=None,
    conf_level: float = 0.95,
    conf_type: ConfType = "log-log",
    truncation: bool = False,
) -> SurvfitSolution:
    """Nelson-Aalen / Fleming-Harrington estimate. See survfit().

    Matches R's survfit(..., type="fh").
    """
    return survfit(
        time, event,
        entry=entry,
        method="nelson-aalen",
        conf_level=conf_level,
        conf_type=conf_type,
        truncation=truncation,
    )


def _diagnostics(params: SurvfitParams) -> list[str]:
    """Non-fatal conditions worth recording on the Result."""
    notes = []
    if params.n_events_total == 0:
        notes.append("No events observed: S(t) = 1 at every time")
    undefined = np.flatnonzero(np.isinf(params.var_log_survival))
    if len(undefined):
        t0 = params.time[undefined[0]]
        notes.append(
            f"Variance undefined from time {t0:g}: every subject at risk failed"
        )
    n_out = int(np.sum(params.out_of_range))
    if n_out:
        notes.append(
            f"Confidence bounds outside [0, 1] at {n_out} time(s) (not clipped)"
        )
    return notes
