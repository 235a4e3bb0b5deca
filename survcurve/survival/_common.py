"""
Parameter payloads for survival curve results.

Each dataclass is a frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class RiskSetTable:
    """Counting-process summary at each distinct exit time."""

    time: NDArray                # (m,) distinct exit times, ascending
    n_risk: NDArray              # (m,) entry < t <= exit
    n_events: NDArray            # (m,) events at t
    n_censored: NDArray          # (m,) censored at t
    n_enter: NDArray             # (m,) entries in [previous time, t)


@dataclass(frozen=True)
class SurvfitParams:
    """Survival curve estimate.

    One row per distinct exit time (event and censoring times alike),
    matching the rows stored in R's survfit object. Arrays are read-only.
    """

    time: NDArray                # (m,) distinct exit times
    n_risk: NDArray              # (m,) number at risk at each time
    n_events: NDArray            # (m,) events at each time
    n_censored: NDArray          # (m,) censored at each time
    n_enter: NDArray             # (m,) late entries before each time
    survival: NDArray            # (m,) S(t)
    cumhaz: NDArray              # (m,) Nelson-Aalen H(t)
    var_log_survival: NDArray    # (m,) Σ d/(n(n-d)); inf once n == d
    std_err: NDArray             # (m,) standard error of S(t); NaN if undefined
    ci_lower: NDArray            # (m,) lower bound; NaN if undefined
    ci_upper: NDArray            # (m,) upper bound; NaN if undefined
    out_of_range: NDArray        # (m,) bool: a bound lies outside [0, 1]
    method: str                  # "kaplan-meier" or "nelson-aalen"
    conf_level: float            # confidence level (e.g. 0.95)
    conf_type: str               # "log-log" (default), "plain", "log", "none"
    truncated: bool              # entry times were in effect
    n_observations: int          # total n
    n_events_total: int          # total events
