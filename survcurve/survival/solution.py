"""
Solution wrapper for survival curve results.

Wraps a Result[SurvfitParams] and exposes user-friendly properties with
R-style print and summary() methods.
"""

from __future__ import annotations

import numpy as np

from survcurve.core.exceptions import EmptyRiskSetError
from survcurve.core.validation import check_finite
from survcurve.core.result import Result
from survcurve.survival._common import SurvfitParams
from survcurve.survival._median import MedianSurvival, median_survival

_METHOD_LABELS = {
    "kaplan-meier": "Kaplan-Meier",
    "nelson-aalen": "Nelson-Aalen (Fleming-Harrington)",
}

_MAX_ROWS = 20


class SurvfitSolution:
    """Survival curve solution.

    Properties mirror R's survfit() object. Rows cover every distinct exit
    time; ``summary()`` shows only the rows where events occur.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[SurvfitParams]) -> None:
        self._result = _result

    # -- Properties delegating to SurvfitParams --

    @property
    def params(self) -> SurvfitParams:
        """The immutable curve estimate."""
        return self._result.params

    @property
    def time(self):
        """Distinct exit times."""
        return self._result.params.time

    @property
    def survival(self):
        """S(t) at each time."""
        return self._result.params.survival

    @property
    def cumhaz(self):
        """Nelson-Aalen cumulative hazard H(t)."""
        return self._result.params.cumhaz

    @property
    def n_risk(self):
        """Number at risk at each time."""
        return self._result.params.n_risk

    @property
    def n_events(self):
        """Number of events at each time."""
        return self._result.params.n_events

    @property
    def n_censored(self):
        """Number censored at each time."""
        return self._result.params.n_censored

    @property
    def n_enter(self):
        """Late entries since the previous time (left-truncated data)."""
        return self._result.params.n_enter

    @property
    def var_log_survival(self):
        """Delta-method variance of log S(t); inf where undefined."""
        return self._result.params.var_log_survival

    @property
    def std_err(self):
        """Standard error of S(t)."""
        return self._result.params.std_err

    @property
    def ci_lower(self):
        """Lower confidence bound for S(t)."""
        return self._result.params.ci_lower

    @property
    def ci_upper(self):
        """Upper confidence bound for S(t)."""
        return self._result.params.ci_upper

    @property
    def out_of_range(self):
        """Row-wise flag: a confidence bound lies outside [0, 1]."""
        return self._result.params.out_of_range

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def conf_type(self) -> str:
        return self._result.params.conf_type

    @property
    def truncated(self) -> bool:
        return self._result.params.truncated

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_events_total(self) -> int:
        return self._result.params.n_events_total

    @property
    def median(self) -> MedianSurvival:
        """Median survival time with confidence limits."""
        p = self._result.params
        return median_survival(
            p.time, p.survival, p.ci_lower, p.ci_upper, p.conf_level,
        )

    @property
    def median_survival(self) -> float | None:
        """Median survival time (smallest t where S(t) <= 0.5)."""
        return self.median.estimate

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    # -- Step-function evaluation --

    def survival_at(self, t):
        """Evaluate the right-continuous step function S(t).

        Times before the first row give 1.0. Times after the largest
        observed exit time raise, since nobody is at risk there.

        Parameters
        ----------
        t : float or array-like
            Time(s) at which to evaluate.

        Returns
        -------
        float or NDArray
            Same shape as ``t``.

        Raises
        ------
        EmptyRiskSetError
            If any requested time exceeds the largest observed time.
        InvalidInputError
            If any requested time is NaN or infinite.
        """
        return self._step_lookup(t, self.survival, fill=1.0)

    def cumhaz_at(self, t):
        """Evaluate the cumulative hazard step function H(t)."""
        return self._step_lookup(t, self.cumhaz, fill=0.0)

    def _step_lookup(self, t, values, fill: float):
        t_arr = np.asarray(t, dtype=np.float64)
        check_finite(t_arr, "t")
        last = float(self.time[-1])
        if np.any(t_arr > last):
            beyond = float(np.max(t_arr))
            raise EmptyRiskSetError(
                f"Cannot evaluate the curve at t={beyond:g}: no subject is "
                f"at risk after the largest observed time {last:g}",
                time=beyond,
                resumes_at=None,
            )
        idx = np.searchsorted(self.time, t_arr, side='right') - 1
        out = np.where(idx >= 0, values[np.maximum(idx, 0)], fill)
        if out.ndim == 0:
            return float(out)
        return out

    # -- Reporting --

    def summary(self) -> str:
        """R-style summary: header plus the table at event times."""
        lines = [self._header(), ""]
        mask = self.n_events > 0
        lines.extend(self._table(np.flatnonzero(mask)))
        return "\n".join(lines)

    def print_table(self) -> str:
        """Table over every stored time, censoring times included."""
        return "\n".join(self._table(np.arange(len(self.time))))

    def _header(self) -> str:
        label = _METHOD_LABELS[self.method]
        med = self.median
        pct = f"{self.conf_level * 100:g}"

        def fmt(v):
            return "NA" if v is None else f"{v:.4g}"

        lines = [
            f"Call: survfit(method={self.method!r}, conf_type={self.conf_type!r})",
            f"  {label} estimate"
            + (" (left-truncated)" if self.truncated else ""),
            "",
            f"  {'records':>8s}  {'events':>8s}  {'median':>8s}  "
            f"{pct + '%LCL':>8s}  {pct + '%UCL':>8s}",
            f"  {self.n_observations:8d}  {self.n_events_total:8d}  "
            f"{fmt(med.estimate):>8s}  {fmt(med.lower):>8s}  {fmt(med.upper):>8s}",
        ]
        return "\n".join(lines)

    def _table(self, rows) -> list[str]:
        pct = f"{self.conf_level * 100:g}"
        lines = [
            f"  {'time':>8s}  {'n.risk':>8s}  {'n.event':>8s}  "
            f"{'survival':>10s}  {'std.err':>10s}  "
            f"{'lower ' + pct + '%':>10s}  {'upper ' + pct + '%':>10s}"
        ]

        def fmt(v, width=10):
            return f"{'NA':>{width}s}" if not np.isfinite(v) else f"{v:{width}.6f}"

        show = rows[:_MAX_ROWS]
        for i in show:
            flag = " *" if self.out_of_range[i] else ""
            lines.append(
                f"  {self.time[i]:8.4g}  {self.n_risk[i]:8.0f}  "
                f"{self.n_events[i]:8.0f}  "
                f"{fmt(self.survival[i])}  {fmt(self.std_err[i])}  "
                f"{fmt(self.ci_lower[i])}  {fmt(self.ci_upper[i])}{flag}"
            )
        if len(rows) > _MAX_ROWS:
            lines.append(f"  ... ({len(rows) - _MAX_ROWS} more rows)")
        if np.any(self.out_of_range[rows]):
            lines.append("  * confidence bound outside [0, 1] (not clipped)")
        return lines

    def __repr__(self) -> str:
        med = self.median_survival
        return (
            f"SurvfitSolution(method={self.method!r}, "
            f"n={self.n_observations}, "
            f"events={self.n_events_total}, "
            f"median={med})"
        )
