"""
Risk-set bookkeeping for (entry, exit] counting-process data.

A subject is at risk at time t when entry < t <= exit. With every entry at
zero this reduces to the usual "still under observation" count; with late
entries (left truncation) the risk set can grow as well as shrink.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from survcurve.core.exceptions import EmptyRiskSetError
from survcurve.survival._common import RiskSetTable


def risk_set_table(
    entry: NDArray,
    time: NDArray,
    event: NDArray,
) -> RiskSetTable:
    """Tabulate risk set size, events and censorings at each exit time.

    Parameters
    ----------
    entry : NDArray
        (n,) entry times.
    time : NDArray
        (n,) exit times, each strictly greater than its entry.
    event : NDArray
        (n,) event indicator (1=event, 0=censored).

    Returns
    -------
    RiskSetTable
    """
    times = np.unique(time)
    m = len(times)

    # Since entry < exit, anyone with exit < t also has entry < t:
    #   #{entry < t <= exit} = #{entry < t} - #{exit < t}
    entry_sorted = np.sort(entry)
    exit_sorted = np.sort(time)
    entered = np.searchsorted(entry_sorted, times, side='left')
    exited = np.searchsorted(exit_sorted, times, side='left')
    n_risk = (entered - exited).astype(np.float64)

    slot = np.searchsorted(times, time)
    n_events = np.bincount(slot, weights=event, minlength=m)
    n_censored = np.bincount(slot, weights=1.0 - event, minlength=m)

    n_enter = np.diff(entered, prepend=0).astype(np.float64)

    return RiskSetTable(
        time=times,
        n_risk=n_risk,
        n_events=n_events,
        n_censored=n_censored,
        n_enter=n_enter,
    )


def check_risk_set_coverage(entry: NDArray, time: NDArray) -> None:
    """Raise if the risk set empties out and later refills.

    Sweeps subjects in entry order, tracking the latest exit seen so far.
    A subject entering strictly after that point leaves an interval in which
    nobody is under observation.

    Raises
    ------
    EmptyRiskSetError
        With ``time`` set to where the risk set empties and ``resumes_at``
        to the next entry.
    """
    order = np.lexsort((time, entry))
    entry_sorted = entry[order]
    covered_until = np.maximum.accumulate(time[order])

    gaps = np.flatnonzero(entry_sorted[1:] > covered_until[:-1])
    if len(gaps) == 0:
        return

    k = int(gaps[0])
    empty_at = float(covered_until[k])
    resumes_at = float(entry_sorted[k + 1])
    raise EmptyRiskSetError(
        f"Risk set is empty between time {empty_at:g} and {resumes_at:g}: "
        f"every subject observed so far has exited before the next one "
        f"enters. The product-limit estimate across this gap is undefined; "
        f"restrict the analysis to times after {resumes_at:g} or before "
        f"{empty_at:g}.",
        time=empty_at,
        resumes_at=resumes_at,
    )
