"""
SurvivalDesign: immutable container for time-to-event data.

Wraps exit time, event indicator and optional entry (left-truncation) time.
Validates inputs at construction time: all downstream code trusts clean data.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from survcurve.core.exceptions import InvalidInputError
from survcurve.core.validation import (
    check_1d,
    check_array,
    check_binary,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_non_negative,
)


@dataclass(frozen=True)
class SurvivalDesign:
    """Immutable survival data container.

    Parameters
    ----------
    entry : NDArray
        Time each subject enters observation. All zeros unless the data
        are left-truncated.
    time : NDArray
        Exit time: time to event or censoring. Strictly after entry.
    event : NDArray
        Event indicator: 1 = event observed, 0 = censored.
    truncated : bool
        True if entry times other than zero are in effect.
    """

    entry: NDArray
    time: NDArray
    event: NDArray
    truncated: bool

    @classmethod
    def for_survival(
        cls,
        time,
        event,
        entry=None,
        *,
        truncation: bool = False,
    ) -> SurvivalDesign:
        """Create and validate survival data.

        Parameters
        ----------
        time : array-like
            Exit time (event or censoring).
        event : array-like
            Event indicator (0/1 or bool).
        entry : array-like or None
            Entry times for left-truncated data. None means every subject
            is observed from time 0.
        truncation : bool
            Must be True for non-zero entry times to be accepted.

        Returns
        -------
        SurvivalDesign

        Raises
        ------
        InvalidInputError
            If inputs are invalid.
        """
        time = check_array(time, "time").ravel()
        event = check_array(event, "event").ravel()

        check_min_samples(time, 1, "time")
        check_consistent_length(time, event, names=("time", "event"))
        check_finite(time, "time")
        check_non_negative(time, "time")
        check_finite(event, "event")
        check_binary(event, "event")

        if entry is None:
            entry = np.zeros_like(time)
        else:
            entry = check_array(entry, "entry")
            check_1d(entry, "entry")
            check_consistent_length(time, entry, names=("time", "entry"))
            check_finite(entry, "entry")
            check_non_negative(entry, "entry")
            if not truncation and np.any(entry != 0):
                raise InvalidInputError(
                    "entry: non-zero entry times require truncation=True "
                    f"(found {int(np.sum(entry != 0))} non-zero)"
                )

        bad = time <= entry
        if np.any(bad):
            idx = int(np.flatnonzero(bad)[0])
            raise InvalidInputError(
                f"time must be greater than entry for every observation: "
                f"{int(np.sum(bad))} violation(s), first at index {idx} "
                f"(entry={entry[idx]}, time={time[idx]})"
            )

        return cls(
            entry=entry,
            time=time,
            event=event,
            truncated=bool(truncation),
        )

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self.time)

    @property
    def n_events(self) -> int:
        """Number of observed events."""
        return int(np.sum(self.event))

    @property
    def n_censored(self) -> int:
        return self.n - self.n_events
