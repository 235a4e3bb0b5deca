"""
Median survival time and its confidence interval.

The median is the smallest time at which S(t) <= 0.5. Its confidence limits
are read off the pointwise bands the same way (Brookmeyer & Crowley, 1982):
the lower limit is where the lower band first reaches 0.5, the upper limit
where the upper band does. A limit the data never reach is undefined and
is reported as None, mirroring the NA in R's print.survfit().
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from survcurve.core.exceptions import UndefinedBoundaryError


@dataclass(frozen=True)
class MedianSurvival:
    """Median survival time with confidence limits.

    Each of ``estimate``, ``lower`` and ``upper`` is either a time or None
    when the curve (or band) never falls to 0.5 within the observed data.
    """

    estimate: float | None
    lower: float | None
    upper: float | None
    conf_level: float

    @property
    def is_defined(self) -> bool:
        """True when the estimate and both limits are finite times."""
        return None not in (self.estimate, self.lower, self.upper)

    def require(self) -> tuple[float, float, float]:
        """Return (estimate, lower, upper), raising if any is undefined."""
        for name, value in (
            ("median", self.estimate),
            ("lower", self.lower),
            ("upper", self.upper),
        ):
            if value is None:
                raise UndefinedBoundaryError(
                    f"{name} of median survival is undefined: the "
                    f"{'curve' if name == 'median' else name + ' confidence band'} "
                    f"never drops to 0.5 within the observed data",
                    quantity=name,
                )
        return self.estimate, self.lower, self.upper

    def __str__(self) -> str:
        def fmt(v):
            return "NA" if v is None else f"{v:.4g}"
        pct = f"{self.conf_level * 100:g}"
        return (
            f"median={fmt(self.estimate)} "
            f"({pct}% CI {fmt(self.lower)}, {fmt(self.upper)})"
        )


def first_crossing(time: NDArray, curve: NDArray, level: float = 0.5) -> float | None:
    """Smallest time at which ``curve <= level``, or None."""
    with np.errstate(invalid='ignore'):
        hits = np.flatnonzero(curve <= level)
    if len(hits) == 0:
        return None
    return float(time[hits[0]])


def median_survival(
    time: NDArray,
    survival: NDArray,
    ci_lower: NDArray,
    ci_upper: NDArray,
    conf_level: float,
) -> MedianSurvival:
    """Median survival time and its confidence limits."""
    return MedianSurvival(
        estimate=first_crossing(time, survival),
        lower=first_crossing(time, ci_lower),
        upper=first_crossing(time, ci_upper),
        conf_level=conf_level,
    )
