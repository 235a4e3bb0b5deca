"""
Step-function rendering of a survival curve.

Both functions take the solution explicitly. plot_survival() draws on the
Axes it is given (or a new one) and never touches pyplot's current figure.
matplotlib is imported lazily so the estimators work without it.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from survcurve.core.exceptions import InvalidInputError


@dataclass(frozen=True)
class StepCoordinates:
    """Vertices of the right-continuous step curve, drawn with where='post'.

    A leading point at ``origin`` with S = 1 is prepended.
    """

    x: NDArray
    survival: NDArray
    lower: NDArray
    upper: NDArray
    censored_x: NDArray
    censored_y: NDArray


def step_coordinates(solution, origin: float = 0.0) -> StepCoordinates:
    """Build step-function vertices from a SurvfitSolution."""
    time = np.asarray(solution.time)
    if len(time) and origin > time[0]:
        raise InvalidInputError(
            f"origin must not exceed the first time {time[0]:g}, got {origin:g}"
        )
    x = np.concatenate(([origin], time))
    surv = np.concatenate(([1.0], solution.survival))
    lower = np.concatenate(([1.0], solution.ci_lower))
    upper = np.concatenate(([1.0], solution.ci_upper))

    censored = np.asarray(solution.n_censored) > 0
    return StepCoordinates(
        x=x,
        survival=surv,
        lower=lower,
        upper=upper,
        censored_x=time[censored],
        censored_y=np.asarray(solution.survival)[censored],
    )


def plot_survival(
    solution,
    ax=None,
    *,
    ci: bool = True,
    mark_censored: bool = True,
    color: str = "black",
    ci_color: str = "grey",
    label: str | None = "Probability",
):
    """Plot S(t) as a step function with optional confidence bands.

    Parameters
    ----------
    solution : SurvfitSolution
        Fitted curve.
    ax : matplotlib.axes.Axes or None
        Axes to draw on. A new figure is created if None.
    ci : bool
        Draw the confidence bounds as dashed steps (skipped for
        conf_type="none").
    mark_censored : bool
        Mark censoring times with '+'.

    Returns
    -------
    matplotlib.axes.Axes
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    coords = step_coordinates(solution)
    ax.step(coords.x, coords.survival, where="post", color=color, label=label)

    if ci and solution.conf_type != "none":
        pct = f"{solution.conf_level * 100:g}"
        ax.step(coords.x, coords.lower, where="post", color=ci_color,
                linestyle="--", label=f"{pct}% CI")
        ax.step(coords.x, coords.upper, where="post", color=ci_color,
                linestyle="--")

    if mark_censored and len(coords.censored_x):
        ax.plot(coords.censored_x, coords.censored_y, linestyle="none",
                marker="+", color=color)

    ax.set_xlabel("Time to event")
    ax.set_ylabel("Survival probability")
    ax.set_ylim(0.0, 1.05)
    if label is not None:
        ax.legend(loc="lower left")
    return ax
