"""
Survival curve estimation.

Public API:
    survfit(...) -> SurvfitSolution
    kaplan_meier(...) -> SurvfitSolution
    nelson_aalen(...) -> SurvfitSolution
    plot_survival(solution, ax=None) -> Axes
    parametric: Weibull / exponential / gamma curves
"""

from survcurve.survival import parametric
from survcurve.survival._median import MedianSurvival
from survcurve.survival.design import SurvivalDesign
from survcurve.survival.plotting import StepCoordinates, plot_survival, step_coordinates
from survcurve.survival.solution import SurvfitSolution
from survcurve.survival.solvers import kaplan_meier, nelson_aalen, survfit

__all__ = [
    "survfit",
    "kaplan_meier",
    "nelson_aalen",
    "SurvfitSolution",
    "SurvivalDesign",
    "MedianSurvival",
    "plot_survival",
    "step_coordinates",
    "StepCoordinates",
    "parametric",
]
