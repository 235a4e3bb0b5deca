"""
survcurve: nonparametric survival curve estimation for Python.

Product-limit and Nelson-Aalen estimators with delta-method variance,
log-log / plain / log confidence intervals, median survival and
left-truncated data, matching R's survival::survfit().

Submodules:
    survival: Curve estimation, plotting and parametric curves
    core: Exceptions, result envelope, validation
"""

__version__ = "0.1.0"

from survcurve import survival
from survcurve.core.exceptions import (
    EmptyRiskSetError,
    InvalidInputError,
    SurvCurveError,
    UndefinedBoundaryError,
)
from survcurve.survival import kaplan_meier, nelson_aalen, survfit

__all__ = [
    "__version__",
    "survival",
    "survfit",
    "kaplan_meier",
    "nelson_aalen",
    "SurvCurveError",
    "InvalidInputError",
    "EmptyRiskSetError",
    "UndefinedBoundaryError",
]
