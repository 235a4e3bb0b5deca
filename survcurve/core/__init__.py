"""
Core infrastructure for survcurve.

Shared abstractions used by the survival subpackage.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from survcurve.core.result import Result
from survcurve.core.exceptions import (
    SurvCurveError,
    ValidationError,
    InvalidInputError,
    DimensionError,
    NumericalError,
    EmptyRiskSetError,
    UndefinedBoundaryError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "SurvCurveError",
    "ValidationError",
    "InvalidInputError",
    "DimensionError",
    "NumericalError",
    "EmptyRiskSetError",
    "UndefinedBoundaryError",
]
