"""
Exception hierarchy for survcurve.

All exceptions inherit from SurvCurveError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class SurvCurveError(Exception):
    """Base exception for all survcurve errors."""
    pass


class ValidationError(SurvCurveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidInputError(ValidationError, ValueError):
    """
    A survival observation or estimator option is malformed.

    Raised for exit times not after entry times, negative or non-finite
    times, event indicators outside {0, 1}, entry times supplied without
    truncation, and options outside their allowed range.
    """
    pass


class DimensionError(InvalidInputError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent lengths.
    """
    pass


class NumericalError(SurvCurveError):
    """
    Numerical computation failed.

    Base class for errors arising from the sample itself rather than
    from the way it was passed in.
    """
    pass


class EmptyRiskSetError(NumericalError):
    """
    Nobody is under observation at a time the estimate needs.

    With left-truncated data the risk set can empty out and later refill;
    the product over the gap is undefined. Querying a curve beyond the
    largest observed time raises this as well.

    Attributes:
        time: Time at which the risk set is empty
        resumes_at: Next time a subject is at risk again, or None if no
            subject is ever at risk again
    """

    def __init__(
        self,
        message: str,
        time: float | None = None,
        resumes_at: float | None = None,
    ):
        super().__init__(message)
        self.time = time
        self.resumes_at = resumes_at


class UndefinedBoundaryError(NumericalError):
    """
    A quantile or confidence limit is not reached within the data.

    The estimator itself reports such values as None; this is raised only
    when a caller explicitly requires a defined value.

    Attributes:
        quantity: Which value is undefined (e.g. 'median', 'upper')
    """

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity
