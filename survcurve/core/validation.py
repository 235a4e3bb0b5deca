"""
Input validation utilities for survcurve.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from survcurve.core.exceptions import DimensionError, InvalidInputError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like, including boolean indicators. Rejects inputs
    that result in object dtype or a non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        InvalidInputError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise InvalidInputError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype != np.bool_ and not np.issubdtype(result.dtype, np.number):
        raise InvalidInputError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        InvalidInputError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise InvalidInputError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InvalidInputError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InvalidInputError(
            f"{name}: requires at least {min_samples} observation(s), got {n}"
        )


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify no element is negative.

    Raises:
        InvalidInputError: If any value is below zero
    """
    if np.any(array < 0):
        n_neg = int(np.sum(array < 0))
        raise InvalidInputError(
            f"{name}: must be non-negative, found {n_neg} negative value(s) "
            f"(minimum {float(np.min(array))})"
        )


def check_binary(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array holds only 0 and 1.

    Raises:
        InvalidInputError: If any other value is present
    """
    unique = np.unique(array)
    if not np.all(np.isin(unique, [0.0, 1.0])):
        raise InvalidInputError(
            f"{name}: must contain only 0 and 1, got unique values: {unique}"
        )


def check_positive_scalar(value: float, name: str) -> float:
    """
    Verify a scalar parameter is a finite, strictly positive number.

    Returns:
        The value as a Python float

    Raises:
        InvalidInputError: If value is not > 0
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name}: expected a number, got {value!r}") from e
    if not np.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{name}: must be a positive finite number, got {value}")
    return value


def check_open_unit_interval(value: float, name: str) -> float:
    """
    Verify a scalar lies strictly between 0 and 1.

    Returns:
        The value as a Python float

    Raises:
        InvalidInputError: If value is outside (0, 1)
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name}: expected a number, got {value!r}") from e
    if not 0.0 < value < 1.0:
        raise InvalidInputError(f"{name} must be in (0, 1), got {value}")
    return value
