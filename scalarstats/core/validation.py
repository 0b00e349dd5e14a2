"""
Input validation utilities for scalarstats.

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

from scalarstats.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyInputError,
    DomainError,
)


def check_array(
    array: ArrayLike,
    name: str,
    *,
    coerce_float: bool = True,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like (or an object exposing ``.values``, such as a
    pandas Series) and converts to numpy array. Rejects inputs that result
    in object dtype or any other non-numeric dtype. Booleans are treated
    as numeric.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        coerce_float: If True, integer and boolean input is promoted to
            float64. Floating input keeps its precision either way.

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, np.ndarray):
        array = array.values

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        result = result.astype(np.int64)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} has no ordering, expected real data"
        )

    if coerce_float and not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def float_type(dtype: np.dtype) -> type[np.floating[Any]]:
    """
    Floating-point type that values of ``dtype`` are reported in.

    Floating dtypes map to themselves; everything else maps to float64.
    """
    if np.issubdtype(dtype, np.floating):
        return np.dtype(dtype).type
    return np.float64


def check_no_nan(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN values.

    Infinities are allowed: they have a well-defined order.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains NaN
    """
    if np.issubdtype(array.dtype, np.floating):
        n_nan = int(np.sum(np.isnan(array)))
        if n_nan:
            raise ValidationError(
                f"{name}: contains {n_nan} NaN value(s), which have no order"
            )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_not_empty(array: NDArray[Any], name: str) -> None:
    """
    Verify array has at least one element.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        EmptyInputError: If array has no elements
    """
    if array.size == 0:
        raise EmptyInputError(f"{name}: cannot be empty", name=name)


def check_min_samples(array: NDArray[Any], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        EmptyInputError: If array is empty
        ValidationError: If array has fewer than min_samples
    """
    check_not_empty(array, name)
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_probabilities(probs: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a quantile request.

    Args:
        probs: Scalar or 1D array-like of probabilities
        name: Parameter name for error messages

    Returns:
        1D float64 array of probabilities, input order preserved

    Raises:
        DimensionError: If probs has more than one dimension
        DomainError: If any probability is NaN or outside [0, 1]
    """
    result = np.atleast_1d(check_array(probs, name)).astype(np.float64, copy=False)
    check_1d(result, name)

    bad = np.isnan(result) | (result < 0.0) | (result > 1.0)
    if np.any(bad):
        idx = int(np.flatnonzero(bad)[0])
        raise DomainError(
            f"{name}: probabilities must lie in [0, 1], got {float(result[idx])} at position {idx}",
            value=float(result[idx]),
            lower=0.0,
            upper=1.0,
        )
    return result
