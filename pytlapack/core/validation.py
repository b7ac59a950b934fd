"""
Input validation utilities for pytlapack.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Two families live here:
    - Array validators (check_array, check_finite, check_2d, ...) used by
      the high-level solvers at the user boundary.
    - Argument validators (check_tag, check_nonnegative, ...) used at the
      entry of every kernel. They raise ArgumentError carrying the routine
      name and the 1-based argument position, and they run before any
      operand is written.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from enum import Enum
from typing import Any, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytlapack.core.exceptions import ArgumentError, DimensionError, ValidationError

E = TypeVar('E', bound=Enum)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.inexact[Any]]:
    """
    Validate and convert input to a floating (real or complex) numpy array.

    Integer and boolean inputs are promoted to float64. Complex inputs keep
    their complex dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.inexact[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.inexact[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_tag(value: Any, tag: type[E], routine: str, position: int) -> E:
    """
    Convert a tag argument (member or letter) to its enumeration member.

    Args:
        value: Enum member or single-letter string
        tag: The tag enumeration (Layout, Op, Uplo, Diag, Side)
        routine: Routine name for the error
        position: 1-based argument position

    Returns:
        The enumeration member

    Raises:
        ArgumentError: If value names no member of the enumeration
    """
    try:
        return tag.coerce(value)
    except ValueError as e:
        raise ArgumentError(str(e), routine, position) from e


def check_nonnegative(value: int, name: str, routine: str, position: int) -> None:
    """
    Verify a dimension argument is >= 0.

    Raises:
        ArgumentError: If value is negative
    """
    if value < 0:
        raise ArgumentError(f"{name} must be non-negative, got {value}", routine, position)


def check_leading_dimension(
    ld: int,
    minimum: int,
    name: str,
    routine: str,
    position: int,
) -> None:
    """
    Verify a leading dimension is at least max(1, minimum).

    Raises:
        ArgumentError: If ld is too small
    """
    required = max(1, minimum)
    if ld < required:
        raise ArgumentError(f"{name}={ld} must be >= {required}", routine, position)


def check_min_length(
    length: int,
    minimum: int,
    name: str,
    routine: str,
    position: int,
) -> None:
    """
    Verify a vector or buffer holds at least ``minimum`` elements.

    Raises:
        ArgumentError: If length < minimum
    """
    if length < minimum:
        raise ArgumentError(
            f"{name} has length {length}, at least {minimum} required", routine, position
        )


def check_output_dtype(
    dtype: Any,
    source: Any,
    name: str,
    routine: str,
    position: int,
) -> None:
    """
    Verify an output of dtype ``dtype`` can hold values of dtype ``source``.

    Raises:
        ArgumentError: If dtype is not floating point, or storing a
            ``source`` value would drop its imaginary part
    """
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        raise ArgumentError(
            f"{name} has dtype {dtype}, expected real or complex floating point",
            routine, position,
        )
    if not np.can_cast(source, dtype, 'same_kind'):
        raise ArgumentError(
            f"{name} has dtype {dtype}, which cannot hold {np.dtype(source)} values",
            routine, position,
        )


def check_writeable(array: Any, name: str) -> None:
    """
    Verify an output operand can be written in place.

    Raises:
        ValidationError: If array is not a writeable ndarray
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: output operand must be a numpy.ndarray, got {type(array).__name__}"
        )
    if not array.flags.writeable:
        raise ValidationError(f"{name}: output operand is read-only")
