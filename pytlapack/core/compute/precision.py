"""
Scalar-type traits.

Every kernel is written against these traits only, so the same code runs
over float32, float64, complex64 and complex128 storage. The constants
follow LAPACK's ``xLAMCH`` definitions where LAPACK and NumPy disagree:

    epsilon    np.finfo(dtype).eps              (distance from 1 to next float)
    uroundoff  epsilon / 2                      (xLAMCH('E'), rounding unit)
    safe_min   xLAMCH('S'): smallest normalized value whose reciprocal
               does not overflow
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ScalarTraits:
    """
    Numeric properties of one scalar type.

    Attributes:
        dtype: The scalar dtype itself
        real_dtype: dtype of real parts (and of norms computed from it)
        is_complex: True for complex dtypes
        epsilon: Machine epsilon of real_dtype
        uroundoff: Unit roundoff (epsilon / 2)
        safe_min: Safe minimum of real_dtype
        huge: Largest finite value of real_dtype
    """
    dtype: np.dtype
    real_dtype: np.dtype
    is_complex: bool
    epsilon: float
    uroundoff: float
    safe_min: float
    huge: float


@lru_cache(maxsize=None)
def _traits(dtype: np.dtype) -> ScalarTraits:
    if not np.issubdtype(dtype, np.inexact):
        raise TypeError(f"scalar traits require a floating dtype, got {dtype}")
    info = np.finfo(dtype)
    real_dtype = np.dtype(info.dtype)
    eps = info.eps
    sfmin = info.tiny
    small = real_dtype.type(1) / info.max
    if small >= sfmin:
        # Use the smallest number that does not overflow on reciprocation
        sfmin = small * (real_dtype.type(1) + eps)
    return ScalarTraits(
        dtype=dtype,
        real_dtype=real_dtype,
        is_complex=bool(np.issubdtype(dtype, np.complexfloating)),
        epsilon=real_dtype.type(eps),
        uroundoff=real_dtype.type(eps * real_dtype.type(0.5)),
        safe_min=real_dtype.type(sfmin),
        huge=real_dtype.type(info.max),
    )


def scalar_traits(dtype: np.dtype | type) -> ScalarTraits:
    """
    Get the traits of a scalar type.

    Args:
        dtype: NumPy dtype or scalar type (float32, float64, complex64, complex128)

    Returns:
        ScalarTraits for the dtype

    Raises:
        TypeError: If dtype is not a floating (real or complex) type
    """
    return _traits(np.dtype(dtype))


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """Machine epsilon of the real type underlying dtype."""
    return scalar_traits(dtype).epsilon


def safe_minimum(dtype: np.dtype | type = np.float64) -> float:
    """Safe minimum of the real type underlying dtype."""
    return scalar_traits(dtype).safe_min


def is_complex(dtype: np.dtype | type) -> bool:
    return scalar_traits(dtype).is_complex


def real_part(value: Any) -> Any:
    return value.real


def imag_part(value: Any) -> Any:
    """Imaginary part; the additive identity for real scalars."""
    return value.imag


def conj(value: Any) -> Any:
    return np.conj(value)


def absolute(value: Any) -> Any:
    return np.abs(value)
