"""
Level-1 BLAS: vector-vector operations.

All routines accept any VectorLike (or a 1-D ndarray) and work through
``as_array()``, so they see the caller's storage directly and honor
arbitrary (including negative) strides.
"""

from typing import Any

import numpy as np

from pytlapack.core.compute.precision import scalar_traits
from pytlapack.core.validation import check_min_length
from pytlapack.core.views import as_vector


def copy(x: Any, y: Any) -> None:
    """
    Copy vector, y = x.

    Copies len(y) elements; x must hold at least that many.

    Raises:
        ArgumentError: If len(x) < len(y) (position 1)
    """
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    n = len(y)
    check_min_length(len(x), n, 'x', 'copy', 1)
    y.as_array()[:] = x.as_array()[:n]


def scal(alpha: Any, x: Any) -> None:
    """Scale vector in place, x = alpha * x."""
    x = as_vector(x, 'x')
    xa = x.as_array()
    xa *= alpha


def axpy(alpha: Any, x: Any, y: Any) -> None:
    """
    y = alpha * x + y.

    Raises:
        ArgumentError: If len(x) < len(y) (position 2)
    """
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    n = len(y)
    check_min_length(len(x), n, 'x', 'axpy', 2)
    if alpha == 0:
        return
    ya = y.as_array()
    ya += alpha * x.as_array()[:n]


def dot(x: Any, y: Any) -> Any:
    """Unconjugated dot product, sum x[i] * y[i]."""
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    n = len(x)
    check_min_length(len(y), n, 'y', 'dot', 2)
    return np.dot(x.as_array(), y.as_array()[:n])


def dotc(x: Any, y: Any) -> Any:
    """Conjugated dot product, sum conj(x[i]) * y[i]."""
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    n = len(x)
    check_min_length(len(y), n, 'y', 'dotc', 2)
    return np.vdot(x.as_array(), y.as_array()[:n])


def nrm2(x: Any) -> Any:
    """
    Euclidean norm of x, returned in the real type of x.

    The sum of squares is formed on |x| / max|x|, so the result neither
    underflows to zero for tiny entries nor overflows for huge ones.
    """
    x = as_vector(x, 'x')
    real_type = scalar_traits(x.dtype).real_dtype.type
    if len(x) == 0:
        return real_type(0)
    mag = np.abs(x.as_array())
    scale = mag.max()
    if scale == 0 or not np.isfinite(scale):
        return real_type(scale)
    return real_type(scale * np.sqrt(np.sum(np.square(mag / scale))))
