"""
Pointer-style LAPACK entry points.
"""

from typing import Any

import numpy as np

from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Layout
from pytlapack.core.validation import (
    check_leading_dimension,
    check_nonnegative,
    check_output_dtype,
)
from pytlapack.core.views import MatrixView, VectorView
from pytlapack.interface._common import check_storage
from pytlapack.lapack.geqr2 import geqr2 as geqr2_view


def geqr2(m: int, n: int, a: Any, lda: int, tau: Any) -> int:
    """
    QR factorization of a column-major m-by-n matrix in a flat buffer.

    Args:
        m: Number of rows, m >= 0
        n: Number of columns, n >= 0
        a: Flat buffer holding A (column-major, leading dimension lda),
           overwritten with R and the Householder vectors
        lda: Leading dimension, lda >= max(1, m)
        tau: Buffer of length >= min(m, n), receives the reflector factors

    Returns:
        0 on success

    Raises:
        ArgumentError: m (1), n (2), a (3), lda (4) or tau (5) invalid

    Notes:
        When n <= m and tau has the dtype of a, tau[1:] doubles as the
        n-1 workspace; otherwise a workspace is allocated for the call.
    """
    check_nonnegative(m, 'm', 'geqr2', 1)
    check_nonnegative(n, 'n', 'geqr2', 2)
    check_leading_dimension(lda, m, 'lda', 'geqr2', 4)
    check_storage(a, m, n, lda, Layout.ColMajor, 'a', 'geqr2', 3, writeable=True)
    k = min(m, n)
    if k > 0:
        if not isinstance(tau, np.ndarray) or tau.ndim != 1:
            raise ArgumentError("tau must be a 1-D numpy.ndarray", 'geqr2', 5)
        check_output_dtype(tau.dtype, a.dtype, 'tau', 'geqr2', 5)
        if not tau.flags.writeable:
            raise ArgumentError("tau is read-only", 'geqr2', 5)
        if tau.shape[0] < k:
            raise ArgumentError(f"tau has length {tau.shape[0]}, at least {k} required", 'geqr2', 5)

    if k == 0:
        return 0

    A = MatrixView.from_buffer(a, m, n, lda, Layout.ColMajor)
    tau_view = VectorView.from_buffer(tau, k)
    if tau.dtype == a.dtype and n - 1 < m:
        # The reflector factor tau[i] is written before tau[i+1:] is used as scratch
        work = VectorView.from_buffer(tau[1:], n - 1)
    else:
        work = VectorView.from_buffer(np.empty(n - 1, dtype=a.dtype), n - 1)
    return geqr2_view(A, tau_view, work)
