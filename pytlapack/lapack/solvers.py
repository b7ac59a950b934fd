"""
Solver dispatch for QR factorization.

This module provides the qr() function (public API). It validates at the
boundary, then drives the in-place kernels (geqr2, org2r) on a working
copy and wraps everything in a Result envelope.
"""

from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike

from pytlapack.core.compute.precision import scalar_traits
from pytlapack.core.compute.timing import Timer
from pytlapack.core.exceptions import ValidationError
from pytlapack.core.result import Result
from pytlapack.core.validation import check_2d, check_array, check_finite, check_writeable
from pytlapack.lapack.geqr2 import geqr2
from pytlapack.lapack.org2r import org2r
from pytlapack.lapack.solution import QRParams, QRSolution

QRMode = Literal['reduced', 'complete', 'raw']


def qr(
    A: ArrayLike,
    *,
    mode: QRMode = 'reduced',
    overwrite_a: bool = False,
) -> QRSolution:
    """
    Householder QR factorization, A = Q R.

    Args:
        A: m-by-n matrix. Any array-like; integer input is promoted to
            float64, complex input stays complex.
        mode:
            - 'reduced': Q is m-by-k, R is k-by-n, k = min(m, n)
            - 'complete': Q is m-by-m, R is m-by-n
            - 'raw': only the geqr2 output (factored, tau)
        overwrite_a: Factor A in place (A must be a writeable floating
            ndarray). Otherwise a column-major copy is factored.

    Returns:
        QRSolution with Q, R, tau, the raw factorization and diagnostics

    Raises:
        ValidationError: If A is not a finite numeric matrix or mode is unknown
        DimensionError: If A is not 2-D

    Example:
        >>> import numpy as np
        >>> from pytlapack.lapack import qr
        >>>
        >>> A = np.random.default_rng(0).standard_normal((6, 4))
        >>> result = qr(A)
        >>> np.allclose(result.Q @ result.R, A)
        True
    """
    # === Input Validation ===
    if mode not in ('reduced', 'complete', 'raw'):
        raise ValidationError(
            f"mode: expected 'reduced', 'complete' or 'raw', got {mode!r}"
        )
    a = check_array(A, 'A')
    check_2d(a, 'A')
    check_finite(a, 'A')
    if overwrite_a:
        check_writeable(A, 'A')
        if a is not A:
            raise ValidationError("A: overwrite_a needs a floating ndarray, not a converted copy")
        factored = a
    else:
        factored = np.array(a, order='F', copy=True)

    m, n = factored.shape
    k = min(m, n)
    dtype = factored.dtype

    timer = Timer()
    timer.start()

    # === Factorization ===
    tau = np.zeros(k, dtype=dtype)
    with timer.section('geqr2'):
        geqr2(factored, tau, np.empty(max(n - 1, 0), dtype=dtype))

    # === Explicit Factors ===
    Q = R = None
    if mode != 'raw':
        ncols_q = k if mode == 'reduced' else m
        with timer.section('org2r'):
            Q = np.zeros((m, ncols_q), dtype=dtype, order='F')
            Q[:, :k] = factored[:, :k]
            org2r(k, Q, tau, np.empty(max(ncols_q - 1, 0), dtype=dtype))
        R = np.triu(factored[:ncols_q, :])

    timer.stop()

    rank = _numerical_rank(factored, k)
    warnings: tuple[str, ...] = ()
    if rank < k:
        warnings = (f"A is rank deficient: numerical rank {rank} < min(m, n) = {k}",)

    params = QRParams(factored=factored, tau=tau, Q=Q, R=R, rank=rank)
    info: dict[str, Any] = {
        'method': 'householder',
        'mode': mode,
        'shape': (m, n),
        'rank': rank,
    }
    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='cpu_geqr2',
        warnings=warnings,
    )
    return QRSolution(_result=result)


def _numerical_rank(factored: np.ndarray, k: int) -> int:
    """Count diagonal entries of R above max(m, n) * eps * max|R[i, i]|."""
    diag_r = np.abs(np.diag(factored)[:k])
    if k == 0 or diag_r.max() == 0:
        return 0
    tol = max(factored.shape) * scalar_traits(factored.dtype).epsilon * diag_r.max()
    return int(np.sum(diag_r > tol))
