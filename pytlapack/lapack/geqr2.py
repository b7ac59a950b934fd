"""
Unblocked Householder QR factorization.

The matrix Q is represented as a product of elementary reflectors

    Q = H_0 H_1 ... H_{k-1},    k = min(m, n),

where each H_i = I - tau[i] * v * v^H and v has the form

    v[0:i] = 0,  v[i] = 1,  v[i+1:m] stored below the diagonal in A[i+1:m, i].

On exit the elements on and above the diagonal of A hold the
min(m, n)-by-n upper trapezoidal factor R.
"""

from typing import Any

from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Side
from pytlapack.core.validation import check_min_length, check_output_dtype
from pytlapack.core.views import as_matrix, as_vector
from pytlapack.lapack.larf import larf
from pytlapack.lapack.larfg import larfg


def geqr2(A: Any, tau: Any, work: Any) -> int:
    """
    Compute the QR factorization of an m-by-n matrix in place.

    Args:
        A: m-by-n matrix (view or 2-D ndarray), overwritten with R and
           the Householder vectors
        tau: Vector of length >= min(m, n), receives the reflector factors
        work: Scratch vector of length >= n-1

    Returns:
        0 on success

    Raises:
        ArgumentError: If tau (position 2) is too short, read-only or
            cannot hold values of A's dtype, or work (position 3) is too
            short. Nothing is modified in that case.
    """
    A = as_matrix(A, 'A')
    if hasattr(tau, 'dtype'):
        check_output_dtype(tau.dtype, A.dtype, 'tau', 'geqr2', 2)
    tau = as_vector(tau, 'tau')
    work = as_vector(work, 'work')
    m, n = A.nrows, A.ncols

    check_min_length(len(tau), min(m, n), 'tau', 'geqr2', 2)
    if not tau.as_array().flags.writeable:
        raise ArgumentError("tau is read-only", 'geqr2', 2)
    check_min_length(len(work), n - 1, 'work', 'geqr2', 3)

    if n <= 0:
        return 0

    for i in range(min(m, n - 1)):
        # Generate H_i to annihilate A[i+1:m, i]
        x = A.col(i).subvector(i + 1, m)
        beta, tau[i] = larfg(A[i, i], x)

        # Apply H_i^H to A[i:m, i+1:n] from the left, with v = A[i:m, i]
        A[i, i] = 1
        v = A.col(i).subvector(i, m)
        C = A.submatrix((i, m), (i + 1, n))
        w = work.subvector(i, n - 1)
        larf(Side.Left, v, _conj(tau[i]), C, w)

        A[i, i] = beta

    if n - 1 < m:
        # Last column has no trailing matrix to update
        x = A.col(n - 1).subvector(n, m)
        beta, tau[n - 1] = larfg(A[n - 1, n - 1], x)
        A[n - 1, n - 1] = beta

    return 0


def _conj(value: Any) -> Any:
    return value.conjugate()
