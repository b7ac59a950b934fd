"""
Explicit formation of Q from a Householder QR factorization.
"""

from typing import Any

from pytlapack.blas.level1 import scal
from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Side, Uplo
from pytlapack.core.validation import check_min_length
from pytlapack.core.views import as_matrix, as_vector
from pytlapack.lapack.larf import larf
from pytlapack.lapack.laset import laset


def org2r(k: int, A: Any, tau: Any, work: Any) -> int:
    """
    Generate the m-by-n matrix Q with orthonormal columns,

        Q = H_0 H_1 ... H_{k-1}  (first n columns),

    from the reflectors returned by geqr2. Unblocked algorithm; the
    unitary variant for complex data is the same code.

    Args:
        k: Number of reflectors, 0 <= k <= n
        A: m-by-n matrix with m >= n. On entry column i (i < k) holds the
           i-th Householder vector below the diagonal; on exit A holds Q.
        tau: Reflector factors, length >= k
        work: Scratch vector of length >= n-1

    Returns:
        0 on success

    Raises:
        ArgumentError: k out of range (1), n > m (2), short tau (3) or
            short work (4)
    """
    A = as_matrix(A, 'A')
    tau = as_vector(tau, 'tau')
    work = as_vector(work, 'work')
    m, n = A.nrows, A.ncols

    if not 0 <= k <= n:
        raise ArgumentError(f"k={k} must satisfy 0 <= k <= n={n}", 'org2r', 1)
    if n > m:
        raise ArgumentError(f"A is {m}x{n}; Q needs at least as many rows as columns", 'org2r', 2)
    check_min_length(len(tau), k, 'tau', 'org2r', 3)
    check_min_length(len(work), n - 1, 'work', 'org2r', 4)

    if n <= 0:
        return 0

    # Columns k:n become columns of the unit matrix
    if k < n:
        laset(Uplo.General, 0, 0, A.submatrix((0, k), (k, n)))
        laset(Uplo.General, 0, 1, A.submatrix((k, m), (k, n)))

    for i in reversed(range(k)):
        # Apply H_i to A[i:m, i:n] from the left
        if i < n - 1:
            A[i, i] = 1
            v = A.col(i).subvector(i, m)
            larf(Side.Left, v, tau[i], A.submatrix((i, m), (i + 1, n)), work.subvector(i, n - 1))
        if i < m - 1:
            scal(-tau[i], A.col(i).subvector(i + 1, m))
        A[i, i] = 1 - tau[i]

        laset(Uplo.General, 0, 0, A.submatrix((0, i), (i, i + 1)))

    return 0
