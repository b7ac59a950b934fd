"""
Level-3 BLAS: matrix-matrix operations.

Only the symmetric rank-k update lives here. It works on views of any
layout; the pointer-style entry point in ``pytlapack.interface`` adds
the layout normalization and the scalar fast paths on top of it.
"""

from typing import Any

from pytlapack.core.compute.precision import scalar_traits
from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Op, Uplo
from pytlapack.core.validation import check_tag
from pytlapack.core.views import as_matrix


def triangle_rows(uplo: Uplo, j: int, n: int) -> slice:
    """Rows of column j that belong to the referenced part of C."""
    if uplo is Uplo.Upper:
        return slice(0, j + 1)
    if uplo is Uplo.Lower:
        return slice(j, n)
    return slice(0, n)


def syrk(uplo: Uplo | str, trans: Op | str, alpha: Any, A: Any, beta: Any, C: Any) -> None:
    """
    Symmetric rank-k update.

        trans = NoTrans:  C = alpha * A A^T + beta * C   (A is n-by-k)
        trans = Trans:    C = alpha * A^T A + beta * C   (A is k-by-n)

    Only the ``uplo`` part of C is read or written; Uplo.General updates
    the full matrix. The product is never conjugated, so for complex data
    C is complex symmetric, not Hermitian.

    Args:
        uplo: Referenced part of C (Upper, Lower, General)
        trans: NoTrans or Trans. ConjTrans is read as Trans for real A
            and rejected for complex A.
        alpha: Scalar alpha. If zero, A is not accessed.
        A: n-by-k (NoTrans) or k-by-n (Trans) matrix
        beta: Scalar beta. If zero, C need not be set on input.
        C: n-by-n matrix, updated in place

    Raises:
        ArgumentError: Invalid uplo (1), trans (2), shape of A (4) or C (6)
    """
    uplo = check_tag(uplo, Uplo, 'syrk', 1)
    trans = check_tag(trans, Op, 'syrk', 2)
    A = as_matrix(A, 'A')
    C = as_matrix(C, 'C')

    if trans is Op.ConjTrans:
        if scalar_traits(A.dtype).is_complex:
            raise ArgumentError(
                "conjugate transpose is not a symmetric update for complex data; "
                "use a Hermitian rank-k update",
                'syrk', 2,
            )
        trans = Op.Trans

    n = C.nrows
    if C.ncols != n:
        raise ArgumentError(f"C must be square, got {C.nrows}x{C.ncols}", 'syrk', 6)
    a_rows = A.nrows if trans is Op.NoTrans else A.ncols
    if a_rows != n:
        raise ArgumentError(
            f"A is {A.nrows}x{A.ncols}, incompatible with {n}x{n} C for {trans.name}",
            'syrk', 4,
        )

    if n == 0:
        return

    a = A.as_array() if alpha != 0 else None
    c = C.as_array()
    for j in range(n):
        rows = triangle_rows(uplo, j, n)
        if beta == 0:
            c[rows, j] = 0
        elif beta != 1:
            c[rows, j] *= beta
        if a is None:
            continue
        if trans is Op.NoTrans:
            c[rows, j] += alpha * (a[rows, :] @ a[j, :])
        else:
            c[rows, j] += alpha * (a[:, rows].T @ a[:, j])
