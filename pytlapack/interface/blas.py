"""
Pointer-style BLAS entry points.

These take flat buffers plus dimensions and leading dimensions, in the
calling sequence of the reference BLAS, and run the generic kernels on
column-major views of those buffers. A row-major request is executed as
the equivalent column-major one; nothing is copied.
"""

from typing import Any

import numpy as np

from pytlapack.blas.level3 import syrk as syrk_view
from pytlapack.blas.level3 import triangle_rows
from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Layout, Op, Uplo
from pytlapack.core.validation import check_leading_dimension, check_nonnegative, check_tag
from pytlapack.core.views import MatrixView
from pytlapack.interface._common import check_storage
from pytlapack.lapack.laset import laset


def syrk(
    layout: Layout | str,
    uplo: Uplo | str,
    trans: Op | str,
    n: int,
    k: int,
    alpha: Any,
    a: Any,
    lda: int,
    beta: Any,
    c: Any,
    ldc: int,
) -> None:
    """
    Symmetric rank-k update on flat buffers.

        trans = NoTrans:  C = alpha * A A^T + beta * C,  A is n-by-k
        trans = Trans:    C = alpha * A^T A + beta * C,  A is k-by-n

    Args:
        layout: Layout.ColMajor or Layout.RowMajor storage of A and C
        uplo: Part of C that is referenced (Upper, Lower, General)
        trans: NoTrans or Trans. For real data ConjTrans is read as Trans;
            for complex data it is illegal (use a Hermitian update).
        n: Order of C, n >= 0
        k: Columns of A (NoTrans) or rows of A (otherwise), k >= 0
        alpha: Scalar alpha. If zero, a is never accessed and may be None.
        a: Flat buffer holding A
        lda: Leading dimension of A
            ColMajor: >= max(1, n) for NoTrans, >= max(1, k) otherwise
            RowMajor: >= max(1, k) for NoTrans, >= max(1, n) otherwise
        beta: Scalar beta. If zero, C need not be set on input.
        c: Flat buffer holding C, updated in place
        ldc: Leading dimension of C, >= max(1, n)

    Raises:
        ArgumentError: Carrying the 1-based position of the first invalid
            argument. Nothing is written when it is raised. Leading
            dimensions (8, 11) are checked before the buffers they size
            (7, 10), so a bad lda is reported even when a is also short.
    """
    layout = check_tag(layout, Layout, 'syrk', 1)
    uplo = check_tag(uplo, Uplo, 'syrk', 2)
    trans = check_tag(trans, Op, 'syrk', 3)
    if trans is Op.ConjTrans:
        if np.iscomplexobj(c if a is None else a):
            raise ArgumentError(
                "conjugate transpose is illegal for complex syrk; use a Hermitian update",
                'syrk', 3,
            )
    check_nonnegative(n, 'n', 'syrk', 4)
    check_nonnegative(k, 'k', 'syrk', 5)

    a_rows, a_cols = (n, k) if trans is Op.NoTrans else (k, n)
    lda_min = a_rows if layout is Layout.ColMajor else a_cols
    check_leading_dimension(lda, lda_min, 'lda', 'syrk', 8)
    check_leading_dimension(ldc, n, 'ldc', 'syrk', 11)
    if alpha != 0:
        check_storage(a, a_rows, a_cols, lda, layout, 'a', 'syrk', 7)
    check_storage(c, n, n, ldc, layout, 'c', 'syrk', 10, writeable=True)

    if n == 0:
        return

    if trans is Op.ConjTrans:
        trans = Op.Trans

    # Row-major storage is the column-major transpose: swap the
    # referenced triangle and flip the transpose flag
    if layout is Layout.RowMajor:
        uplo = uplo.swapped()
        trans = trans.flipped()

    C = MatrixView.from_buffer(c, n, n, ldc, Layout.ColMajor)

    if alpha == 0:
        if beta == 0:
            laset(uplo, 0, 0, C)
        elif beta != 1:
            cc = C.as_array()
            for j in range(n):
                rows = triangle_rows(uplo, j, n)
                cc[rows, j] *= beta
        return

    if trans is Op.NoTrans:
        A = MatrixView.from_buffer(a, n, k, lda, Layout.ColMajor)
    else:
        A = MatrixView.from_buffer(a, k, n, lda, Layout.ColMajor)
    syrk_view(uplo, trans, alpha, A, beta, C)
