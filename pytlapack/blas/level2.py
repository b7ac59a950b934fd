"""
Level-2 BLAS: matrix-vector operations.

These are the collaborators of the Householder applicator: ``gemv``
forms w = C^H v and ``gerc`` performs the rank-1 update C -= tau v w^H.
"""

from typing import Any

import numpy as np

from pytlapack.core.tags import Op
from pytlapack.core.validation import check_min_length, check_tag
from pytlapack.core.views import as_matrix, as_vector


def gemv(trans: Op | str, alpha: Any, A: Any, x: Any, beta: Any, y: Any) -> None:
    """
    General matrix-vector product, y = alpha * op(A) x + beta * y.

    Args:
        trans: Op.NoTrans (A), Op.Trans (A^T) or Op.ConjTrans (A^H)
        alpha: Scalar alpha. If zero, A and x are not read.
        A: m-by-n matrix
        x: Vector of length n (NoTrans) or m (otherwise)
        beta: Scalar beta. If zero, y need not be set on input.
        y: Vector of length m (NoTrans) or n (otherwise), overwritten

    Raises:
        ArgumentError: On invalid trans (1) or short x (4) / y (6)
    """
    trans = check_tag(trans, Op, 'gemv', 1)
    A = as_matrix(A, 'A')
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    m, n = A.nrows, A.ncols
    lenx, leny = (n, m) if trans is Op.NoTrans else (m, n)
    check_min_length(len(x), lenx, 'x', 'gemv', 4)
    check_min_length(len(y), leny, 'y', 'gemv', 6)

    ya = y.as_array()[:leny]
    if beta == 0:
        ya[:] = 0
    elif beta != 1:
        ya *= beta
    if alpha == 0 or lenx == 0:
        return

    a = A.as_array()
    xa = x.as_array()[:lenx]
    if trans is Op.NoTrans:
        ya += alpha * (a @ xa)
    elif trans is Op.Trans:
        ya += alpha * (a.T @ xa)
    else:
        ya += alpha * (a.conj().T @ xa)


def _rank1(routine: str, alpha: Any, x: Any, y: Any, A: Any, conjugate: bool) -> None:
    A = as_matrix(A, 'A')
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    m, n = A.nrows, A.ncols
    check_min_length(len(x), m, 'x', routine, 2)
    check_min_length(len(y), n, 'y', routine, 3)
    if alpha == 0 or m == 0 or n == 0:
        return
    ya = y.as_array()[:n]
    if conjugate:
        ya = np.conj(ya)
    a = A.as_array()
    a += alpha * np.outer(x.as_array()[:m], ya)


def ger(alpha: Any, x: Any, y: Any, A: Any) -> None:
    """Rank-1 update, A = alpha * x y^T + A."""
    _rank1('ger', alpha, x, y, A, conjugate=False)


def gerc(alpha: Any, x: Any, y: Any, A: Any) -> None:
    """Conjugated rank-1 update, A = alpha * x y^H + A."""
    _rank1('gerc', alpha, x, y, A, conjugate=True)
