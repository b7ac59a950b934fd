"""
Application of an elementary reflector H = I - tau * v * v^H.
"""

from typing import Any

from pytlapack.blas.level2 import gemv, gerc
from pytlapack.core.tags import Op, Side
from pytlapack.core.validation import check_min_length, check_tag
from pytlapack.core.views import as_matrix, as_vector


def larf(side: Side | str, v: Any, tau: Any, C: Any, work: Any) -> None:
    """
    Apply H = I - tau * v * v^H to C from the left or the right.

        side = Left:   C = H C   with w = C^H v,  C -= tau v w^H
        side = Right:  C = C H   with w = C v,    C -= tau w v^H

    v is used as given, including its first entry; callers that store
    the implicit leading 1 elsewhere set it before calling.

    Args:
        side: Side.Left or Side.Right
        v: Householder vector, length m (Left) or n (Right)
        tau: Scalar factor; tau == 0 means H = I and nothing is touched
        C: m-by-n matrix, overwritten
        work: Scratch vector, length >= n (Left) or m (Right)

    Raises:
        ArgumentError: Invalid side (1), short v (2) or short work (5)
    """
    side = check_tag(side, Side, 'larf', 1)
    v = as_vector(v, 'v')
    C = as_matrix(C, 'C')
    work = as_vector(work, 'work')
    m, n = C.nrows, C.ncols

    if side is Side.Left:
        check_min_length(len(v), m, 'v', 'larf', 2)
        check_min_length(len(work), n, 'work', 'larf', 5)
    else:
        check_min_length(len(v), n, 'v', 'larf', 2)
        check_min_length(len(work), m, 'work', 'larf', 5)

    if tau == 0 or m == 0 or n == 0:
        return

    if side is Side.Left:
        w = work.subvector(0, n)
        gemv(Op.ConjTrans, 1, C, v.subvector(0, m), 0, w)
        gerc(-tau, v.subvector(0, m), w, C)
    else:
        w = work.subvector(0, m)
        gemv(Op.NoTrans, 1, C, v.subvector(0, n), 0, w)
        gerc(-tau, w, v.subvector(0, n), C)
