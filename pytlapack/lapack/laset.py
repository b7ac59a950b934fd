"""
Matrix initialization to constant diagonal and off-diagonal values.
"""

from typing import Any

from pytlapack.core.tags import Uplo
from pytlapack.core.validation import check_tag
from pytlapack.core.views import as_matrix


def laset(uplo: Uplo | str, alpha: Any, beta: Any, A: Any) -> None:
    """
    Set the off-diagonal part of A to alpha and its diagonal to beta.

    Args:
        uplo: Uplo.Upper sets the strictly upper triangle/trapezoid,
            Uplo.Lower the strictly lower one, Uplo.General every
            off-diagonal entry. The other part is not referenced.
        alpha: Off-diagonal value
        beta: Value for the first min(m, n) diagonal entries
        A: m-by-n matrix, overwritten

    Raises:
        ArgumentError: Invalid uplo (position 1)
    """
    uplo = check_tag(uplo, Uplo, 'laset', 1)
    A = as_matrix(A, 'A')
    m, n = A.nrows, A.ncols
    if m == 0 or n == 0:
        return

    a = A.as_array()
    if uplo is Uplo.Upper:
        for j in range(1, n):
            a[:min(m, j), j] = alpha
    elif uplo is Uplo.Lower:
        for j in range(min(m, n)):
            a[j + 1:m, j] = alpha
    else:
        a[:, :] = alpha

    for i in range(min(m, n)):
        a[i, i] = beta
