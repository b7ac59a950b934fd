"""
Tests for the view-level symmetric rank-k update.

Validates:
    - Lower, upper and full updates against A A^T / A^T A
    - Only the referenced triangle is read or written
    - beta = 0 ignores C, alpha = 0 never reads A
    - Complex data gets a symmetric (unconjugated) update
    - Argument errors carry positions
"""

import numpy as np
import pytest

from pytlapack.blas import syrk
from pytlapack.blas.level3 import triangle_rows
from pytlapack.core.compute.tolerances import select_tolerance
from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Op, Uplo
from pytlapack.core.views import MatrixView


def _in_triangle(uplo, n):
    mask = np.zeros((n, n), dtype=bool)
    for j in range(n):
        mask[triangle_rows(uplo, j, n), j] = True
    return mask


# ═══════════════════════════════════════════════════════════════════════
# Concrete scenario
# ═══════════════════════════════════════════════════════════════════════


class TestConcreteScenario:

    def test_lower_notrans(self):
        A = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]], order='F')
        C = np.zeros((3, 3), order='F')
        syrk(Uplo.Lower, Op.NoTrans, 1.0, A, 0.0, C)
        np.testing.assert_array_equal(C, [[1, 0, 0], [0, 1, 0], [1, 1, 2]])


# ═══════════════════════════════════════════════════════════════════════
# Against the dense product
# ═══════════════════════════════════════════════════════════════════════


class TestAgainstDenseProduct:

    @pytest.mark.parametrize("uplo", [Uplo.Lower, Uplo.Upper, Uplo.General])
    @pytest.mark.parametrize("trans", [Op.NoTrans, Op.Trans])
    def test_update(self, make_matrix, dtype, uplo, trans):
        n, k = 5, 3
        shape = (n, k) if trans is Op.NoTrans else (k, n)
        A = make_matrix(shape, dtype)
        C = make_matrix((n, n), dtype)
        C0 = C.copy()
        alpha, beta = 1.5, -0.5

        syrk(uplo, trans, alpha, A, beta, C)

        product = A @ A.T if trans is Op.NoTrans else A.T @ A
        expected = alpha * product + beta * C0
        mask = _in_triangle(uplo, n)
        tol = select_tolerance(dtype).bound(np.abs(expected).max() * k)
        np.testing.assert_allclose(C[mask], expected[mask], atol=tol, rtol=0)
        # Outside the referenced triangle nothing changes
        np.testing.assert_array_equal(C[~mask], C0[~mask])

    def test_general_is_lower_plus_upper(self, make_matrix):
        A = make_matrix((4, 2))
        C = make_matrix((4, 4))
        lower, upper, full = C.copy(order='F'), C.copy(order='F'), C.copy(order='F')

        syrk(Uplo.Lower, Op.NoTrans, 2.0, A, 3.0, lower)
        syrk(Uplo.Upper, Op.NoTrans, 2.0, A, 3.0, upper)
        syrk(Uplo.General, Op.NoTrans, 2.0, A, 3.0, full)

        combined = np.tril(lower) + np.triu(upper, 1)
        np.testing.assert_allclose(full, combined, rtol=1e-14, atol=1e-14)

    def test_complex_is_not_conjugated(self):
        A = np.array([[1j], [1.0]], dtype=np.complex128, order='F')
        C = np.zeros((2, 2), dtype=np.complex128, order='F')
        syrk(Uplo.General, Op.NoTrans, 1.0, A, 0.0, C)
        np.testing.assert_array_equal(C, [[-1, 1j], [1j, 1]])

    def test_row_major_views(self, make_matrix):
        A = make_matrix((4, 3), order='C')
        C = np.zeros((4, 4))
        syrk(Uplo.Lower, Op.NoTrans, 1.0, A, 0.0, C)
        np.testing.assert_allclose(np.tril(C), np.tril(A @ A.T), rtol=1e-13)

    def test_conj_trans_is_trans_for_real(self, make_matrix):
        A = make_matrix((2, 3))
        C1 = np.zeros((3, 3), order='F')
        C2 = np.zeros((3, 3), order='F')
        syrk(Uplo.Upper, Op.ConjTrans, 1.0, A, 0.0, C1)
        syrk(Uplo.Upper, Op.Trans, 1.0, A, 0.0, C2)
        np.testing.assert_array_equal(C1, C2)

    def test_k_zero_scales_c(self):
        A = np.zeros((3, 0), order='F')
        C = np.ones((3, 3), order='F')
        syrk(Uplo.Lower, Op.NoTrans, 1.0, A, 2.0, C)
        np.testing.assert_array_equal(C, np.tril(np.full((3, 3), 2.0)) + np.triu(np.ones((3, 3)), 1))


# ═══════════════════════════════════════════════════════════════════════
# Scalar shortcuts
# ═══════════════════════════════════════════════════════════════════════


class _Unreadable(MatrixView):
    """Matrix view that fails on any element access."""

    __slots__ = ()

    def as_array(self):
        raise AssertionError("A must not be accessed")

    def __getitem__(self, ij):
        raise AssertionError("A must not be accessed")


class TestScalarShortcuts:

    def test_beta_zero_ignores_nan_in_c(self, make_matrix):
        A = make_matrix((3, 2))
        C = np.full((3, 3), np.nan, order='F')
        syrk(Uplo.Lower, Op.NoTrans, 1.0, A, 0.0, C)
        assert np.all(np.isfinite(np.tril(C)))
        assert np.all(np.isnan(C[np.triu_indices(3, 1)]))

    def test_alpha_zero_beta_one_leaves_c(self, make_matrix):
        A = _Unreadable(np.zeros(6), 0, 3, 2, 3)
        C = make_matrix((3, 3))
        C0 = C.copy()
        syrk(Uplo.Upper, Op.NoTrans, 0.0, A, 1.0, C)
        np.testing.assert_array_equal(C, C0)

    def test_alpha_zero_scales_triangle(self, make_matrix):
        A = _Unreadable(np.zeros(6), 0, 3, 2, 3)
        C = make_matrix((3, 3))
        C0 = C.copy()
        syrk(Uplo.Lower, Op.NoTrans, 0.0, A, 2.0, C)
        np.testing.assert_array_equal(np.tril(C), 2.0 * np.tril(C0))
        np.testing.assert_array_equal(np.triu(C, 1), np.triu(C0, 1))


# ═══════════════════════════════════════════════════════════════════════
# Argument errors
# ═══════════════════════════════════════════════════════════════════════


class TestArgumentErrors:

    def test_invalid_uplo(self):
        with pytest.raises(ArgumentError) as excinfo:
            syrk('X', Op.NoTrans, 1.0, np.zeros((2, 2)), 0.0, np.zeros((2, 2)))
        assert excinfo.value.position == 1

    def test_invalid_trans(self):
        with pytest.raises(ArgumentError) as excinfo:
            syrk(Uplo.Lower, 'Q', 1.0, np.zeros((2, 2)), 0.0, np.zeros((2, 2)))
        assert excinfo.value.position == 2

    def test_conj_trans_complex(self):
        A = np.zeros((2, 2), dtype=np.complex128)
        C = np.zeros((2, 2), dtype=np.complex128)
        with pytest.raises(ArgumentError, match="Hermitian") as excinfo:
            syrk(Uplo.Lower, Op.ConjTrans, 1.0, A, 0.0, C)
        assert excinfo.value.position == 2

    def test_incompatible_a(self):
        with pytest.raises(ArgumentError) as excinfo:
            syrk(Uplo.Lower, Op.Trans, 1.0, np.zeros((3, 2)), 0.0, np.zeros((3, 3)))
        assert excinfo.value.position == 4

    def test_non_square_c(self):
        with pytest.raises(ArgumentError) as excinfo:
            syrk(Uplo.Lower, Op.NoTrans, 1.0, np.zeros((2, 2)), 0.0, np.zeros((2, 3)))
        assert excinfo.value.position == 6
