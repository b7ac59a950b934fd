"""
Tests for the level-2 BLAS kernels (gemv, ger, gerc).
"""

import numpy as np
import pytest

from pytlapack.blas import gemv, ger, gerc
from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Op


class TestGemv:

    def test_notrans(self, make_matrix, rng):
        A = make_matrix((4, 3))
        x = rng.standard_normal(3)
        y = rng.standard_normal(4)
        expected = 2.0 * A @ x + 0.5 * y
        gemv(Op.NoTrans, 2.0, A, x, 0.5, y)
        np.testing.assert_allclose(y, expected, rtol=1e-13)

    def test_trans(self, make_matrix, rng):
        A = make_matrix((4, 3))
        x = rng.standard_normal(4)
        y = np.zeros(3)
        gemv('T', 1.0, A, x, 0.0, y)
        np.testing.assert_allclose(y, A.T @ x, rtol=1e-13)

    def test_conj_trans(self, make_matrix, rng):
        A = make_matrix((3, 2), np.complex128)
        x = rng.standard_normal(3) + 1j * rng.standard_normal(3)
        y = np.zeros(2, dtype=np.complex128)
        gemv(Op.ConjTrans, 1.0, A, x, 0.0, y)
        np.testing.assert_allclose(y, A.conj().T @ x, rtol=1e-13)

    def test_beta_zero_ignores_y(self, make_matrix):
        A = make_matrix((2, 2))
        y = np.array([np.nan, np.nan])
        gemv(Op.NoTrans, 1.0, A, np.ones(2), 0.0, y)
        assert np.all(np.isfinite(y))

    def test_alpha_zero_does_not_read_a(self):
        A = np.full((2, 2), np.nan, order='F')
        y = np.array([1.0, 2.0])
        gemv(Op.NoTrans, 0.0, A, np.ones(2), 3.0, y)
        np.testing.assert_array_equal(y, [3.0, 6.0])

    def test_row_major_matrix(self, make_matrix, rng):
        A = make_matrix((3, 4), order='C')
        x = rng.standard_normal(4)
        y = np.zeros(3)
        gemv(Op.NoTrans, 1.0, A, x, 0.0, y)
        np.testing.assert_allclose(y, A @ x, rtol=1e-13)

    def test_invalid_trans(self):
        with pytest.raises(ArgumentError) as excinfo:
            gemv('X', 1.0, np.zeros((2, 2)), np.zeros(2), 0.0, np.zeros(2))
        assert excinfo.value.position == 1

    def test_short_x(self):
        with pytest.raises(ArgumentError) as excinfo:
            gemv(Op.Trans, 1.0, np.zeros((3, 2)), np.zeros(2), 0.0, np.zeros(2))
        assert excinfo.value.position == 4

    def test_short_y(self):
        with pytest.raises(ArgumentError) as excinfo:
            gemv(Op.NoTrans, 1.0, np.zeros((3, 2)), np.zeros(2), 0.0, np.zeros(2))
        assert excinfo.value.position == 6


class TestRank1:

    def test_ger(self, make_matrix, rng):
        A = make_matrix((3, 2))
        x = rng.standard_normal(3)
        y = rng.standard_normal(2)
        expected = A + 2.0 * np.outer(x, y)
        ger(2.0, x, y, A)
        np.testing.assert_allclose(A, expected, rtol=1e-13)

    def test_gerc_conjugates_y(self, make_matrix, rng):
        A = make_matrix((3, 2), np.complex128)
        x = rng.standard_normal(3) + 1j * rng.standard_normal(3)
        y = rng.standard_normal(2) + 1j * rng.standard_normal(2)
        expected = A - 0.5 * np.outer(x, y.conj())
        gerc(-0.5, x, y, A)
        np.testing.assert_allclose(A, expected, rtol=1e-13)

    def test_short_y(self):
        with pytest.raises(ArgumentError) as excinfo:
            ger(1.0, np.zeros(2), np.zeros(1), np.zeros((2, 2)))
        assert excinfo.value.position == 3
