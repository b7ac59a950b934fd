"""
Tests for the pointer-style geqr2 entry point.
"""

import numpy as np
import pytest

from pytlapack.core.compute.tolerances import select_tolerance
from pytlapack.core.exceptions import ArgumentError
from pytlapack.interface import geqr2
from pytlapack.lapack import geqr2 as geqr2_view


class TestGeqr2Interface:

    def test_matches_view_kernel(self, make_matrix, dtype):
        A = make_matrix((5, 3), dtype)
        expected = A.copy(order='F')
        expected_tau = np.zeros(3, dtype=dtype)
        geqr2_view(expected, expected_tau, np.empty(2, dtype=dtype))

        a = np.ravel(A, order='F').copy()
        tau = np.zeros(3, dtype=dtype)
        assert geqr2(5, 3, a, 5, tau) == 0

        atol = select_tolerance(dtype).bound(10.0)
        np.testing.assert_allclose(a.reshape((5, 3), order='F'), expected, atol=atol, rtol=0)
        np.testing.assert_allclose(tau, expected_tau, atol=atol, rtol=0)

    def test_padded_lda(self, make_matrix):
        A = make_matrix((3, 2))
        lda = 4
        a = np.full(lda * 2, 7.0)
        a[0:3] = A[:, 0]
        a[4:7] = A[:, 1]
        tau = np.zeros(2)
        geqr2(3, 2, a, lda, tau)

        expected = A.copy(order='F')
        expected_tau = np.zeros(2)
        geqr2_view(expected, expected_tau, np.empty(1))
        np.testing.assert_allclose(a[0:3], expected[:, 0], rtol=1e-14)
        np.testing.assert_allclose(a[4:7], expected[:, 1], rtol=1e-14)
        assert a[3] == 7.0 and a[7] == 7.0

    def test_wide_matrix_allocates_workspace(self, make_matrix):
        A = make_matrix((2, 4))
        a = np.ravel(A, order='F').copy()
        tau = np.zeros(2)
        geqr2(2, 4, a, 2, tau)

        expected = A.copy(order='F')
        expected_tau = np.zeros(2)
        geqr2_view(expected, expected_tau, np.empty(3))
        np.testing.assert_allclose(a.reshape((2, 4), order='F'), expected, rtol=1e-14)
        np.testing.assert_allclose(tau, expected_tau, rtol=1e-14)

    def test_empty(self):
        assert geqr2(0, 0, None, 1, None) == 0
        assert geqr2(3, 0, None, 3, None) == 0
        assert geqr2(0, 3, None, 1, None) == 0

    @pytest.mark.parametrize("args, position", [
        ((-1, 2, np.zeros(4), 2, np.zeros(2)), 1),
        ((2, -1, np.zeros(4), 2, np.zeros(2)), 2),
        ((2, 2, np.zeros(3), 2, np.zeros(2)), 3),
        ((2, 2, np.zeros(4), 1, np.zeros(2)), 4),
        ((2, 2, np.zeros(4), 2, np.zeros(1)), 5),
        ((2, 2, np.zeros(4), 2, [0.0, 0.0]), 5),
    ])
    def test_argument_positions(self, args, position):
        with pytest.raises(ArgumentError) as excinfo:
            geqr2(*args)
        assert excinfo.value.position == position
        assert excinfo.value.routine == 'geqr2'

    def test_read_only_buffer(self):
        a = np.ones(4)
        a.flags.writeable = False
        with pytest.raises(ArgumentError) as excinfo:
            geqr2(2, 2, a, 2, np.zeros(2))
        assert excinfo.value.position == 3

    def test_real_tau_for_complex_a(self, make_matrix):
        A = make_matrix((4, 3), np.complex128)
        a = np.ravel(A, order='F').copy()
        original = a.copy()
        with pytest.raises(ArgumentError, match="cannot hold") as excinfo:
            geqr2(4, 3, a, 4, np.zeros(3))
        assert excinfo.value.position == 5
        np.testing.assert_array_equal(a, original)

    def test_integer_tau(self):
        with pytest.raises(ArgumentError, match="floating point") as excinfo:
            geqr2(2, 2, np.ones(4), 2, np.zeros(2, dtype=np.int64))
        assert excinfo.value.position == 5

    def test_read_only_tau(self, make_matrix):
        a = np.ravel(make_matrix((4, 3)), order='F').copy()
        original = a.copy()
        tau = np.zeros(3)
        tau.flags.writeable = False
        with pytest.raises(ArgumentError, match="read-only") as excinfo:
            geqr2(4, 3, a, 4, tau)
        assert excinfo.value.position == 5
        np.testing.assert_array_equal(a, original)
