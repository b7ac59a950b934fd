"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


REAL_DTYPES = [np.float32, np.float64]
COMPLEX_DTYPES = [np.complex64, np.complex128]
ALL_DTYPES = REAL_DTYPES + COMPLEX_DTYPES


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=ALL_DTYPES, ids=lambda t: np.dtype(t).name)
def dtype(request):
    """Every supported scalar type."""
    return np.dtype(request.param)


@pytest.fixture(params=REAL_DTYPES, ids=lambda t: np.dtype(t).name)
def real_dtype(request):
    return np.dtype(request.param)


@pytest.fixture(params=COMPLEX_DTYPES, ids=lambda t: np.dtype(t).name)
def complex_dtype(request):
    return np.dtype(request.param)


@pytest.fixture
def make_matrix(rng):
    """Factory for random matrices of a given dtype and memory order."""
    def _make(shape, dtype=np.float64, order='F'):
        dtype = np.dtype(dtype)
        data = rng.standard_normal(shape)
        if np.issubdtype(dtype, np.complexfloating):
            data = data + 1j * rng.standard_normal(shape)
        return np.array(data, dtype=dtype, order=order)
    return _make


@pytest.fixture
def tall_matrix(make_matrix):
    """8x5 column-major float64 matrix of full rank."""
    return make_matrix((8, 5))


@pytest.fixture
def rank_deficient_matrix(rng):
    """6x4 matrix of rank 3 (last column is zero)."""
    X = rng.standard_normal((6, 4))
    X[:, 3] = 0.0
    return np.asfortranarray(X)
