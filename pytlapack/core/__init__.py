"""
Core infrastructure for pytlapack.

This module provides the shared abstractions every BLAS/LAPACK kernel is
written against.

Key components:
    protocols: VectorLike, MatrixLike access contracts
    views: VectorView, MatrixView (non-owning, aliasing)
    tags: Layout, Op, Uplo, Diag, Side selector enumerations
    result: Generic Result[P] envelope for the high-level solvers
    exceptions: Exception hierarchy
    validation: Input and argument validators
    compute: Scalar traits, tolerances, timing
"""

from pytlapack.core.protocols import VectorLike, MatrixLike
from pytlapack.core.views import VectorView, MatrixView, as_vector, as_matrix
from pytlapack.core.tags import Layout, Op, Uplo, Diag, Side
from pytlapack.core.result import Result
from pytlapack.core.exceptions import (
    PyTLapackError,
    ValidationError,
    DimensionError,
    ArgumentError,
)

__all__ = [
    # Protocols
    "VectorLike",
    "MatrixLike",
    # Views
    "VectorView",
    "MatrixView",
    "as_vector",
    "as_matrix",
    # Tags
    "Layout",
    "Op",
    "Uplo",
    "Diag",
    "Side",
    # Result
    "Result",
    # Exceptions
    "PyTLapackError",
    "ValidationError",
    "DimensionError",
    "ArgumentError",
]
