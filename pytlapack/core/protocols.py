"""
Core protocols for pytlapack.

These define the structural interfaces the kernels are written against.
We use Protocol (structural typing) rather than ABC (nominal typing) so
callers can adapt arbitrary storage (strided, banded, externally owned)
without inheriting from anything.

Design Principles:
    - Minimal contracts: indexed access, sizes and sub-view extraction
    - Views alias storage; no operation in the contract copies data
    - as_array() exposes the same storage as a NumPy view so inner loops
      can be vectorized
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class VectorLike(Protocol):
    """
    A logical 1-D sequence of n scalars aliasing caller-owned storage.

    Writes through __setitem__ or through the array returned by as_array()
    are visible to every other view of the same storage.
    """

    @property
    def dtype(self) -> np.dtype:
        """Scalar type of the elements."""
        ...

    def __len__(self) -> int:
        ...

    def __getitem__(self, i: int) -> Any:
        ...

    def __setitem__(self, i: int, value: Any) -> None:
        ...

    def subvector(self, start: int, stop: int) -> 'VectorLike':
        """Elements [start, stop) as a view on the same storage."""
        ...

    def as_array(self) -> NDArray[Any]:
        """1-D NumPy view (never a copy) of the elements."""
        ...


@runtime_checkable
class MatrixLike(Protocol):
    """
    A logical m-by-n grid of scalars addressed by (row, col).

    Row, column and rectangular sub-views share storage with the parent.
    """

    @property
    def dtype(self) -> np.dtype:
        ...

    @property
    def nrows(self) -> int:
        ...

    @property
    def ncols(self) -> int:
        ...

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        ...

    def __setitem__(self, ij: tuple[int, int], value: Any) -> None:
        ...

    def row(self, i: int) -> VectorLike:
        ...

    def col(self, j: int) -> VectorLike:
        ...

    def submatrix(
        self,
        rows: tuple[int, int],
        cols: tuple[int, int],
    ) -> 'MatrixLike':
        """Rows [r0, r1) and columns [c0, c1) as a view on the same storage."""
        ...

    def as_array(self) -> NDArray[Any]:
        """2-D NumPy view (never a copy) of the elements."""
        ...
