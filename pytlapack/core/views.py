"""
Non-owning vector and matrix views.

A view is the "I address your storage" abstraction: it carries
(buffer, offset, length, stride) for vectors and
(buffer, offset, rows, cols, leading dimension, layout) for matrices, and
never owns or copies the elements. Every sub-view shares the parent's
buffer, so a kernel can hand overlapping pieces of one matrix to its
collaborators and see their writes immediately.

Usage:
    from pytlapack.core.views import MatrixView, VectorView

    A = MatrixView.from_array(np.asfortranarray(X))
    x = A.col(0).subvector(1, A.nrows)     # A[1:m, 0], aliased
    C = A.submatrix((0, 2), (1, 3))         # A[0:2, 1:3], aliased

    # BLAS-style buffers
    a = np.zeros(lda * n)
    A = MatrixView.from_buffer(a, m, n, lda, Layout.ColMajor)
    x = VectorView.from_buffer(buf, n, inc=-2)

The buffer is any 1-D NumPy array (itself possibly strided). Indices are
checked; the kernels rely on the checks in their own entry points for
sizes, so an out-of-range sub-view signals a caller bug (IndexError).
"""

from __future__ import annotations

import operator
import warnings
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.lib.stride_tricks import as_strided
from numpy.typing import NDArray

from pytlapack.core.exceptions import ValidationError
from pytlapack.core.protocols import MatrixLike, VectorLike
from pytlapack.core.tags import Layout

if TYPE_CHECKING:
    import torch


def _check_buffer(buffer: Any, name: str) -> NDArray[Any]:
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray storage, got {type(buffer).__name__}"
        )
    if not np.issubdtype(buffer.dtype, np.inexact):
        raise ValidationError(
            f"{name}: non-floating dtype {buffer.dtype}, expected real or complex floating point"
        )
    return buffer


def _element_strides(array: NDArray[Any], name: str) -> tuple[int, ...]:
    item = array.itemsize
    if any(s % item for s in array.strides):
        raise ValidationError(
            f"{name}: strides {array.strides} are not multiples of the item size {item}"
        )
    return tuple(s // item for s in array.strides)


def _flat_span(array: NDArray[Any], span: int) -> NDArray[Any]:
    """1-D unit-stride alias of ``span`` elements starting at array's first element."""
    return as_strided(array, shape=(span,), strides=(array.itemsize,))


def _tensor_to_numpy(tensor: 'torch.Tensor', name: str) -> NDArray[Any]:
    if tensor.device.type != 'cpu':
        raise ValidationError(
            f"{name}: tensor lives on {tensor.device}; views need host memory"
        )
    if tensor.requires_grad:
        warnings.warn(
            f"{name}: tensor requires grad; in-place kernels bypass autograd",
            UserWarning,
            stacklevel=3,
        )
    # .numpy() shares memory with the tensor
    return tensor.detach().numpy()


class VectorView:
    """
    Strided view of n elements of a 1-D buffer.

    Logical element i lives at ``data[offset + i * inc]``. ``inc`` may be
    negative (the vector then runs towards lower addresses) but never zero.
    """

    __slots__ = ('_data', '_offset', '_n', '_inc')

    def __init__(self, data: NDArray[Any], offset: int, n: int, inc: int):
        if inc == 0:
            raise ValidationError("inc: vector stride must not be zero")
        if n < 0:
            raise ValidationError(f"n: vector length must be non-negative, got {n}")
        self._data = data
        self._offset = offset
        self._n = n
        self._inc = inc

    # === Factory Methods ===

    @classmethod
    def from_array(cls, array: NDArray[Any], name: str = 'x') -> 'VectorView':
        """
        View a 1-D NumPy array (any stride, including negative) without copying.

        Raises:
            ValidationError: If array is not a 1-D floating ndarray
        """
        array = _check_buffer(array, name)
        if array.ndim != 1:
            raise ValidationError(
                f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
            )
        n = array.shape[0]
        if n <= 1:
            return cls(array, 0, n, 1)
        (inc,) = _element_strides(array, name)
        if inc == 0:
            raise ValidationError(f"{name}: zero-stride (broadcast) arrays cannot be views")
        span = (n - 1) * abs(inc) + 1
        if inc > 0:
            return cls(_flat_span(array, span), 0, n, inc)
        # Anchor the buffer at the lowest address, i.e. the last element
        return cls(_flat_span(array[::-1], span), span - 1, n, inc)

    @classmethod
    def from_buffer(cls, buffer: NDArray[Any], n: int, inc: int = 1) -> 'VectorView':
        """
        View n elements of a BLAS-style buffer with increment inc.

        Follows the reference BLAS convention: for inc < 0 element 0 is
        ``buffer[(n-1)*|inc|]`` and the vector runs backwards.
        """
        buffer = _check_buffer(buffer, 'x')
        if buffer.ndim != 1:
            raise ValidationError(f"x: expected 1D buffer, got shape {buffer.shape}")
        if n > 0 and buffer.shape[0] < 1 + (n - 1) * abs(inc):
            raise ValidationError(
                f"x: buffer of length {buffer.shape[0]} too short for n={n}, inc={inc}"
            )
        offset = 0 if inc > 0 else (n - 1) * -inc if n > 0 else 0
        return cls(buffer, offset, n, inc)

    @classmethod
    def from_tensor(cls, tensor: 'torch.Tensor', name: str = 'x') -> 'VectorView':
        """View the storage of a 1-D CPU tensor without copying."""
        return cls.from_array(_tensor_to_numpy(tensor, name), name)

    # === Element Access ===

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def inc(self) -> int:
        return self._inc

    def __len__(self) -> int:
        return self._n

    def _position(self, i: int) -> int:
        i = operator.index(i)
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range for vector of length {self._n}")
        return self._offset + i * self._inc

    def __getitem__(self, i: int) -> Any:
        return self._data[self._position(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self._data[self._position(i)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_array())

    def __repr__(self) -> str:
        return f"VectorView(n={self._n}, inc={self._inc}, dtype={self.dtype})"

    # === Sub-views ===

    def subvector(self, start: int, stop: int) -> 'VectorView':
        if not 0 <= start <= stop <= self._n:
            raise IndexError(
                f"subvector [{start}, {stop}) out of range for vector of length {self._n}"
            )
        return VectorView(self._data, self._offset + start * self._inc, stop - start, self._inc)

    def as_array(self) -> NDArray[Any]:
        if self._n == 0:
            return self._data[0:0]
        last = self._offset + (self._n - 1) * self._inc
        stop = last + (1 if self._inc > 0 else -1)
        return self._data[self._offset:(stop if stop >= 0 else None):self._inc]


class MatrixView:
    """
    m-by-n view of a 1-D buffer with leading dimension ld.

    Column-major: element (i, j) at ``data[offset + i + j*ld]``.
    Row-major:    element (i, j) at ``data[offset + i*ld + j]``.
    """

    __slots__ = ('_data', '_offset', '_m', '_n', '_ld', '_layout')

    def __init__(
        self,
        data: NDArray[Any],
        offset: int,
        m: int,
        n: int,
        ld: int,
        layout: Layout = Layout.ColMajor,
    ):
        if m < 0 or n < 0:
            raise ValidationError(f"matrix dimensions must be non-negative, got {m}x{n}")
        if ld < 1:
            raise ValidationError(f"ld: leading dimension must be positive, got {ld}")
        self._data = data
        self._offset = offset
        self._m = m
        self._n = n
        self._ld = ld
        self._layout = Layout.coerce(layout)

    # === Factory Methods ===

    @classmethod
    def from_array(cls, array: NDArray[Any], name: str = 'A') -> 'MatrixView':
        """
        View a 2-D NumPy array without copying.

        Fortran-ordered arrays (and column slices of them) become
        column-major views, C-ordered arrays become row-major views.

        Raises:
            ValidationError: If array is not 2-D floating, or neither of
                its strides is unit (e.g. ``X[::2, ::2]``)
        """
        array = _check_buffer(array, name)
        if array.ndim != 2:
            raise ValidationError(
                f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
            )
        m, n = array.shape
        if m == 0 or n == 0 or (m == 1 and n == 1):
            return cls(array.reshape(-1), 0, m, n, max(1, m))
        e0, e1 = _element_strides(array, name)
        if e0 == 1 and (n == 1 or e1 >= m):
            layout, ld = Layout.ColMajor, (e1 if n > 1 else m)
        elif e1 == 1 and (m == 1 or e0 >= n):
            layout, ld = Layout.RowMajor, (e0 if m > 1 else n)
        elif m == 1 and e1 >= 1:
            layout, ld = Layout.ColMajor, e1
        elif n == 1 and e0 >= 1:
            layout, ld = Layout.RowMajor, e0
        else:
            raise ValidationError(
                f"{name}: strides {array.strides} describe neither a column-major "
                f"nor a row-major layout"
            )
        span = (m - 1) * e0 + (n - 1) * e1 + 1
        return cls(_flat_span(array, span), 0, m, n, ld, layout)

    @classmethod
    def from_buffer(
        cls,
        buffer: NDArray[Any],
        m: int,
        n: int,
        ld: int,
        layout: Layout = Layout.ColMajor,
    ) -> 'MatrixView':
        """View an m-by-n matrix stored in a BLAS-style buffer."""
        buffer = _check_buffer(buffer, 'A')
        if buffer.ndim != 1:
            raise ValidationError(f"A: expected 1D buffer, got shape {buffer.shape}")
        view = cls(buffer, 0, m, n, ld, layout)
        if m > 0 and n > 0:
            outer, inner = (n, m) if view.layout is Layout.ColMajor else (m, n)
            required = ld * (outer - 1) + inner
            if buffer.shape[0] < required:
                raise ValidationError(
                    f"A: buffer of length {buffer.shape[0]} too short for a {m}x{n} "
                    f"{view.layout.name} matrix with ld={ld}, {required} required"
                )
        return view

    @classmethod
    def from_tensor(cls, tensor: 'torch.Tensor', name: str = 'A') -> 'MatrixView':
        """View the storage of a 2-D CPU tensor without copying."""
        return cls.from_array(_tensor_to_numpy(tensor, name), name)

    # === Properties ===

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def nrows(self) -> int:
        return self._m

    @property
    def ncols(self) -> int:
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._m, self._n)

    @property
    def ld(self) -> int:
        return self._ld

    @property
    def layout(self) -> Layout:
        return self._layout

    def __repr__(self) -> str:
        return (
            f"MatrixView({self._m}x{self._n}, ld={self._ld}, "
            f"layout={self._layout.name}, dtype={self.dtype})"
        )

    # === Element Access ===

    def _position(self, i: int, j: int) -> int:
        if self._layout is Layout.ColMajor:
            return self._offset + i + j * self._ld
        return self._offset + i * self._ld + j

    def _checked(self, ij: tuple[int, int]) -> int:
        i, j = (operator.index(k) for k in ij)
        if not (0 <= i < self._m and 0 <= j < self._n):
            raise IndexError(f"index ({i}, {j}) out of range for {self._m}x{self._n} matrix")
        return self._position(i, j)

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        return self._data[self._checked(ij)]

    def __setitem__(self, ij: tuple[int, int], value: Any) -> None:
        self._data[self._checked(ij)] = value

    # === Sub-views ===

    def row(self, i: int) -> VectorView:
        if not 0 <= i < self._m:
            raise IndexError(f"row {i} out of range for {self._m}x{self._n} matrix")
        inc = self._ld if self._layout is Layout.ColMajor else 1
        return VectorView(self._data, self._position(i, 0), self._n, inc)

    def col(self, j: int) -> VectorView:
        if not 0 <= j < self._n:
            raise IndexError(f"column {j} out of range for {self._m}x{self._n} matrix")
        inc = 1 if self._layout is Layout.ColMajor else self._ld
        return VectorView(self._data, self._position(0, j), self._m, inc)

    def submatrix(self, rows: tuple[int, int], cols: tuple[int, int]) -> 'MatrixView':
        r0, r1 = rows
        c0, c1 = cols
        if not (0 <= r0 <= r1 <= self._m and 0 <= c0 <= c1 <= self._n):
            raise IndexError(
                f"submatrix rows [{r0}, {r1}) cols [{c0}, {c1}) out of range "
                f"for {self._m}x{self._n} matrix"
            )
        return MatrixView(
            self._data, self._position(r0, c0), r1 - r0, c1 - c0, self._ld, self._layout
        )

    def transpose(self) -> 'MatrixView':
        """The n-by-m transpose, obtained by reinterpreting the layout."""
        return MatrixView(
            self._data, self._offset, self._n, self._m, self._ld, self._layout.other()
        )

    def as_array(self) -> NDArray[Any]:
        m, n = self._m, self._n
        if m == 0 or n == 0:
            return self._data[0:0].reshape(m, n)
        step = self._data.strides[0]
        stop = self._position(m - 1, n - 1) + 1
        base = self._data[self._offset:stop]
        if self._layout is Layout.ColMajor:
            strides = (step, self._ld * step)
        else:
            strides = (self._ld * step, step)
        return as_strided(base, shape=(m, n), strides=strides)


def as_vector(x: Any, name: str = 'x') -> VectorLike:
    """Accept a vector view (returned unchanged) or a 1-D ndarray (wrapped)."""
    if isinstance(x, VectorLike):
        return x
    return VectorView.from_array(x, name)


def as_matrix(A: Any, name: str = 'A') -> MatrixLike:
    """Accept a matrix view (returned unchanged) or a 2-D ndarray (wrapped)."""
    if isinstance(A, MatrixLike):
        return A
    return MatrixView.from_array(A, name)
