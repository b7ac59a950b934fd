"""
Pointer-style entry points (flat buffers, dimensions, leading dimensions).

These mirror the classic BLAS/LAPACK calling sequences for callers that
hold raw storage. They validate every argument up front, reporting the
1-based position of the first bad one through ArgumentError, and then
run the generic view kernels on the same buffers.
"""

from pytlapack.interface.blas import syrk
from pytlapack.interface.lapack import geqr2

__all__ = [
    "syrk",
    "geqr2",
]
