"""
pytlapack: generic BLAS and LAPACK kernels for NumPy storage.

Every kernel is written once against non-owning vector/matrix views and
scalar traits, so the same code runs over float32, float64, complex64 and
complex128 data in column- or row-major storage, in place.

Submodules:
    core: Views, tags, scalar traits, exceptions, validation
    blas: Level-1/2/3 kernels (copy, scal, nrm2, gemv, gerc, syrk, ...)
    lapack: Householder QR (larfg, larf, geqr2, org2r) and the qr() driver
    interface: Pointer-style entry points (syrk, geqr2 on flat buffers)
"""

__version__ = "0.1.0"

from pytlapack import core
from pytlapack import blas
from pytlapack import lapack
from pytlapack import interface
from pytlapack.lapack import qr

__all__ = [
    "__version__",
    "core",
    "blas",
    "lapack",
    "interface",
    "qr",
]
