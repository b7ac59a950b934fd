"""
Generic BLAS kernels.

Every routine is written against the VectorLike/MatrixLike contracts and
the scalar traits, so it runs unchanged over real and complex dtypes and
over column- or row-major views.

Submodules:
    level1: copy, scal, axpy, dot, dotc, nrm2
    level2: gemv, ger, gerc
    level3: syrk
"""

from pytlapack.blas.level1 import copy, scal, axpy, dot, dotc, nrm2
from pytlapack.blas.level2 import gemv, ger, gerc
from pytlapack.blas.level3 import syrk

__all__ = [
    # Level 1
    "copy",
    "scal",
    "axpy",
    "dot",
    "dotc",
    "nrm2",
    # Level 2
    "gemv",
    "ger",
    "gerc",
    # Level 3
    "syrk",
]
