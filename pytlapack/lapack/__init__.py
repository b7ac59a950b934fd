"""
Generic LAPACK kernels and the QR driver built on them.

Submodules:
    lapy: lapy2, lapy3 (overflow-safe hypotenuse)
    larfg: Householder reflector generation
    larf: Householder reflector application
    geqr2: Unblocked QR factorization
    org2r: Explicit Q from geqr2 output
    laset: Constant initialization of a matrix
    larnv: Random vectors
    solvers: qr() high-level driver
"""

from pytlapack.lapack.lapy import lapy2, lapy3
from pytlapack.lapack.larfg import larfg
from pytlapack.lapack.larf import larf
from pytlapack.lapack.geqr2 import geqr2
from pytlapack.lapack.org2r import org2r
from pytlapack.lapack.laset import laset
from pytlapack.lapack.larnv import larnv
from pytlapack.lapack.solution import QRParams, QRSolution
from pytlapack.lapack.solvers import qr

__all__ = [
    # Auxiliary routines
    "lapy2",
    "lapy3",
    "larfg",
    "larf",
    "laset",
    "larnv",
    # QR factorization
    "geqr2",
    "org2r",
    # Driver
    "qr",
    "QRParams",
    "QRSolution",
]
