"""
Generation of elementary Householder reflectors.

larfg builds H of order n such that

    H^H * ( alpha ) = ( beta ),   H^H * H = I,
          (   x   )   (   0  )

with beta real and x an (n-1)-vector. H is represented as

    H = I - tau * ( 1 ) * ( 1  v^H )
                  ( v )

The leading 1 of the Householder vector is implicit: on exit x holds v
and the caller stores beta where alpha was.
"""

from typing import Any

import numpy as np

from pytlapack.blas.level1 import nrm2, scal
from pytlapack.core.compute.precision import scalar_traits
from pytlapack.core.views import as_vector
from pytlapack.lapack.lapy import lapy2, lapy3

# Bound on the number of 1/safmin rescalings when beta underflows
MAX_RESCALE_ITERATIONS = 20


def larfg(alpha: Any, x: Any) -> tuple[Any, Any]:
    """
    Generate an elementary Householder reflector.

    If x is zero and alpha is real, H is the identity: tau = 0 and
    neither alpha nor x is modified. Otherwise 1 <= real(tau) <= 2 and
    abs(tau - 1) <= 1.

    Args:
        alpha: The pivot scalar
        x: Vector of length n-1 (view or 1-D ndarray); overwritten with v

    Returns:
        (beta, tau): beta replaces alpha in the caller's storage; tau is
        the scalar factor of the reflector. Both have the scalar type of x
        (promoted by alpha).

    Notes:
        When |beta| falls below safmin = safe_min / uroundoff, x and
        alpha are scaled up by 1/safmin (at most MAX_RESCALE_ITERATIONS
        times) before beta is recomputed, and beta is scaled back down at
        the end. If beta is still tiny after the last rescaling the
        result is used as is.
    """
    x = as_vector(x, 'x')
    dtype = np.result_type(x.dtype, alpha)
    traits = scalar_traits(dtype)
    real_t = traits.real_dtype.type
    scalar_t = dtype.type

    one = real_t(1)
    safmin = real_t(traits.safe_min / traits.uroundoff)
    rsafmin = one / safmin

    alpha = scalar_t(alpha)
    tau = scalar_t(0)

    xnorm = nrm2(x)
    if xnorm == 0 and alpha.imag == 0:
        return alpha, tau

    beta = _signed_beta(alpha, xnorm, traits.is_complex)
    knt = 0
    if abs(beta) < safmin:
        # beta may be inaccurate; scale x and recompute
        while abs(beta) < safmin and knt < MAX_RESCALE_ITERATIONS:
            knt += 1
            scal(rsafmin, x)
            beta *= rsafmin
            alpha *= rsafmin
        xnorm = nrm2(x)
        beta = _signed_beta(alpha, xnorm, traits.is_complex)

    tau = scalar_t((beta - alpha) / beta)
    scal(scalar_t(one / (alpha - beta)), x)

    for _ in range(knt):
        beta *= safmin
    return scalar_t(beta), tau


def _signed_beta(alpha: Any, xnorm: Any, complex_scalars: bool) -> Any:
    """-sign(real(alpha)) * |(alpha, xnorm)|, as a real scalar."""
    if complex_scalars:
        temp = lapy3(alpha.real, alpha.imag, xnorm)
    else:
        temp = lapy2(alpha.real, xnorm)
    return temp if alpha.real < 0 else -temp
