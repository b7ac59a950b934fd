"""
Tolerance tiers for numerical validation.

Defines precision expectations per scalar family. The unblocked kernels
are backward stable, so every check is of the form

    |computed - exact| <= factor * epsilon * scale

where ``scale`` is the size of the problem (usually a norm of the input
times a dimension). ``factor`` absorbs the small constants of the error
analysis.

Used by the test suite to size error bounds per dtype.
"""

from dataclasses import dataclass

import numpy as np

from pytlapack.core.compute.precision import scalar_traits


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute and relative tolerances for numerical comparison."""
    epsilon: float
    factor: float
    name: str
    description: str

    @property
    def rtol(self) -> float:
        return self.factor * self.epsilon

    def bound(self, scale: float) -> float:
        """Absolute bound for an error measured against ``scale``."""
        return self.rtol * max(scale, 1.0)


FP64 = ToleranceTier(
    epsilon=float(np.finfo(np.float64).eps),
    factor=10.0,
    name='fp64',
    description='double precision real',
)

FP32 = ToleranceTier(
    epsilon=float(np.finfo(np.float32).eps),
    factor=10.0,
    name='fp32',
    description='single precision real',
)

# Complex arithmetic roughly quadruples the flop count per element
COMPLEX128 = ToleranceTier(
    epsilon=float(np.finfo(np.float64).eps),
    factor=40.0,
    name='complex128',
    description='double precision complex',
)

COMPLEX64 = ToleranceTier(
    epsilon=float(np.finfo(np.float32).eps),
    factor=40.0,
    name='complex64',
    description='single precision complex',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for a scalar dtype."""
    traits = scalar_traits(dtype)
    single = traits.real_dtype == np.dtype(np.float32)
    if traits.is_complex:
        return COMPLEX64 if single else COMPLEX128
    return FP32 if single else FP64
