"""
Shared numeric infrastructure for pytlapack.

Submodules:
    precision: Scalar-type traits (epsilon, safe minimum, real/complex)
    tolerances: Tolerance tiers per scalar family
    timing: Execution timing utilities for the high-level solvers
"""

from pytlapack.core.compute.precision import (
    ScalarTraits,
    scalar_traits,
    machine_epsilon,
    safe_minimum,
)
from pytlapack.core.compute.tolerances import ToleranceTier, select_tolerance
from pytlapack.core.compute.timing import Timer

__all__ = [
    # Scalar traits
    "ScalarTraits",
    "scalar_traits",
    "machine_epsilon",
    "safe_minimum",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    # Timing
    "Timer",
]
