"""
Random vectors from uniform or normal distributions.

The generator is seeded from the caller's seed alone, so a given seed
always reproduces the same vector. The routine returns the seed the next
call should use.
"""

from typing import Any

import numpy as np

from pytlapack.core.compute.precision import scalar_traits
from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.views import as_vector

# idist codes
UNIFORM_01 = 1
UNIFORM_11 = 2
NORMAL_01 = 3
UNIFORM_DISC = 4
UNIFORM_CIRCLE = 5


def larnv(idist: int, seed: int, x: Any) -> int:
    """
    Fill x with random numbers.

    Args:
        idist: Distribution of the real and imaginary parts:
            1: uniform (0, 1)
            2: uniform (-1, 1)
            3: normal (0, 1)
            4: uniform on the disc |z| < 1 (complex x only)
            5: uniform on the circle |z| = 1 (complex x only)
        seed: Non-negative integer seed
        x: Vector to fill, overwritten

    Returns:
        The updated seed, ``seed + 1``

    Raises:
        ArgumentError: Unknown idist, or idist 4/5 with real x (position 1);
            negative seed (position 2)
    """
    x = as_vector(x, 'x')
    complex_x = scalar_traits(x.dtype).is_complex
    if idist not in (UNIFORM_01, UNIFORM_11, NORMAL_01, UNIFORM_DISC, UNIFORM_CIRCLE):
        raise ArgumentError(f"unknown distribution code {idist}", 'larnv', 1)
    if idist in (UNIFORM_DISC, UNIFORM_CIRCLE) and not complex_x:
        raise ArgumentError(f"distribution {idist} needs complex x", 'larnv', 1)
    if seed < 0:
        raise ArgumentError(f"seed must be non-negative, got {seed}", 'larnv', 2)

    rng = np.random.default_rng(seed)
    n = len(x)
    if idist == UNIFORM_01:
        parts = rng.uniform(0.0, 1.0, size=(n, 2))
    elif idist == UNIFORM_11:
        parts = rng.uniform(-1.0, 1.0, size=(n, 2))
    elif idist == NORMAL_01:
        parts = rng.standard_normal(size=(n, 2))
    else:
        radius = np.sqrt(rng.uniform(0.0, 1.0, n)) if idist == UNIFORM_DISC else np.ones(n)
        theta = 2 * np.pi * rng.uniform(0.0, 1.0, n)
        parts = np.column_stack([radius * np.cos(theta), radius * np.sin(theta)])

    xa = x.as_array()
    if complex_x:
        xa[:] = parts[:, 0] + 1j * parts[:, 1]
    else:
        xa[:] = parts[:, 0]
    return seed + 1
