"""
Overflow-safe square roots of sums of squares.

lapy2(x, y)    = sqrt(x**2 + y**2)
lapy3(x, y, z) = sqrt(x**2 + y**2 + z**2)

Both factor out the largest magnitude first, so the result is accurate
whenever it is representable, even if the squares themselves are not.
"""

from typing import Any

import numpy as np


def lapy2(x: Any, y: Any) -> Any:
    """sqrt(x**2 + y**2) for real x, y; NaN inputs propagate."""
    if np.isnan(x):
        return x
    if np.isnan(y):
        return y
    xabs = np.abs(x)
    yabs = np.abs(y)
    w = max(xabs, yabs)
    z = min(xabs, yabs)
    if z == 0 or np.isinf(w):
        return w
    return w * np.sqrt(1 + (z / w) ** 2)


def lapy3(x: Any, y: Any, z: Any) -> Any:
    """sqrt(x**2 + y**2 + z**2) for real x, y, z."""
    xabs = np.abs(x)
    yabs = np.abs(y)
    zabs = np.abs(z)
    w = max(xabs, yabs, zabs)
    if w == 0 or np.isinf(w):
        # w can be zero for max(0, nan, 0); adding all three propagates NaN
        return xabs + yabs + zabs
    return w * np.sqrt((xabs / w) ** 2 + (yabs / w) ** 2 + (zabs / w) ** 2)
