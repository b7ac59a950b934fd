"""
Shared argument checks for the pointer-style entry points.
"""

from typing import Any

import numpy as np

from pytlapack.core.exceptions import ArgumentError
from pytlapack.core.tags import Layout


def check_storage(
    buffer: Any,
    nrows: int,
    ncols: int,
    ld: int,
    layout: Layout,
    name: str,
    routine: str,
    position: int,
    writeable: bool = False,
) -> None:
    """
    Verify a flat buffer can hold an nrows-by-ncols matrix with leading dimension ld.

    Raises:
        ArgumentError: If buffer is not a 1-D floating ndarray, is read-only
            when it must be written, or is too short. Empty matrices need
            no storage and are not checked.
    """
    if nrows == 0 or ncols == 0:
        return
    if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
        raise ArgumentError(f"{name} must be a 1-D numpy.ndarray", routine, position)
    if not np.issubdtype(buffer.dtype, np.inexact):
        raise ArgumentError(
            f"{name} has dtype {buffer.dtype}, expected real or complex floating point",
            routine, position,
        )
    if writeable and not buffer.flags.writeable:
        raise ArgumentError(f"{name} is read-only", routine, position)
    outer, inner = (ncols, nrows) if layout is Layout.ColMajor else (nrows, ncols)
    required = ld * (outer - 1) + inner
    if buffer.shape[0] < required:
        raise ArgumentError(
            f"{name} holds {buffer.shape[0]} elements, {required} required for a "
            f"{nrows}x{ncols} {layout.name} matrix with leading dimension {ld}",
            routine, position,
        )
