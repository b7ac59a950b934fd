"""
Generic result container for the high-level pytlapack solvers.

The kernels (geqr2, syrk, ...) work in place and return an info code.
The solvers built on them (``pytlapack.lapack.solvers``) return this
envelope instead, so timing and non-fatal diagnostics travel with the
numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a driver computation.

    Type Parameters:
        P: The driver-specific payload type

    Attributes:
        params: Driver payload (factors, scalar factors of reflectors, ...)
        info: Structured metadata (method, rank, shape)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the kernel path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=QRParams(factored=a, tau=tau, Q=q, R=r, rank=3),
        ...     info={'method': 'householder', 'rank': 3},
        ...     timing={'total_seconds': 0.01, 'geqr2': 0.008},
        ...     backend_name='cpu_geqr2',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
