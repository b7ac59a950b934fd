"""
Exception hierarchy for pytlapack.

All exceptions inherit from PyTLapackError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Argument errors name the routine and the 1-based argument position
    - Checks run before any operand is mutated
"""


class PyTLapackError(Exception):
    """Base exception for all pytlapack errors."""
    pass


class ValidationError(PyTLapackError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ArgumentError(ValidationError):
    """
    An argument of a BLAS/LAPACK routine is invalid.

    This is the Python rendering of the classic ``info`` channel: instead
    of returning ``-i`` the routine raises, and the exception carries the
    same information.

    Attributes:
        routine: Name of the routine that rejected the call (e.g. 'geqr2')
        position: 1-based position of the offending argument
        info: LAPACK-style status code, always ``-position``
    """

    def __init__(self, message: str, routine: str, position: int):
        super().__init__(f"{routine}: argument {position}: {message}")
        self.routine = routine
        self.position = position

    @property
    def info(self) -> int:
        return -self.position
