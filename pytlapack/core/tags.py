"""
Tag enumerations for BLAS/LAPACK routines.

This module is the SINGLE SOURCE OF TRUTH for the closed selector sets
(layout, transpose kind, triangle, diagonal kind, side). Import from here,
never pass raw strings around inside the kernels.

Usage:
    from pytlapack.core.tags import Layout, Op, Uplo

    uplo = Uplo.coerce('L')        # Uplo.Lower
    Uplo.Lower.swapped()           # Uplo.Upper
    Op.NoTrans.flipped()           # Op.Trans

The single-letter values follow the reference BLAS character arguments,
so ``Uplo.coerce('u')`` and ``Uplo.coerce(Uplo.Upper)`` are equivalent.
"""

from enum import Enum


class _Tag(Enum):
    """Common coercion for all tag enumerations."""

    @classmethod
    def coerce(cls, value):
        """
        Convert a member or its letter to a member of this enumeration.

        Args:
            value: Enum member or single-letter string (case-insensitive)

        Returns:
            The enumeration member

        Raises:
            ValueError: If value names no member of this enumeration
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.upper()
            for member in cls:
                if member.value == key:
                    return member
        valid = ", ".join(repr(m.value) for m in cls)
        raise ValueError(f"{cls.__name__}: invalid value {value!r}, expected one of {valid}")


class Layout(_Tag):
    ColMajor = 'C'
    RowMajor = 'R'

    def other(self) -> 'Layout':
        if self is Layout.ColMajor:
            return Layout.RowMajor
        return Layout.ColMajor


class Op(_Tag):
    NoTrans = 'N'
    Trans = 'T'
    ConjTrans = 'C'

    def flipped(self) -> 'Op':
        """Transpose flag seen from the other storage layout."""
        if self is Op.NoTrans:
            return Op.Trans
        return Op.NoTrans


class Uplo(_Tag):
    Upper = 'U'
    Lower = 'L'
    General = 'G'

    def swapped(self) -> 'Uplo':
        """Referenced triangle seen from the other storage layout."""
        if self is Uplo.Upper:
            return Uplo.Lower
        if self is Uplo.Lower:
            return Uplo.Upper
        return Uplo.General


class Diag(_Tag):
    NonUnit = 'N'
    Unit = 'U'


class Side(_Tag):
    Left = 'L'
    Right = 'R'


__all__ = [
    'Layout',
    'Op',
    'Uplo',
    'Diag',
    'Side',
]
