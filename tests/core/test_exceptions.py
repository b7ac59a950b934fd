"""
Tests for the pytlapack exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyTLapackError)
    - ArgumentError diagnostic attributes (routine, position, info)
    - Message formatting
"""

import pytest

from pytlapack.core.exceptions import (
    ArgumentError,
    DimensionError,
    PyTLapackError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyTLapackError."""

    def test_validation_error_is_pytlapack_error(self):
        with pytest.raises(PyTLapackError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_argument_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ArgumentError("bad", 'syrk', 3)


# ═══════════════════════════════════════════════════════════════════════
# ArgumentError
# ═══════════════════════════════════════════════════════════════════════


class TestArgumentError:
    """ArgumentError carries the routine and the 1-based argument position."""

    def test_attributes(self):
        err = ArgumentError("lda=1 must be >= 3", 'syrk', 8)
        assert err.routine == 'syrk'
        assert err.position == 8

    def test_info_is_negative_position(self):
        err = ArgumentError("bad", 'geqr2', 5)
        assert err.info == -5

    def test_message_names_routine_and_position(self):
        err = ArgumentError("tau too short", 'geqr2', 5)
        assert str(err) == "geqr2: argument 5: tau too short"

    def test_catchable_by_position(self):
        with pytest.raises(ArgumentError) as excinfo:
            raise ArgumentError("bad uplo", 'laset', 1)
        assert excinfo.value.position == 1
