"""
Tests for the tag enumerations.
"""

import pytest

from pytlapack.core.tags import Diag, Layout, Op, Side, Uplo


class TestCoerce:
    """Members and their letters (any case) coerce to the same member."""

    @pytest.mark.parametrize("letter, member", [
        ('U', Uplo.Upper), ('l', Uplo.Lower), ('G', Uplo.General),
        ('n', Op.NoTrans), ('T', Op.Trans), ('c', Op.ConjTrans),
        ('C', Layout.ColMajor), ('r', Layout.RowMajor),
        ('U', Diag.Unit), ('N', Diag.NonUnit),
        ('L', Side.Left), ('R', Side.Right),
    ])
    def test_letter(self, letter, member):
        assert type(member).coerce(letter) is member

    def test_member_passthrough(self):
        assert Op.coerce(Op.Trans) is Op.Trans

    def test_unknown_letter(self):
        with pytest.raises(ValueError, match="Uplo"):
            Uplo.coerce('X')

    def test_member_of_other_enum(self):
        with pytest.raises(ValueError):
            Side.coerce(Uplo.Lower)

    def test_non_string(self):
        with pytest.raises(ValueError):
            Op.coerce(1)


class TestLayoutSwitch:
    """Row-major problems are column-major problems with swapped tags."""

    def test_layout_other(self):
        assert Layout.ColMajor.other() is Layout.RowMajor
        assert Layout.RowMajor.other() is Layout.ColMajor

    def test_uplo_swapped(self):
        assert Uplo.Upper.swapped() is Uplo.Lower
        assert Uplo.Lower.swapped() is Uplo.Upper
        assert Uplo.General.swapped() is Uplo.General

    def test_op_flipped(self):
        assert Op.NoTrans.flipped() is Op.Trans
        assert Op.Trans.flipped() is Op.NoTrans
        assert Op.ConjTrans.flipped() is Op.NoTrans
