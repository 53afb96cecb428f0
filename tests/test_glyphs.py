"""Test glyph selection for a single column."""

import pytest

from ringgraph import GlyphQuantizer, GraphValidationError
from ringgraph.rendering import BLANK_GLYPH, FULL_GLYPH, REMAINDER_GLYPHS


@pytest.fixture
def quantizer():
    return GlyphQuantizer()


def test_remainder_table_is_preserved():
    """Levels 5/6 and 7/8 share glyphs; level 0 is the full block."""
    assert len(REMAINDER_GLYPHS) == 10
    assert REMAINDER_GLYPHS[0] == (FULL_GLYPH, FULL_GLYPH)
    assert REMAINDER_GLYPHS[5] == REMAINDER_GLYPHS[6] == ("⣸", "⢹")
    assert REMAINDER_GLYPHS[7] == REMAINDER_GLYPHS[8] == ("⣼", "⢻")
    assert REMAINDER_GLYPHS[9] == ("⣾", "⢿")


def test_empty_column_is_blank(quantizer):
    assert quantizer.column(0, 4) == [BLANK_GLYPH] * 4
    assert quantizer.column(0, 4, inverted=True) == [BLANK_GLYPH] * 4


def test_full_column_is_solid(quantizer):
    """rows == height wraps the remainder to level 0, the full glyph."""
    assert quantizer.column(4, 4) == [FULL_GLYPH] * 4
    assert quantizer.column(4, 4, inverted=True) == [FULL_GLYPH] * 4


@pytest.mark.parametrize("rows", range(1, 10))
def test_topmost_cell_uses_remainder_level(quantizer, rows):
    """The topmost filled cell is keyed by rows % height."""
    height = 10
    upright = quantizer.column(rows, height)
    inverted = quantizer.column(rows, height, inverted=True)

    assert upright[height - rows] == REMAINDER_GLYPHS[rows][0]
    assert upright[height - rows + 1 :] == [FULL_GLYPH] * (rows - 1)
    assert upright[: height - rows] == [BLANK_GLYPH] * (height - rows)

    assert inverted[rows - 1] == REMAINDER_GLYPHS[rows][1]
    assert inverted[: rows - 1] == [FULL_GLYPH] * (rows - 1)
    assert inverted[rows:] == [BLANK_GLYPH] * (height - rows)


def test_tall_columns_cap_the_remainder_level(quantizer):
    """Remainders past the table use the most filled partial glyph."""
    column = quantizer.column(11, 12)
    assert column[1] == REMAINDER_GLYPHS[9][0]
    assert column[0] == BLANK_GLYPH


def test_unclamped_rows_are_rejected(quantizer):
    with pytest.raises(GraphValidationError):
        quantizer.column(5, 4)
    with pytest.raises(GraphValidationError):
        quantizer.column(-1, 4)
