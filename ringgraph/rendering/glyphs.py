"""Braille glyph selection for partially and fully filled cells."""

from typing import List

from ..errors import GraphValidationError

FULL_GLYPH = "⣿"
BLANK_GLYPH = " "

# Remainder level -> (upright, inverted). Levels 5/6 and 7/8 share glyphs.
REMAINDER_GLYPHS = {
    0: ("⣿", "⣿"),
    1: ("⢀", "⠈"),
    2: ("⢠", "⠘"),
    3: ("⢰", "⠸"),
    4: ("⢸", "⢸"),
    5: ("⣸", "⢹"),
    6: ("⣸", "⢹"),
    7: ("⣼", "⢻"),
    8: ("⣼", "⢻"),
    9: ("⣾", "⢿"),
}
MAX_REMAINDER_LEVEL = max(REMAINDER_GLYPHS)


class GlyphQuantizer:
    """Turns a filled row count into one column of glyphs."""

    def remainder_glyph(self, rows, height, inverted=False):
        """Glyph for the topmost filled cell of a column."""
        level = min(rows % height, MAX_REMAINDER_LEVEL)
        return REMAINDER_GLYPHS[level][1 if inverted else 0]

    def column(self, rows: int, height: int, inverted: bool = False) -> List[str]:
        """
        Build a column of ``height`` glyphs, top row first.

        Upright columns grow from the bottom row, inverted columns hang from
        the top row. ``rows`` must already be clamped to ``[0, height]``.
        """
        if rows < 0 or rows > height:
            raise GraphValidationError(
                f"Row count {rows} outside of column height {height}"
            )
        cells = [BLANK_GLYPH] * height
        for i in range(rows):
            index = i if inverted else height - 1 - i
            if i < rows - 1:
                cells[index] = FULL_GLYPH
            else:
                cells[index] = self.remainder_glyph(rows, height, inverted)
        return cells
