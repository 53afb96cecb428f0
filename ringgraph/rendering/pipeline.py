"""Render pipeline from graph state to a text frame."""

from typing import List

from ..errors import require_dimension
from .glyphs import BLANK_GLYPH, GlyphQuantizer
from .scale import ScaleResolver


class RenderPipeline:
    """Renders a graph state into a ``width`` x ``height`` glyph grid."""

    def __init__(self, quantizer=None):
        self.quantizer = quantizer or GlyphQuantizer()

    def grid(self, state, width: int, height: int) -> List[List[str]]:
        """Build the grid row-major, oldest sample in the leftmost column."""
        require_dimension("width", width)
        require_dimension("height", height)
        cells = [[BLANK_GLYPH] * width for _ in range(height)]
        if height == 0:
            return cells

        resolver = ScaleResolver(state)
        for x, value in enumerate(state.ring):
            if x >= width:
                break
            rows = resolver.rows(value, height)
            column = self.quantizer.column(rows, height, state.inverted)
            for y, glyph in enumerate(column):
                cells[y][x] = glyph
        return cells

    def render(self, state, width: int, height: int) -> str:
        """Serialize the grid, one newline-terminated line per row."""
        return "".join(
            "".join(row) + "\n" for row in self.grid(state, width, height)
        )
