"""Immutable graph and style configuration."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from blessed.colorspace import X11_COLORNAMES_TO_RGB
from blessed.formatters import COLORS

from .errors import GraphValidationError, require_dimension

ALIGNMENTS = ("left", "center", "right")


def require_color(color):
    """Accept a 256-color index or a color name blessed understands."""
    if isinstance(color, int) and not isinstance(color, bool):
        if 0 <= color <= 255:
            return color
        raise GraphValidationError(f"Color index must be in 0..255, got {color}")
    if isinstance(color, str) and (color in COLORS or color in X11_COLORNAMES_TO_RGB):
        return color
    raise GraphValidationError(f"Unknown color {color!r}")


@dataclass(frozen=True)
class GraphConfig:
    """Creation-time settings for a graph.

    A ``fixed_ceiling`` of 0 selects auto-scale; any positive value is used
    as the constant scale denominator.
    """

    initial_width: int = 100
    fixed_ceiling: int = 0
    inverted: bool = False

    def __post_init__(self):
        require_dimension("initial width", self.initial_width)
        require_dimension("fixed ceiling", self.fixed_ceiling)


@dataclass(frozen=True)
class GraphStyle:
    """Outer presentation wrapped around the raw glyph grid."""

    padding: Tuple[int, int, int, int] = (0, 0, 0, 0)
    border: bool = True
    align: str = "center"
    color: Optional[Union[str, int]] = None
    title: str = ""

    def __post_init__(self):
        if len(self.padding) != 4:
            raise GraphValidationError(
                f"Padding needs (top, right, bottom, left), got {self.padding!r}"
            )
        for side in self.padding:
            require_dimension("padding", side)
        if self.align not in ALIGNMENTS:
            raise GraphValidationError(
                f"Unknown alignment {self.align!r} (choices: {', '.join(ALIGNMENTS)})"
            )
        if self.color is not None:
            require_color(self.color)

    def frame_size(self):
        """Return the (horizontal, vertical) cells taken by padding and border."""
        top, right, bottom, left = self.padding
        border = 2 if self.border else 0
        return left + right + border, top + bottom + border
