"""Test outer styling around the glyph grid."""

import pytest

from ringgraph import GraphStyle, GraphValidationError
from ringgraph.rendering import FrameBuilder, TextUtils


@pytest.fixture
def builder():
    return FrameBuilder()


def test_frame_size_counts_padding_and_border():
    assert GraphStyle().frame_size() == (2, 2)
    assert GraphStyle(border=False).frame_size() == (0, 0)
    assert GraphStyle(padding=(1, 2, 3, 4)).frame_size() == (8, 6)


def test_style_validation():
    with pytest.raises(GraphValidationError):
        GraphStyle(align="middle")
    with pytest.raises(GraphValidationError):
        GraphStyle(padding=(1, 1))
    with pytest.raises(GraphValidationError):
        GraphStyle(padding=(0, -1, 0, 0))


def test_border_wraps_grid(builder):
    assert builder.build("ab\ncd\n", GraphStyle()) == [
        "╔══╗",
        "║ab║",
        "║cd║",
        "╚══╝",
    ]


def test_padding_and_alignment(builder):
    style = GraphStyle(padding=(1, 1, 0, 2), border=False, align="right")
    assert builder.build("x\n", style, width=3) == [
        "      ",
        "    x ",
    ]


@pytest.mark.parametrize(
    "align,expected",
    [("left", "ab   "), ("center", " ab  "), ("right", "   ab")],
)
def test_alignment_modes(align, expected):
    assert TextUtils().align("ab", 5, align) == expected


def test_title_is_truncated_to_border(builder):
    top = builder.build("abc\n", GraphStyle(title="utilization"))[0]
    assert top == "╔ ut╗"


def test_color_is_applied_per_line(builder, term):
    """Styling-disabled terminals leave the text untouched."""
    lines = builder.build("ab\n", GraphStyle(color=205, border=False), term=term)
    assert lines == ["ab"]
    named = builder.build("ab\n", GraphStyle(color="magenta", border=False), term=term)
    assert named == ["ab"]


def test_color_on_styled_terminal(builder, styled_term):
    """Index and named colors wrap each line in escape sequences."""
    indexed = builder.build("ab\n", GraphStyle(color=205, border=False), term=styled_term)
    assert indexed == [styled_term.color(205)("ab")]
    assert indexed[0] != "ab" and "ab" in indexed[0]

    named = builder.build("ab\n", GraphStyle(color="magenta"), term=styled_term)
    assert named[1] == "║" + styled_term.magenta("ab") + "║"
    assert named[1].startswith("║\x1b[")


@pytest.mark.parametrize("color", ["205", "pinkish", 256, -1, True, 3.5])
def test_unknown_colors_are_rejected(color):
    with pytest.raises(GraphValidationError):
        GraphStyle(color=color)


@pytest.mark.parametrize("color", [0, 255, "magenta", "bright_red", "deepskyblue"])
def test_known_colors_are_accepted(color):
    assert GraphStyle(color=color).color == color


def test_truncate_respects_cell_width():
    text_utils = TextUtils()
    assert text_utils.truncate_to_width("⣿⣿⣿", 2) == "⣿⣿"
    assert text_utils.visual_len("⣿ ⣿") == 3
    assert text_utils.visual_ljust("ab", 4) == "ab  "
