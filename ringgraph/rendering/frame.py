"""Frame building and border management."""

from .utils import TextUtils


class FrameBuilder:
    """Wraps a raw glyph grid in padding, alignment, a border and color."""

    def __init__(self):
        self.text_utils = TextUtils()

    def create_top_border(self, width, title=""):
        """Create the top border of the frame."""
        if title:
            label = self.text_utils.truncate_to_width(f" {title} ", width)
            fill = width - self.text_utils.visual_len(label)
            return "╔" + label + "═" * fill + "╗"
        return "╔" + "═" * width + "╗"

    def create_bottom_border(self, width):
        """Create the bottom border of the frame."""
        return "╚" + "═" * width + "╝"

    def content_lines(self, lines, style, width):
        """Pad and align the grid lines, without the border."""
        top, right, bottom, left = style.padding
        blank = " " * (left + width + right)

        padded = [blank] * top
        for line in lines:
            body = self.text_utils.align(line, width, style.align)
            padded.append(" " * left + body + " " * right)
        padded.extend([blank] * bottom)
        return padded

    def colorize(self, lines, term, color):
        """Apply a blessed foreground color to each line."""
        if term is None or color is None:
            return lines
        if isinstance(color, int):
            formatter = term.color(color)
        else:
            formatter = getattr(term, color)
        return [formatter(line) for line in lines]

    def build(self, text, style, width=None, term=None):
        """Compose the full frame as a list of lines.

        ``width`` is the inner graph width; by default it is the widest line
        of ``text``.
        """
        lines = text.splitlines()
        if width is None:
            width = max((self.text_utils.visual_len(line) for line in lines), default=0)

        framed = self.colorize(self.content_lines(lines, style, width), term, style.color)
        if not style.border:
            return framed

        top, right, bottom, left = style.padding
        inner_width = left + width + right
        frame = [self.create_top_border(inner_width, style.title)]
        frame.extend("║" + line + "║" for line in framed)
        frame.append(self.create_bottom_border(inner_width))
        return frame

    def render(self, text, style, width=None, term=None):
        """Compose the full frame as a single string."""
        return "\n".join(self.build(text, style, width, term))
