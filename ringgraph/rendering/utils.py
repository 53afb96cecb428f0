"""Text width utilities."""

import wcwidth


class TextUtils:
    """Cell-width aware helpers for composing terminal frames."""

    def visual_len(self, s):
        """Calculate the visual display width of a string."""
        return sum(max(wcwidth.wcwidth(char), 0) for char in s)

    def truncate_to_width(self, text, width):
        """Truncate text to fit within a given width, accounting for wide characters."""
        if not text:
            return ""

        current_width = 0
        result = []
        for char in text:
            char_width = max(wcwidth.wcwidth(char), 0)
            if current_width + char_width > width:
                break
            result.append(char)
            current_width += char_width

        return "".join(result)

    def visual_ljust(self, string, width):
        """Left-justify a string to a specified width, considering character display width."""
        padding = max(0, width - self.visual_len(string))
        return string + " " * padding

    def align(self, string, width, how="left"):
        """Fit ``string`` into ``width`` cells using the given alignment."""
        string = self.truncate_to_width(string, width)
        padding = max(0, width - self.visual_len(string))
        if how == "right":
            return " " * padding + string
        if how == "center":
            left = padding // 2
            return " " * left + string + " " * (padding - left)
        return string + " " * padding
