"""Differential rendering for terminal output."""

from typing import List, Optional


class TerminalDifferentialRenderer:
    """
    Line-level differential rendering for terminal output.
    Only rows that changed since the previous frame are rewritten.
    """

    def __init__(self, term):
        self.term = term
        self.previous_frame: Optional[List[str]] = None

    def render_frame(self, new_frame: List[str], output) -> None:
        """Render a frame with minimal terminal updates."""
        if not new_frame:
            return

        # First frame or size changed - full redraw
        if self.previous_frame is None or len(self.previous_frame) != len(new_frame):
            self._full_redraw(new_frame, output)
            self.previous_frame = list(new_frame)
            return

        changed = [
            row
            for row, (old_line, new_line) in enumerate(
                zip(self.previous_frame, new_frame)
            )
            if old_line != new_line
        ]
        self._apply_updates(changed, new_frame, output)
        self.previous_frame = list(new_frame)

    def _full_redraw(self, frame: List[str], output) -> None:
        """Perform a full screen redraw."""
        print(self.term.home + self.term.clear + "\n".join(frame), end="", file=output)
        output.flush()

    def _apply_updates(self, rows: List[int], frame: List[str], output) -> None:
        """Rewrite the changed rows inside one synchronized update."""
        if not rows:
            return

        parts = ["\033[?2026h"]  # Begin synchronized update
        for row in rows:
            parts.append(self.term.move_yx(row, 0) + self.term.clear_eol + frame[row])
        parts.append("\033[?2026l")  # End synchronized update

        print("".join(parts), end="", file=output)
        output.flush()

    def reset(self) -> None:
        """Reset the renderer state."""
        self.previous_frame = None
