"""Terminal state management and restoration."""

import sys
from contextlib import contextmanager

import blessed


class TerminalStateManager:
    """Manages terminal state saving and restoration."""

    def __init__(self, term=None):
        self.term = term or blessed.Terminal()
        self.saved_terminal_state = None
        self.terminal_restored = False
        self.original_stderr = sys.stderr

    def save_state(self):
        """Save current terminal settings."""
        try:
            import termios
        except ImportError:
            self.saved_terminal_state = None
            return

        try:
            self.saved_terminal_state = termios.tcgetattr(sys.stdin.fileno())
        except (OSError, ValueError, termios.error):
            self.saved_terminal_state = None

    def restore_terminal(self):
        """Fully restore terminal to its original state."""
        if self.terminal_restored:
            return

        print(self.term.exit_fullscreen, end="", file=self.original_stderr)
        print(self.term.normal, end="", file=self.original_stderr)
        print(self.term.visible_cursor, end="", file=self.original_stderr)
        self.original_stderr.flush()

        if self.saved_terminal_state is not None:
            import termios

            try:
                termios.tcsetattr(
                    sys.stdin.fileno(), termios.TCSANOW, self.saved_terminal_state
                )
            except (OSError, ValueError, termios.error):
                pass

        self.terminal_restored = True


@contextmanager
def managed_terminal(term, state_manager):
    """Context manager for terminal fullscreen mode."""
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            yield
    finally:
        if not state_manager.terminal_restored:
            state_manager.restore_terminal()
