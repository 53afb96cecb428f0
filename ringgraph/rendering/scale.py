"""Vertical scaling of raw samples into filled row counts."""


class ScaleResolver:
    """Normalizes samples against a fixed ceiling or the window maximum."""

    def __init__(self, state):
        self.state = state

    @property
    def mode(self):
        return "auto" if self.state.auto_scale else "fixed"

    @property
    def denominator(self):
        """The value a sample must reach to fill the full height."""
        if self.state.auto_scale:
            return self.state.observed_max
        return self.state.fixed_ceiling

    def rows(self, value, height):
        """Return how many rows ``value`` fills out of ``height``."""
        denominator = self.denominator
        if denominator == 0 or value <= 0:
            return 0
        rows = value * height // denominator
        return min(rows, height)
