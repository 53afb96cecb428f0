"""Sample and scaling state owned by a single graph."""

import logging

from ..errors import require_dimension, require_sample
from .ring import SampleRing

logger = logging.getLogger("ringgraph.state")


class GraphState:
    """Holds the sample ring together with the scale mode and orientation."""

    def __init__(self, capacity, fixed_ceiling=0, inverted=False, ring=None):
        self.ring = ring if ring is not None else SampleRing(capacity)
        self.fixed_ceiling = require_dimension("fixed ceiling", fixed_ceiling)
        self.inverted = bool(inverted)
        self.observed_max = 0
        self.refresh_max()

    @property
    def auto_scale(self):
        """True when the window maximum is the scale denominator."""
        return self.fixed_ceiling == 0

    @property
    def width(self):
        return self.ring.capacity

    def push(self, value):
        """Insert a sample and rescan the window maximum."""
        require_sample(value)
        self.ring.insert(value)
        self.refresh_max()

    def refresh_max(self):
        """Recompute the window maximum from every slot."""
        self.observed_max = self.ring.maximum()
        return self.observed_max

    def copy(self, **changes):
        """Return a copy with its own ring, optionally overriding fields."""
        return GraphState(
            self.width,
            fixed_ceiling=changes.get("fixed_ceiling", self.fixed_ceiling),
            inverted=changes.get("inverted", self.inverted),
            ring=changes["ring"] if "ring" in changes else self.ring.copy(),
        )

    def with_fixed_ceiling(self, value):
        """Scale every sample against a constant denominator."""
        require_dimension("fixed ceiling", value)
        logger.debug("Switching to fixed ceiling %d", value)
        return self.copy(fixed_ceiling=value)

    def with_auto_scale(self):
        """Scale every sample against the window maximum."""
        logger.debug("Switching to auto-scale")
        return self.copy(fixed_ceiling=0)

    def with_inverted(self, inverted=True):
        return self.copy(inverted=inverted)
