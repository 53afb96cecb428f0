"""Ring reallocation when the display area changes."""

import logging

from ..errors import require_dimension
from ..state.ring import SampleRing

logger = logging.getLogger("ringgraph.reflow")


class ReflowController:
    """Rebuilds a graph's ring for a new width, keeping the newest samples."""

    def resize(self, state, width, height):
        """
        Return a copy of ``state`` whose ring has ``width`` slots.

        The newest ``min(old, new)`` samples are kept right-aligned in
        chronological order; growing pads the oldest side with zeroes. The
        ring is indexed by column only, so ``height`` is validated but does
        not touch the samples.
        """
        require_dimension("width", width)
        require_dimension("height", height)
        ring = SampleRing(width, state.ring.values())
        if width != state.width:
            logger.debug("Reflowed ring from %d to %d columns", state.width, width)
        return state.copy(ring=ring)
