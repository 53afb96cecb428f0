"""Identity allocation for graph components."""

import threading


class IdentityRegistry:
    """
    Hands out process-unique component identities.

    One registry is shared by every graph a host creates, so identities stay
    unique without module-level state. Ids start at 1 and are never reused.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last_id = 0

    def next_id(self):
        """Allocate the next identity."""
        with self._lock:
            self._last_id += 1
            return self._last_id

    @property
    def issued(self):
        """The most recently allocated identity, or 0 if none yet."""
        with self._lock:
            return self._last_id
