"""Fixed-capacity circular sample storage."""

from typing import Callable, Iterator, List, Optional

from ..errors import require_dimension


class SampleRing:
    """
    Circular buffer of integer samples.

    The ring always holds exactly ``capacity`` slots. Writes overwrite the
    oldest slot, so the write cursor also marks where chronological order
    begins.
    """

    def __init__(self, capacity: int, values: Optional[List[int]] = None):
        self.capacity = require_dimension("capacity", capacity)
        self._slots = [0] * capacity
        self._cursor = 0
        if values:
            # Right-align the given history so the newest value is last
            tail = list(values)[-capacity:] if capacity else []
            self._slots[capacity - len(tail) :] = tail

    def __len__(self) -> int:
        return self.capacity

    def __iter__(self) -> Iterator[int]:
        for offset in range(self.capacity):
            yield self._slots[(self._cursor + offset) % self.capacity]

    def insert(self, value: int) -> None:
        """Overwrite the oldest slot and advance the cursor."""
        if self.capacity == 0:
            return
        self._slots[self._cursor] = value
        self._cursor = (self._cursor + 1) % self.capacity

    def for_each_chronological(self, fn: Callable[[int], None]) -> None:
        """Call ``fn`` on every slot, oldest first."""
        for value in self:
            fn(value)

    def values(self) -> List[int]:
        """Return the slots in chronological order."""
        return list(self)

    def maximum(self) -> int:
        """Scan every slot for the greatest sample."""
        return max(self._slots, default=0)

    def copy(self) -> "SampleRing":
        return SampleRing(self.capacity, self.values())

    def __repr__(self):
        return f"SampleRing(capacity={self.capacity}, values={self.values()})"
