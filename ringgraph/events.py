"""Events exchanged between graph components and their host loop."""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional, Union

logger = logging.getLogger("ringgraph.events")


@dataclass(frozen=True)
class UpdateMessage:
    """New data is available for the component with ``identity``."""

    identity: int
    timestamp: datetime
    value: Optional[int] = None
    kind: str = field(default="update", init=False)


@dataclass(frozen=True)
class TickMessage:
    """The host timer fired."""

    timestamp: datetime
    kind: str = field(default="tick", init=False)


@dataclass(frozen=True)
class ResizeMessage:
    """The terminal area changed size."""

    width: int
    height: int
    kind: str = field(default="resize", init=False)


@dataclass(frozen=True)
class KeyMessage:
    """A key was pressed."""

    key: str
    kind: str = field(default="key", init=False)


Event = Union[UpdateMessage, TickMessage, ResizeMessage, KeyMessage]


class EventChannel:
    """
    Per-identity event queues.

    Events carrying an ``identity`` are delivered only to the subscriber with
    that identity; all other events are broadcast to every subscriber.
    """

    def __init__(self):
        self.lock = Lock()
        self._queues: Dict[int, deque] = {}

    def subscribe(self, identity: int) -> None:
        with self.lock:
            self._queues.setdefault(identity, deque())

    def unsubscribe(self, identity: int) -> None:
        with self.lock:
            self._queues.pop(identity, None)

    def publish(self, event: Event) -> int:
        """Queue ``event`` and return how many subscribers received it."""
        identity = getattr(event, "identity", None)
        with self.lock:
            if identity is None:
                for queue in self._queues.values():
                    queue.append(event)
                return len(self._queues)
            queue = self._queues.get(identity)
            if queue is None:
                logger.debug("Dropped %s event for unknown id %s", event.kind, identity)
                return 0
            queue.append(event)
            return 1

    def drain(self, identity: int) -> List[Event]:
        """Remove and return every pending event for ``identity``."""
        with self.lock:
            queue = self._queues.get(identity)
            if not queue:
                return []
            events = list(queue)
            queue.clear()
            return events

    def pending(self, identity: int) -> int:
        with self.lock:
            return len(self._queues.get(identity, ()))
