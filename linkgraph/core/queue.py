"""Thread-safe FIFO queue of nodes pending visitation."""

import threading
from collections import deque
from typing import Deque

from .node import LinkNode


class EmptyQueueError(IndexError):
    """Raised when popping from an empty NodeQueue."""
    pass


class NodeQueue:
    """FIFO of LinkNode references guarded by a single lock.

    The queue does no deduplication: a node may be queued many times, and
    it's the VisitedTracker's job to make sure it is processed once.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._items: Deque[LinkNode] = deque()

    def add(self, node: LinkNode) -> None:
        """Append a node to the back of the queue."""
        with self._lock:
            self._items.append(node)

    def pop(self) -> LinkNode:
        """Remove and return the earliest-added node.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        with self._lock:
            if not self._items:
                raise EmptyQueueError("pop from an empty NodeQueue")
            return self._items.popleft()

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
