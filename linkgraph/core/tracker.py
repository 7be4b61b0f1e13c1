"""Shared visited tracking for concurrent traversal.

A node may be reached by several workers, or by one worker along several
edges. ``VisitedTracker.try_claim`` decides, exactly once per node, which
caller gets to process it.
"""

import threading
from typing import FrozenSet, Set

from .node import LinkNode


class VisitedTracker:
    """Lock-protected set of visited node identifiers.

    Marking and testing happen in the same critical section, so two workers
    racing on one node can never both see it as unvisited. There is
    deliberately no public "mark visited" call: claiming is the only way in.
    Once claimed, a node stays claimed for the tracker's lifetime.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def try_claim(self, node: LinkNode) -> bool:
        """Atomically mark ``node`` visited.

        Returns:
            True if this call claimed the node, False if it was already
            visited
        """
        node_id = node.identifier()
        with self._lock:
            if node_id in self._visited:
                return False
            self._visited.add(node_id)
            return True

    def is_visited(self, node: LinkNode) -> bool:
        """Report whether ``node`` has been claimed.

        The answer can be stale by the time the caller acts on it; use
        ``try_claim`` to decide who processes a node.
        """
        with self._lock:
            return node.identifier() in self._visited

    def visited(self) -> FrozenSet[str]:
        """Snapshot of claimed node identifiers."""
        with self._lock:
            return frozenset(self._visited)

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, LinkNode):
            return False
        return self.is_visited(node)

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
