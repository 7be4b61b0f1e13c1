"""Graph traversal strategies for linkgraph.

A traverser walks the graph from one entry point on behalf of one worker.
Several traversers run at once over the same graph; they coordinate only
through the shared VisitedTracker they were given.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from .adapter import GraphAdapter
from .node import LinkNode
from .queue import NodeQueue
from .tracker import VisitedTracker


class GraphTraverser(ABC):
    """Abstract base class for graph traversal strategies.

    Traversers are independent of the node structure, working through the
    GraphAdapter, and independent of what is done with each node, which is
    up to whoever consumes ``traverse()``.
    """

    def __init__(self, adapter: GraphAdapter, tracker: VisitedTracker):
        """Initialize traverser.

        Args:
            adapter: GraphAdapter for navigating edges
            tracker: VisitedTracker shared with every other worker of the run
        """
        self.adapter = adapter
        self.tracker = tracker

    @abstractmethod
    def traverse(self, entry: LinkNode) -> Iterator[LinkNode]:
        """Traverse the graph starting from ``entry``.

        Args:
            entry: Starting node for this worker

        Yields:
            Each node this traverser claimed, exactly once
        """
        pass


class BreadthFirstTraverser(GraphTraverser):
    """Breadth-first traversal over a worker-private queue.

    Each node is claimed through the shared tracker when it's popped, not
    when it's queued, so the same node may sit in several queues at once.
    Only the first claim wins; later pops of that node are discarded, which
    is also what makes cycles terminate.
    """

    def traverse(self, entry: LinkNode) -> Iterator[LinkNode]:
        queue = NodeQueue()
        queue.add(entry)

        while not queue.is_empty():
            node = queue.pop()

            if not self.tracker.try_claim(node):
                continue

            yield node

            for target in self.adapter.get_edges(node):
                queue.add(target)
