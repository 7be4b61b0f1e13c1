"""GraphAdapter abstraction for linkgraph.

The adapter provides the navigation logic for a graph, decoupling the node
representation from the traversal and counting code. Traversers ask the
adapter for edges; collectors ask it for link symbols.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from .node import LinkNode


class GraphAdapter(ABC):
    """Abstract adapter for navigating a directed link graph.

    Adapters must be safe to call from several worker threads at once.
    Adapters over immutable nodes get this for free.
    """

    @abstractmethod
    def get_edges(self, node: LinkNode) -> Iterator[LinkNode]:
        """Get an iterator over the node's outgoing edge targets, in order.

        Args:
            node: The source node

        Returns:
            Iterator yielding target nodes (duplicates allowed)
        """
        pass

    @abstractmethod
    def get_links(self, node: LinkNode) -> Iterator[str]:
        """Get an iterator over the node's link symbols, in order.

        Args:
            node: The node to read

        Returns:
            Iterator yielding link symbols (repeats allowed)
        """
        pass


class LinkGraphAdapter(GraphAdapter):
    """Adapter for graphs built by ``build_graph``."""

    def get_edges(self, node: LinkNode) -> Iterator[LinkNode]:
        return iter(node.edges)

    def get_links(self, node: LinkNode) -> Iterator[str]:
        return iter(node.links)

