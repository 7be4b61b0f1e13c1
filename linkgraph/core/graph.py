"""Graph construction for linkgraph.

``build_graph`` turns a ``GraphConfig`` into an immutable ``Graph``. Nodes
are memoized by name: every configured node gets exactly one ``LinkNode``
shell first, and only then are edges wired to those shells. Because no edge
is resolved before every shell exists, cyclic and repeated references need
no recursion and can never rebuild a node.
"""

import logging
from collections import deque
from typing import Deque, Dict, Iterable, Iterator, List, Optional, Set

from .._common.config import GraphConfig
from .node import LinkNode

logger = logging.getLogger(__name__)


class GraphConfigError(ValueError):
    """Raised when a graph configuration cannot be built."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid graph configuration: {'; '.join(self.errors)}")


class Graph:
    """A finished, read-only graph of LinkNodes plus its entry points."""

    def __init__(self, nodes: Dict[str, LinkNode], entry_points: List[LinkNode]):
        self._nodes = dict(nodes)
        self._entry_points = list(entry_points)

    @property
    def nodes(self) -> Dict[str, LinkNode]:
        """Name -> node mapping (a copy; the graph itself never changes)."""
        return dict(self._nodes)

    @property
    def entry_points(self) -> List[LinkNode]:
        """Entry nodes in configuration order. May contain duplicates."""
        return list(self._entry_points)

    def get(self, name: str) -> LinkNode:
        """Return the node called ``name``.

        Raises:
            KeyError: If no such node exists
        """
        return self._nodes[name]

    def reachable_from(self, names: Optional[Iterable[str]] = None) -> Set[str]:
        """Names of all nodes reachable from ``names`` (default: entry points).

        Single-threaded reference walk, used for logging and sanity checks.
        """
        if names is None:
            start = self._entry_points
        else:
            start = [self.get(name) for name in names]

        seen: Set[str] = set()
        pending: Deque[LinkNode] = deque(start)
        while pending:
            node = pending.popleft()
            if node.identifier() in seen:
                continue
            seen.add(node.identifier())
            pending.extend(node.edges)
        return seen

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[LinkNode]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        entries = [node.identifier() for node in self._entry_points]
        return f"Graph(nodes={len(self._nodes)}, entry_points={entries!r})"


def build_graph(config: GraphConfig) -> Graph:
    """Build a Graph from its configuration.

    Args:
        config: Node definitions and entry point names

    Returns:
        Fully wired Graph

    Raises:
        GraphConfigError: If any edge or entry point names an undefined
            node, or the config is otherwise invalid. Nothing is built.
    """
    errors = config.validate()
    if errors:
        raise GraphConfigError(errors)

    # Shells first, so every edge below resolves to an existing identity
    created: Dict[str, LinkNode] = {}
    for name, node_config in config.nodes.items():
        created[name] = LinkNode(name, node_config.symbols())
        logger.debug("Created node %r with links %r", name, node_config.symbols())

    for name, node_config in config.nodes.items():
        created[name]._wire(created[target] for target in node_config.edges)

    entry_points = [created[name] for name in config.entry_points]

    graph = Graph(created, entry_points)
    logger.info("Built graph with %d nodes and %d entry points",
                len(graph), len(entry_points))
    return graph
