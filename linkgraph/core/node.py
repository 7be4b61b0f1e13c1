"""LinkNode for linkgraph.

A LinkNode is intentionally kept simple - it's a data container holding a
name, link symbols and outgoing edges. Navigation logic is delegated to the
GraphAdapter.
"""

from typing import Any, Dict, Iterable, Tuple


class LinkNode:
    """A named node carrying link symbols and directed edges.

    Nodes are created by the graph builder in two steps: a shell holding the
    name and links, then a single call wiring its edges. After that the node
    never changes, so any number of workers may read it without locking.
    """

    def __init__(self, name: str, links: Iterable[str] = ()):
        """Create a node shell with no edges.

        Args:
            name: Unique node name, used as the identifier
            links: Link symbols carried by the node
        """
        self._name = name
        self._links: Tuple[str, ...] = tuple(links)
        self._edges: Tuple['LinkNode', ...] = ()
        self._wired = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def links(self) -> Tuple[str, ...]:
        return self._links

    @property
    def edges(self) -> Tuple['LinkNode', ...]:
        return self._edges

    def _wire(self, edges: Iterable['LinkNode']) -> None:
        """Attach outgoing edges. Only the graph builder calls this.

        Raises:
            RuntimeError: If edges were already wired
        """
        if self._wired:
            raise RuntimeError(f"Edges of node {self._name!r} are already wired")
        self._edges = tuple(edges)
        self._wired = True

    def identifier(self) -> str:
        """Return the node name, unique within its graph."""
        return self._name

    def is_leaf(self) -> bool:
        """A node with no outgoing edges is a leaf."""
        return not self._edges

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node."""
        return {
            'name': self._name,
            'links': ''.join(self._links),
            'link_count': len(self._links),
            'edge_count': len(self._edges),
            'edges': [edge.identifier() for edge in self._edges],
        }

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self._name!r}, "
                f"links={''.join(self._links)!r})")

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, LinkNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
