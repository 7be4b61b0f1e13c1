"""Configuration classes for linkgraph.

Two kinds of configuration live here:

- ``GraphConfig`` / ``NodeConfig`` describe the graph to build: node names,
  the link symbols carried by each node, and the names each node points to.
- ``CountConfig`` describes how a counting run behaves at runtime.

Both follow the same pattern: plain dataclasses plus a ``validate()`` method
returning a list of problems, so callers can report every issue at once
instead of failing on the first.
"""

import collections.abc
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union


LinksSpec = Union[str, Sequence[str]]


def normalize_links(links: LinksSpec) -> Tuple[str, ...]:
    """Turn a links specification into a tuple of symbols.

    A plain string is split into single-character symbols ("ABC" -> A, B, C).
    Any other sequence is taken as already-split symbols.
    """
    if links is None:
        return ()
    return tuple(links)


@dataclass
class NodeConfig:
    """Declarative description of a single graph node.

    Attributes:
        name: Unique node name
        links: Link symbols carried by the node ("ABC" or ["A", "B", "C"])
        edges: Names of the nodes this node points to, in order
    """
    name: str
    links: LinksSpec = ""
    edges: List[str] = field(default_factory=list)

    def symbols(self) -> Tuple[str, ...]:
        """Return the link symbols as a tuple."""
        return normalize_links(self.links)

    def validate(self) -> List[str]:
        """Validate this node in isolation.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.name, str) or not self.name:
            errors.append(f"Node name must be a non-empty string, got {self.name!r}")

        if self.links is not None and not isinstance(self.links, (str, collections.abc.Sequence)):
            errors.append(
                f"Node {self.name!r} links must be a string or a sequence of "
                f"symbols, got {type(self.links).__name__}"
            )
        else:
            for symbol in self.symbols():
                if not isinstance(symbol, str) or not symbol:
                    errors.append(
                        f"Node {self.name!r} has an invalid link symbol {symbol!r}"
                    )

        if isinstance(self.edges, str):
            errors.append(
                f"Node {self.name!r} edges must be a list of node names, "
                f"got the string {self.edges!r}"
            )

        return errors


@dataclass
class GraphConfig:
    """Complete description of a graph and its entry points.

    Example:
        >>> config = GraphConfig.from_mapping(
        ...     {"a": ("AB", ["b"]), "b": ("C", ["a"])},
        ...     entry_points=["a"],
        ... )
        >>> config.validate()
        []
    """
    nodes: Dict[str, NodeConfig] = field(default_factory=dict)
    entry_points: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls,
                     mapping: Mapping[str, Tuple[LinksSpec, Iterable[str]]],
                     entry_points: Iterable[str]) -> 'GraphConfig':
        """Build a config from ``name -> (links, edge names)``.

        Args:
            mapping: Node definitions keyed by node name
            entry_points: Names of the nodes where traversal starts

        Returns:
            GraphConfig with one NodeConfig per mapping entry
        """
        config = cls(entry_points=list(entry_points))
        for name, (links, edges) in mapping.items():
            config.add_node(name, links, edges)
        return config

    def add_node(self, name: str, links: LinksSpec = "",
                 edges: Iterable[str] = ()) -> 'GraphConfig':
        """Add (or replace) a node definition. Returns self for chaining.

        Raises:
            TypeError: If ``edges`` is a single string rather than a
                collection of node names
        """
        if isinstance(edges, str):
            raise TypeError(
                f"edges of node {name!r} must be a collection of node names, "
                f"not the string {edges!r}"
            )
        self.nodes[name] = NodeConfig(name=name, links=links, edges=list(edges))
        return self

    def validate(self) -> List[str]:
        """Validate the whole graph description.

        Checks that every edge target and every entry point names a defined
        node, and that node names match their mapping keys.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for key, node_config in self.nodes.items():
            if node_config.name != key:
                errors.append(
                    f"Node registered as {key!r} is named {node_config.name!r}"
                )
            errors.extend(node_config.validate())
            if isinstance(node_config.edges, str):
                continue

            for target in node_config.edges:
                if target not in self.nodes:
                    errors.append(
                        f"Node {key!r} has an edge to undefined node {target!r}"
                    )

        for name in self.entry_points:
            if name not in self.nodes:
                errors.append(f"Entry point {name!r} is not a defined node")

        return errors


@dataclass
class CountConfig:
    """Runtime settings for a concurrent link-counting run.

    Attributes:
        thread_name_prefix: Prefix for worker thread names
        on_claim: Called as ``on_claim(node, worker_index)`` by the worker
            that claims a node. Runs on worker threads, so it must be
            thread-safe.
    """
    thread_name_prefix: str = "linkgraph-worker"
    on_claim: Optional[Callable[[Any, int], None]] = None

    def validate(self) -> List[str]:
        """Validate configuration consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.thread_name_prefix, str) or not self.thread_name_prefix:
            errors.append("thread_name_prefix must be a non-empty string")

        if self.on_claim is not None and not callable(self.on_claim):
            errors.append("on_claim must be callable")

        return errors
