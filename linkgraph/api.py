"""High-level API for linkgraph.

Simple functional interfaces wrapping GraphConfig, build_graph and
CountPlan for the common case.
"""

from typing import Iterable, List, Optional, Tuple

from ._common.config import CountConfig, GraphConfig
from .core.graph import Graph, build_graph
from .planning import CountPlan, LinkCountResult


def count_links(config: GraphConfig,
                count_config: Optional[CountConfig] = None) -> LinkCountResult:
    """Build a graph from ``config`` and count links from every entry point.

    Args:
        config: Graph description
        count_config: Runtime settings for the run

    Returns:
        LinkCountResult with the aggregated counts

    Raises:
        GraphConfigError: If the graph description is invalid

    Example:
        >>> config = GraphConfig.from_mapping(
        ...     {"a": ("AB", ["b"]), "b": ("BC", ["a"])}, entry_points=["a"])
        >>> count_links(config).as_dict()
        {'A': 1, 'B': 2, 'C': 1}
    """
    return count_links_in_graph(build_graph(config), count_config)


def count_links_in_graph(graph: Graph,
                         count_config: Optional[CountConfig] = None) -> LinkCountResult:
    """Count links in an already built graph."""
    return CountPlan(graph, count_config).execute()


def format_counts(counts: Iterable[Tuple[str, int]]) -> List[str]:
    """Render counts as ``"symbol:count"`` strings, e.g. ``["A:2", "B:3"]``."""
    return [f"{symbol}:{count}" for symbol, count in counts]
