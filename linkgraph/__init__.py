"""linkgraph - Concurrent link counting over directed graphs.

linkgraph builds a directed graph from a declarative configuration and
counts the link symbols attached to its nodes, traversing from every entry
point at once while guaranteeing each node is processed exactly once.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from linkgraph import GraphConfig, count_links, format_counts

    config = GraphConfig.from_mapping(
        {"a": ("AB", ["b"]), "b": ("BC", ["a"])},
        entry_points=["a", "b"],
    )
    print(format_counts(count_links(config).counts))
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from ._common.config import NodeConfig, GraphConfig, CountConfig
from .core import (
    LinkNode,
    GraphAdapter,
    LinkGraphAdapter,
    Graph,
    GraphConfigError,
    build_graph,
    NodeQueue,
    EmptyQueueError,
    VisitedTracker,
    DataCollector,
    LinkCountCollector,
    GraphTraverser,
    BreadthFirstTraverser,
)
from .planning import CountPlan, CountConfigError, LinkCountResult
from .api import count_links, count_links_in_graph, format_counts

__all__ = [
    "__version__",
    # Config
    'NodeConfig',
    'GraphConfig',
    'CountConfig',
    # Core
    'LinkNode',
    'GraphAdapter',
    'LinkGraphAdapter',
    'Graph',
    'GraphConfigError',
    'build_graph',
    'NodeQueue',
    'EmptyQueueError',
    'VisitedTracker',
    'DataCollector',
    'LinkCountCollector',
    'GraphTraverser',
    'BreadthFirstTraverser',
    # Planning
    'CountPlan',
    'CountConfigError',
    'LinkCountResult',
    # API
    'count_links',
    'count_links_in_graph',
    'format_counts',
]
