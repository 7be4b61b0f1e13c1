"""Core components of linkgraph: graph model and concurrent traversal."""

from .node import LinkNode
from .adapter import GraphAdapter, LinkGraphAdapter
from .graph import Graph, GraphConfigError, build_graph
from .queue import NodeQueue, EmptyQueueError
from .tracker import VisitedTracker
from .collector import DataCollector, LinkCountCollector
from .traverser import GraphTraverser, BreadthFirstTraverser

__all__ = [
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
]
