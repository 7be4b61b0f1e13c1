"""Testing utilities for linkgraph."""

from .fixtures import (
    sample_graph_config,
    small_tree_config,
    wide_graph_config,
    SAMPLE_GRAPH_COUNTS,
    SMALL_TREE_COUNTS,
)

__all__ = [
    'sample_graph_config',
    'small_tree_config',
    'wide_graph_config',
    'SAMPLE_GRAPH_COUNTS',
    'SMALL_TREE_COUNTS',
]
