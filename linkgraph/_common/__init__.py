"""Common components shared across linkgraph.

This internal package contains configuration code with no threading or
traversal logic. It should NOT be imported directly by users.

Important: This package must NEVER import from core or planning to avoid
circular dependencies.
"""

from .config import (
    NodeConfig,
    GraphConfig,
    CountConfig,
    normalize_links,
)

__all__ = [
    'NodeConfig',
    'GraphConfig',
    'CountConfig',
    'normalize_links',
]
