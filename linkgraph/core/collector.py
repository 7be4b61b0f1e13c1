"""Data collection strategies for linkgraph.

DataCollectors define what information to extract from nodes as workers
claim them. Collectors are shared by all workers of a run, so every
implementation must be thread-safe.
"""

import threading
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Dict, List, Tuple

from .adapter import GraphAdapter
from .node import LinkNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    The traversal decides which nodes are processed; the collector decides
    what processing a node means.
    """

    def __init__(self, adapter: GraphAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: GraphAdapter for reading node data
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: LinkNode) -> Any:
        """Collect data from a claimed node.

        Args:
            node: The node to collect data from

        Returns:
            Collected data (type depends on collector)
        """
        pass


class LinkCountCollector(DataCollector):
    """Aggregates link symbol frequencies across all workers.

    Each increment takes the lock for that single update only, so workers
    contend per symbol rather than per node.
    """

    def __init__(self, adapter: GraphAdapter):
        super().__init__(adapter)
        self._lock = threading.Lock()
        self._counts: Counter = Counter()

    def add_count_for_link(self, symbol: str) -> None:
        """Increment the count for ``symbol``, creating it at zero if absent."""
        with self._lock:
            self._counts[symbol] += 1

    def collect(self, node: LinkNode) -> int:
        """Count every link symbol on ``node``.

        Returns:
            Number of symbols counted for this node
        """
        counted = 0
        for symbol in self.adapter.get_links(node):
            self.add_count_for_link(symbol)
            counted += 1
        return counted

    def get_counts(self) -> List[Tuple[str, int]]:
        """Return ``(symbol, count)`` pairs sorted by symbol.

        Meant to be read after all workers have finished. Calling it during
        a run is safe but returns a point-in-time snapshot.
        """
        with self._lock:
            return sorted(self._counts.items())

    def as_dict(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        """Sum of all counts."""
        with self._lock:
            return sum(self._counts.values())
