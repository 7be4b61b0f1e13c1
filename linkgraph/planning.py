"""Execution planning for linkgraph.

The CountPlan validates a CountConfig against a built Graph and coordinates
the concurrent run: one worker per entry point, all sharing a single
VisitedTracker and LinkCountCollector, joined before any result is read.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ._common.config import CountConfig
from .core.adapter import GraphAdapter, LinkGraphAdapter
from .core.collector import LinkCountCollector
from .core.graph import Graph
from .core.node import LinkNode
from .core.tracker import VisitedTracker
from .core.traverser import BreadthFirstTraverser

logger = logging.getLogger(__name__)


class CountConfigError(ValueError):
    """Raised when a CountConfig is invalid."""
    pass


@dataclass
class LinkCountResult:
    """Outcome of a completed counting run.

    Attributes:
        counts: ``(symbol, count)`` pairs sorted by symbol
        nodes_visited: Number of distinct nodes processed
        claims_per_worker: Nodes claimed by each worker, indexed like the
            graph's entry points. Which worker wins a shared node varies
            between runs; the sum does not.
    """
    counts: List[Tuple[str, int]] = field(default_factory=list)
    nodes_visited: int = 0
    claims_per_worker: List[int] = field(default_factory=list)

    def as_dict(self) -> Dict[str, int]:
        return dict(self.counts)


class CountPlan:
    """Validated plan for one concurrent link-counting run.

    A plan owns the shared tracker and collector, so it can execute only
    once; build a new plan to count again.
    """

    def __init__(self,
                 graph: Graph,
                 config: Optional[CountConfig] = None,
                 adapter: Optional[GraphAdapter] = None):
        """Create and validate a counting plan.

        Args:
            graph: Fully built graph to traverse
            config: Runtime settings (defaults to CountConfig())
            adapter: Graph adapter (defaults to LinkGraphAdapter())

        Raises:
            CountConfigError: If the config is invalid
        """
        self.graph = graph
        self.config = config or CountConfig()
        self.adapter = adapter or LinkGraphAdapter()

        config_errors = self.config.validate()
        if config_errors:
            raise CountConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.tracker = VisitedTracker()
        self.collector = LinkCountCollector(self.adapter)
        self._executed = False

    def _run_worker(self, index: int, entry: LinkNode) -> int:
        """Traverse from one entry point. Runs on a worker thread.

        Returns:
            Number of nodes this worker claimed
        """
        traverser = BreadthFirstTraverser(self.adapter, self.tracker)
        claimed = 0

        for node in traverser.traverse(entry):
            self.collector.collect(node)
            claimed += 1
            logger.debug("Worker %d claimed node %r", index, node.identifier())
            if self.config.on_claim is not None:
                self.config.on_claim(node, index)

        logger.debug("Worker %d finished from %r after %d claims",
                     index, entry.identifier(), claimed)
        return claimed

    def execute(self) -> LinkCountResult:
        """Run every worker to completion and return the aggregated counts.

        Raises:
            RuntimeError: If the plan was already executed
            Exception: The first exception raised by a worker, in entry
                point order, after all workers have stopped
        """
        if self._executed:
            raise RuntimeError("CountPlan can only be executed once")
        self._executed = True

        entry_points = self.graph.entry_points
        if not entry_points:
            logger.info("No entry points; nothing to count")
            return LinkCountResult()

        logger.info("Starting %d workers over %d nodes",
                    len(entry_points), len(self.graph))

        with ThreadPoolExecutor(max_workers=len(entry_points),
                                thread_name_prefix=self.config.thread_name_prefix) as pool:
            futures = [
                pool.submit(self._run_worker, index, entry)
                for index, entry in enumerate(entry_points)
            ]
            wait(futures)

        # All workers have joined; result() re-raises worker failures
        claims_per_worker = [future.result() for future in futures]

        result = LinkCountResult(
            counts=self.collector.get_counts(),
            nodes_visited=len(self.tracker),
            claims_per_worker=claims_per_worker,
        )
        logger.info("Visited %d nodes, counted %d links across %d symbols",
                    result.nodes_visited, self.collector.total(), len(result.counts))
        return result
