#!/usr/bin/env python
"""Basic example of concurrent link counting.

Builds the nine-node sample graph, counts links from both entry points at
once, and prints which worker claimed each node.
"""

import logging
import sys
import threading
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkgraph import CountConfig, count_links, format_counts
from linkgraph.testing import sample_graph_config


def main():
    logging.basicConfig(level=logging.INFO, format="%(threadName)s %(name)s: %(message)s")

    claims = []
    lock = threading.Lock()

    def on_claim(node, worker):
        with lock:
            claims.append((worker, node.name))

    config = sample_graph_config()
    result = count_links(config, CountConfig(on_claim=on_claim))

    print("\nClaims:")
    for worker, name in claims:
        print(f"  worker {worker} ({config.entry_points[worker]}): {name}")

    print(f"\nVisited {result.nodes_visited} nodes")
    print("Counts:", ", ".join(format_counts(result.counts)))


if __name__ == "__main__":
    main()
