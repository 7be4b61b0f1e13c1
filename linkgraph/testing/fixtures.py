"""Test fixtures for linkgraph consumers.

Ready-made graph configurations with known link counts, for use in test
suites of linkgraph and of projects built on it.
"""

from typing import Dict

from .._common.config import GraphConfig


def sample_graph_config() -> GraphConfig:
    """Nine-node graph with two entry points, shared subgraphs and cycles.

    ``eight -> two`` and ``nine -> three`` point back into nodes reachable
    from ``one``, and ``three -> six -> nine -> three`` is a cycle.
    """
    return GraphConfig.from_mapping(
        {
            "one": ("ABC", ["two", "three"]),
            "two": ("BBA", ["four"]),
            "three": ("DEF", ["five", "six", "seven"]),
            "four": ("FHHG", []),
            "five": ("AAA", ["seven", "eight"]),
            "six": ("AAA", ["eight", "nine"]),
            "seven": ("JBK", []),
            "eight": ("BBB", ["two"]),
            "nine": ("KVOSD", ["three"]),
        },
        entry_points=["one", "nine"],
    )


SAMPLE_GRAPH_COUNTS: Dict[str, int] = {
    "A": 8, "B": 7, "C": 1, "D": 2, "E": 1, "F": 2, "G": 1,
    "H": 2, "J": 1, "K": 2, "O": 1, "S": 1, "V": 1,
}


def small_tree_config() -> GraphConfig:
    """Four-node acyclic graph with a single entry point."""
    return GraphConfig.from_mapping(
        {
            "one": ("ABC", ["two", "three"]),
            "two": ("BBA", ["four"]),
            "three": ("DEF", []),
            "four": ("FHHG", []),
        },
        entry_points=["one"],
    )


SMALL_TREE_COUNTS: Dict[str, int] = {
    "A": 2, "B": 3, "C": 1, "D": 1, "E": 1, "F": 2, "G": 1, "H": 2,
}


def wide_graph_config(width: int = 50, fan_in: int = 4) -> GraphConfig:
    """Many entry points all fanning into one shared chain.

    Every entry ``e<i>`` links to ``hub``, and ``hub`` heads a chain of
    ``fan_in`` nodes ending in a cycle back to ``hub``. Each entry carries
    ``"X"``, every chain node carries ``"Y"``, so a correct run counts
    ``X == width`` and ``Y == fan_in + 1``.
    """
    config = GraphConfig(entry_points=[f"e{i}" for i in range(width)])
    chain = ["hub"] + [f"c{i}" for i in range(fan_in)]
    for i in range(width):
        config.add_node(f"e{i}", "X", ["hub"])
    for current, following in zip(chain, chain[1:] + ["hub"]):
        config.add_node(current, "Y", [following])
    return config
