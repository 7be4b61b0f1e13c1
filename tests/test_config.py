"""Unit tests for linkgraph configuration classes."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkgraph import NodeConfig, GraphConfig, CountConfig, GraphConfigError, build_graph


class TestNodeConfig(unittest.TestCase):
    """Test single node definitions."""

    def test_string_links_split_into_symbols(self):
        node = NodeConfig("one", "ABC", ["two"])
        self.assertEqual(node.symbols(), ("A", "B", "C"))

    def test_sequence_links_kept_as_symbols(self):
        node = NodeConfig("one", ["A", "B", "B"])
        self.assertEqual(node.symbols(), ("A", "B", "B"))

    def test_empty_links_allowed(self):
        node = NodeConfig("one")
        self.assertEqual(node.symbols(), ())
        self.assertEqual(node.validate(), [])

    def test_invalid_symbols_reported(self):
        node = NodeConfig("one", ["A", "", 3])
        errors = node.validate()
        self.assertEqual(len(errors), 2)

    def test_empty_name_reported(self):
        self.assertTrue(NodeConfig("").validate())

    def test_non_iterable_links_reported(self):
        errors = NodeConfig("one", 5).validate()
        self.assertEqual(len(errors), 1)
        self.assertIn("int", errors[0])

    def test_unordered_links_reported(self):
        self.assertEqual(len(NodeConfig("one", {"A", "B"}).validate()), 1)

    def test_none_links_allowed(self):
        self.assertEqual(NodeConfig("one", None).validate(), [])

    def test_string_edges_reported(self):
        errors = NodeConfig("one", "A", "two").validate()
        self.assertEqual(len(errors), 1)
        self.assertIn("'two'", errors[0])


class TestGraphConfig(unittest.TestCase):
    """Test whole-graph definitions and validation."""

    def test_from_mapping(self):
        config = GraphConfig.from_mapping(
            {"a": ("AB", ["b"]), "b": ("C", [])},
            entry_points=["a"],
        )
        self.assertEqual(set(config.nodes), {"a", "b"})
        self.assertEqual(config.nodes["a"].edges, ["b"])
        self.assertEqual(config.entry_points, ["a"])
        self.assertEqual(config.validate(), [])

    def test_add_node_chains(self):
        config = GraphConfig().add_node("a", "X", ["b"]).add_node("b", "Y")
        self.assertEqual(list(config.nodes), ["a", "b"])

    def test_undefined_edge_reported(self):
        config = GraphConfig.from_mapping({"a": ("A", ["missing"])}, ["a"])
        errors = config.validate()
        self.assertEqual(len(errors), 1)
        self.assertIn("missing", errors[0])

    def test_undefined_entry_point_reported(self):
        config = GraphConfig.from_mapping({"a": ("A", [])}, ["nowhere"])
        errors = config.validate()
        self.assertEqual(len(errors), 1)
        self.assertIn("nowhere", errors[0])

    def test_mismatched_name_reported(self):
        config = GraphConfig(nodes={"a": NodeConfig("b", "A")}, entry_points=[])
        self.assertTrue(any("named 'b'" in e for e in config.validate()))

    def test_all_errors_reported_together(self):
        config = GraphConfig.from_mapping(
            {"a": ("A", ["x"]), "b": ("B", ["y"])},
            entry_points=["z"],
        )
        self.assertEqual(len(config.validate()), 3)

    def test_self_loop_is_valid(self):
        config = GraphConfig.from_mapping({"a": ("A", ["a"])}, ["a"])
        self.assertEqual(config.validate(), [])

    def test_bad_links_reported_with_other_problems(self):
        config = GraphConfig.from_mapping(
            {"a": (5, ["missing"])}, entry_points=["a"]
        )
        errors = config.validate()
        self.assertEqual(len(errors), 2)

    def test_bad_links_fail_graph_build(self):
        config = GraphConfig.from_mapping({"a": (5, [])}, ["a"])
        with self.assertRaises(GraphConfigError):
            build_graph(config)

    def test_string_edges_rejected(self):
        with self.assertRaises(TypeError):
            GraphConfig().add_node("one", "A", "two")
        with self.assertRaises(TypeError):
            GraphConfig.from_mapping({"one": ("A", "two")}, ["one"])

    def test_string_edges_on_node_config_not_split(self):
        config = GraphConfig(
            nodes={"ab": NodeConfig("ab", "A", "ab"), "a": NodeConfig("a"),
                   "b": NodeConfig("b")},
            entry_points=["ab"],
        )
        errors = config.validate()
        self.assertEqual(len(errors), 1)
        with self.assertRaises(GraphConfigError):
            build_graph(config)


class TestCountConfig(unittest.TestCase):
    """Test runtime settings."""

    def test_defaults_valid(self):
        self.assertEqual(CountConfig().validate(), [])

    def test_empty_prefix_invalid(self):
        self.assertTrue(CountConfig(thread_name_prefix="").validate())

    def test_non_callable_hook_invalid(self):
        self.assertTrue(CountConfig(on_claim="nope").validate())


if __name__ == "__main__":
    unittest.main()
