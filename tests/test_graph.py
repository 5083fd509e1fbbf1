"""Tests for the Graph registry and edge operations."""

import pytest

from weighted_graph.core.errors import InvalidWeight, UnknownNode
from weighted_graph.core.graph import Graph
from weighted_graph.core.models import GraphConfig, Node
from weighted_graph.storage.memory import MemoryStorage


def _make_graph():
    """Helper: A-B(1), B-C(2), A-C(4), C-D(1)."""
    g = Graph()
    g.add_undirected_edge("A", "B", 1)
    g.add_undirected_edge("B", "C", 2)
    g.add_undirected_edge("A", "C", 4)
    g.add_undirected_edge("C", "D", 1)
    return g


class TestGetOrCreateNode:
    def test_creates_node(self):
        g = Graph()
        node = g.get_or_create_node("A")
        assert isinstance(node, Node)
        assert node.name == "A"
        assert g.contains_node("A")

    def test_same_name_returns_same_node(self):
        g = Graph()
        first = g.get_or_create_node("A")
        second = g.get_or_create_node("A")
        assert first is second
        assert len(g.all_nodes()) == 1

    def test_existing_node_keeps_edges(self):
        g = _make_graph()
        node = g.get_or_create_node("A")
        assert {n.name for n in node.neighbors()} == {"B", "C"}

    def test_empty_name_is_a_valid_name(self):
        g = Graph()
        node = g.get_or_create_node("")
        assert g.contains_node("")
        assert g.get_or_create_node("") is node


class TestLookup:
    def test_contains_node(self):
        g = _make_graph()
        assert g.contains_node("A")
        assert not g.contains_node("Z")

    def test_in_operator(self):
        g = _make_graph()
        assert "D" in g
        assert "Z" not in g
        assert 42 not in g

    def test_len(self):
        assert len(Graph()) == 0
        assert len(_make_graph()) == 4

    def test_get_node(self):
        g = _make_graph()
        assert g.get_node("B") is g.get_or_create_node("B")

    def test_get_node_missing_raises(self):
        g = _make_graph()
        with pytest.raises(UnknownNode, match="'Z' not found"):
            g.get_node("Z")

    def test_unknown_node_carries_name(self):
        with pytest.raises(UnknownNode) as excinfo:
            Graph().get_node("Z")
        assert excinfo.value.name == "Z"

    def test_all_nodes(self):
        g = _make_graph()
        assert [n.name for n in g.all_nodes()] == ["A", "B", "C", "D"]

    def test_all_nodes_is_a_snapshot(self):
        g = _make_graph()
        nodes = g.all_nodes()
        g.get_or_create_node("E")
        assert len(nodes) == 4
        assert len(g.all_nodes()) == 5

    def test_iteration(self):
        g = _make_graph()
        assert [n.name for n in g] == ["A", "B", "C", "D"]


class TestAddUndirectedEdge:
    def test_creates_missing_endpoints(self):
        g = Graph()
        g.add_undirected_edge("X", "Y", 3)
        assert g.contains_node("X") and g.contains_node("Y")
        assert g.get_node("X").weight_to(g.get_node("Y")) == 3

    def test_invalid_weight_creates_nothing(self):
        g = Graph()
        with pytest.raises(InvalidWeight):
            g.add_undirected_edge("X", "Y", -3)
        assert len(g) == 0

    def test_self_loop_forbidden_creates_nothing(self):
        g = Graph(config=GraphConfig(allow_self_loops=False))
        with pytest.raises(ValueError, match="Self-loops"):
            g.add_undirected_edge("X", "X", 1)
        assert len(g) == 0

    def test_graph_usable_after_rejected_edge(self):
        g = _make_graph()
        with pytest.raises(InvalidWeight):
            g.add_undirected_edge("A", "D", -1)
        g.add_undirected_edge("A", "D", 9)
        assert g.get_node("D").weight_to(g.get_node("A")) == 9

    def test_float_weights_with_config(self):
        g = Graph(config=GraphConfig(integer_weights=False))
        g.add_undirected_edge("X", "Y", 0.25)
        assert g.total_weight() == 0.25


class TestEdges:
    def test_edges_listed_once(self):
        g = _make_graph()
        edges = {frozenset((a, b)): w for a, b, w in g.edges()}
        assert edges == {
            frozenset(("A", "B")): 1,
            frozenset(("B", "C")): 2,
            frozenset(("A", "C")): 4,
            frozenset(("C", "D")): 1,
        }

    def test_total_weight(self):
        assert _make_graph().total_weight() == 8

    def test_empty_graph(self):
        g = Graph()
        assert g.edges() == []
        assert g.total_weight() == 0


class TestStorage:
    def test_explicit_storage(self):
        storage = MemoryStorage()
        g = Graph(storage=storage)
        node = g.get_or_create_node("A")
        assert storage.get_node("A") is node

    def test_graphs_do_not_share_storage(self):
        g1 = Graph()
        g2 = Graph()
        g1.get_or_create_node("A")
        assert not g2.contains_node("A")

    def test_config_property(self):
        config = GraphConfig(allow_self_loops=False)
        assert Graph(config=config).config is config
