"""Tests for MemoryStorage backend."""

import pytest

from weighted_graph.core.models import Node
from weighted_graph.storage.memory import MemoryStorage


def _make_storage_with_nodes():
    """Helper: returns a storage with 3 nodes in a path a - b - c."""
    s = MemoryStorage()
    for name in ("a", "b", "c"):
        s.save_node(Node(name, s))
    s.save_edge("a", "b", 2)
    s.save_edge("b", "c", 5)
    return s


class TestSaveAndGetNode:
    def test_save_and_retrieve(self):
        s = MemoryStorage()
        node = Node("x", s)
        s.save_node(node)
        assert s.get_node("x") is node

    def test_get_missing_returns_none(self):
        s = MemoryStorage()
        assert s.get_node("missing") is None

    def test_has_node(self):
        s = _make_storage_with_nodes()
        assert s.has_node("a")
        assert not s.has_node("z")

    def test_node_count(self):
        s = _make_storage_with_nodes()
        assert s.node_count() == 3

    def test_all_nodes_in_registration_order(self):
        s = _make_storage_with_nodes()
        assert [n.name for n in s.all_nodes()] == ["a", "b", "c"]


class TestSaveEdge:
    def test_weight_stored_both_directions(self):
        s = _make_storage_with_nodes()
        assert s.get_weight("a", "b") == 2
        assert s.get_weight("b", "a") == 2

    def test_overwrite_updates_both_directions(self):
        s = _make_storage_with_nodes()
        s.save_edge("b", "a", 7)
        assert s.get_weight("a", "b") == 7
        assert s.get_weight("b", "a") == 7

    def test_missing_weight_returns_none(self):
        s = _make_storage_with_nodes()
        assert s.get_weight("a", "c") is None
        assert s.get_weight("nope", "a") is None

    def test_unregistered_endpoint_raises(self):
        s = _make_storage_with_nodes()
        with pytest.raises(KeyError):
            s.save_edge("a", "missing", 1)
        assert s.get_related("a") == [s.get_node("b")]


class TestGetRelated:
    def test_neighbours(self):
        s = _make_storage_with_nodes()
        names = [n.name for n in s.get_related("b")]
        assert names == ["a", "c"]

    def test_isolated_node(self):
        s = MemoryStorage()
        s.save_node(Node("solo", s))
        assert s.get_related("solo") == []

    def test_unknown_node(self):
        s = MemoryStorage()
        assert s.get_related("ghost") == []


class TestAllEdges:
    def test_each_edge_once(self):
        s = _make_storage_with_nodes()
        edges = s.all_edges()
        assert len(edges) == 2
        assert {frozenset((a, b)): w for a, b, w in edges} == {
            frozenset(("a", "b")): 2,
            frozenset(("b", "c")): 5,
        }

    def test_self_loop_reported_once(self):
        s = MemoryStorage()
        s.save_node(Node("x", s))
        s.save_edge("x", "x", 4)
        assert s.all_edges() == [("x", "x", 4)]
