"""Core Graph class — the primary public API for weighted_graph."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from weighted_graph.core import algorithms
from weighted_graph.core.errors import NoPath, UnknownNode
from weighted_graph.core.models import GraphConfig, Node, Weight, validate_weight
from weighted_graph.core.visitor import Visitor
from weighted_graph.storage.base import BaseStorage
from weighted_graph.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


class Graph:
    """An undirected, weighted graph of uniquely named nodes.

    Example::

        from weighted_graph import Graph

        graph = Graph()
        a = graph.get_or_create_node("A")
        b = graph.get_or_create_node("B")
        a.add_undirected_edge(b, 3)
        graph.shortest_paths("A")   # {Node('A'): 0, Node('B'): 3}

    The graph is not thread-safe, and must not be mutated while one of
    its traversals or algorithms is running.
    """

    def __init__(
        self,
        storage: Optional[BaseStorage] = None,
        config: Optional[GraphConfig] = None,
    ) -> None:
        """
        Args:
            storage: Backend that owns the nodes and adjacency. A fresh
                ``MemoryStorage`` if None.
            config: Construction rules. Uses defaults if None.
        """
        self._storage = storage if storage is not None else MemoryStorage()
        self._config = config or GraphConfig()

    @property
    def config(self) -> GraphConfig:
        return self._config

    # ── Node operations ──────────────────────────────────────────────

    def get_or_create_node(self, name: str) -> Node:
        """Return the node called ``name``, creating it if it doesn't exist yet.

        Repeated calls with the same name return the same ``Node`` object.
        """
        node = self._storage.get_node(name)
        if node is None:
            node = Node(name, self._storage, self._config)
            self._storage.save_node(node)
            logger.debug(f"Created node '{name}'")
        return node

    def get_node(self, name: str) -> Node:
        """Return the existing node called ``name``.

        Raises:
            UnknownNode: If no such node exists.
        """
        node = self._storage.get_node(name)
        if node is None:
            raise UnknownNode(name)
        return node

    def contains_node(self, name: str) -> bool:
        return self._storage.has_node(name)

    def all_nodes(self) -> List[Node]:
        """Snapshot of every node, in the order they were created."""
        return self._storage.all_nodes()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._storage.has_node(name)

    def __len__(self) -> int:
        return self._storage.node_count()

    def __iter__(self) -> Iterator[Node]:
        return iter(self._storage.all_nodes())

    # ── Edge operations ──────────────────────────────────────────────

    def add_undirected_edge(self, source: str, target: str, weight: Weight) -> None:
        """Connect the nodes named ``source`` and ``target``, creating them if needed.

        Raises:
            InvalidWeight: If ``weight`` is negative or otherwise illegal.
                No node is created in that case.
            ValueError: If the edge is a self-loop and the config forbids them.
        """
        if source == target and not self._config.allow_self_loops:
            raise ValueError(f"Self-loops are not allowed (node '{source}')")
        validate_weight(weight, self._config)
        src = self.get_or_create_node(source)
        dst = self.get_or_create_node(target)
        src.add_undirected_edge(dst, weight)

    def edges(self) -> List[Tuple[str, str, Weight]]:
        """Every undirected edge once, as ``(source, target, weight)``."""
        return self._storage.all_edges()

    def total_weight(self) -> Weight:
        return sum(weight for _, _, weight in self._storage.all_edges())

    # ── Traversals ───────────────────────────────────────────────────

    def bfs(self, start_name: str, visit: Visitor) -> None:
        """Breadth-first search from ``start_name``.

        ``visit`` is called once per reachable node, in non-decreasing
        hop distance from the start.

        Raises:
            UnknownNode: If ``start_name`` is not in the graph. Nothing is
                visited in that case.
        """
        algorithms.breadth_first(self.get_node(start_name), visit)

    def dfs(self, start_name: str, visit: Visitor) -> None:
        """Depth-first search from ``start_name`` using an explicit stack.

        Raises:
            UnknownNode: If ``start_name`` is not in the graph.
        """
        algorithms.depth_first(self.get_node(start_name), visit)

    # ── Shortest paths ───────────────────────────────────────────────

    def shortest_paths(self, start_name: str) -> Dict[Node, Weight]:
        """Minimal total edge weight from ``start_name`` to every reachable node.

        Returns:
            Mapping from node to path cost. The start maps to 0 and
            unreachable nodes are absent.

        Raises:
            UnknownNode: If ``start_name`` is not in the graph.
        """
        costs, _ = algorithms.dijkstra(
            self.get_node(start_name), self._storage.node_count()
        )
        return costs

    def shortest_path_to(
        self, start_name: str, target_name: str
    ) -> Tuple[List[Node], Weight]:
        """One minimal path from ``start_name`` to ``target_name``.

        Returns:
            ``(path, cost)`` where ``path`` runs from the start node to the
            target node inclusive.

        Raises:
            UnknownNode: If either name is not in the graph.
            NoPath: If the target is not reachable from the start.
        """
        start = self.get_node(start_name)
        target = self.get_node(target_name)
        costs, parents = algorithms.dijkstra(start, self._storage.node_count())
        if target not in costs:
            raise NoPath(start_name, target_name)

        path: List[Node] = []
        node: Optional[Node] = target
        while node is not None:
            path.append(node)
            node = parents[node]
        path.reverse()
        return path, costs[target]

    # ── Spanning trees ───────────────────────────────────────────────

    def minimum_spanning_tree(self, start_name: Optional[str] = None) -> Graph:
        """Minimum spanning tree via Prim–Jarnik.

        Args:
            start_name: Node to grow the tree from. Defaults to the first
                node created.

        Returns:
            A new, independent ``Graph`` with the same backend type and
            config, holding the tree's nodes and edges. If this graph is
            disconnected, only the component containing the start node is
            spanned. An empty graph yields an empty tree.

        Raises:
            UnknownNode: If ``start_name`` is given but not in the graph.
        """
        tree = Graph(storage=type(self._storage)(), config=self._config)
        if start_name is not None:
            start = self.get_node(start_name)
        else:
            nodes = self._storage.all_nodes()
            if not nodes:
                return tree
            start = nodes[0]

        node_count = self._storage.node_count()
        spanned, chosen = algorithms.prim_jarnik(start, node_count)
        for node in spanned:
            tree.get_or_create_node(node.name)
        for src, dst, weight in chosen:
            tree.get_node(src.name).add_undirected_edge(tree.get_node(dst.name), weight)

        if len(spanned) < node_count:
            logger.warning(
                f"Graph is disconnected: spanning tree from '{start.name}' "
                f"covers {len(spanned)} of {node_count} nodes"
            )
        return tree
