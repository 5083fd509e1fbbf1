"""In-memory storage backend using adjacency dicts."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from weighted_graph.core.models import Node, Weight
from weighted_graph.storage.base import BaseStorage


class MemoryStorage(BaseStorage):
    """In-memory graph storage backed by dicts.

    Node handles are kept in a name-keyed dict and adjacency in a
    ``name -> {neighbour name: weight}`` mapping. Both dicts preserve
    insertion order, which keeps neighbour order stable between calls.
    Not thread-safe.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}
        self._adj: Dict[str, Dict[str, Weight]] = {}

    def save_node(self, node: Node) -> None:
        self._nodes[node.name] = node
        self._adj.setdefault(node.name, {})

    def get_node(self, name: str) -> Optional[Node]:
        return self._nodes.get(name)

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def node_count(self) -> int:
        return len(self._nodes)

    def save_edge(self, source: str, target: str, weight: Weight) -> None:
        if source not in self._nodes:
            raise KeyError(source)
        if target not in self._nodes:
            raise KeyError(target)
        self._adj[source][target] = weight
        self._adj[target][source] = weight

    def get_weight(self, source: str, target: str) -> Optional[Weight]:
        return self._adj.get(source, {}).get(target)

    def get_related(self, name: str) -> List[Node]:
        return [self._nodes[n] for n in self._adj.get(name, {})]

    def all_nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def all_edges(self) -> List[Tuple[str, str, Weight]]:
        seen: set[frozenset[str]] = set()
        edges: List[Tuple[str, str, Weight]] = []
        for source, neighbours in self._adj.items():
            for target, weight in neighbours.items():
                key = frozenset((source, target))
                if key not in seen:
                    seen.add(key)
                    edges.append((source, target, weight))
        return edges
