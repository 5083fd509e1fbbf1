"""Visitor contract for graph traversals.

A visitor is any callable taking a single :class:`Node`. It is called
exactly once per node, the first time a traversal reaches it, in
traversal order. Its return value is ignored.

Example::

    seen = []
    graph.bfs("A", lambda node: seen.append(node.name))
"""

from __future__ import annotations

from typing import Callable, List

from weighted_graph.core.models import Node

Visitor = Callable[[Node], None]


class NodeCollector:
    """Visitor that records every node it is called with, in order."""

    def __init__(self) -> None:
        self.nodes: List[Node] = []

    def __call__(self, node: Node) -> None:
        self.nodes.append(node)

    @property
    def names(self) -> List[str]:
        return [node.name for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)
