"""Traversal, shortest-path and spanning-tree algorithms.

All algorithms run to completion over their own local frontier and
visited structures, reading adjacency through :class:`Node` handles.

Frontiers
=========
  breadth_first  : FIFO queue (``collections.deque``)
  depth_first    : LIFO stack (``list``)
  dijkstra       : min-heap of ``PathCandidate`` keyed by path cost
  prim_jarnik    : min-heap of ``EdgeCandidate`` keyed by edge weight

Every frontier uses lazy deletion: a node may sit in the frontier more
than once, and entries for nodes that were already visited or
finalized are discarded when popped. The heaps therefore never need a
decrease-key operation.

None of these functions guard against the graph changing while they
run; mutating it from a visitor is undefined behaviour.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set, Tuple

from weighted_graph.core.models import Node, Weight
from weighted_graph.core.visitor import Visitor

logger = logging.getLogger(__name__)


@dataclass(order=True)
class PathCandidate:
    """A tentative path ending at ``node`` with total ``cost``.

    ``seq`` breaks cost ties in insertion order so that nodes themselves
    never need to be compared.
    """

    cost: Weight
    seq: int
    node: Node = field(compare=False)
    via: Optional[Node] = field(default=None, compare=False)


@dataclass(order=True)
class EdgeCandidate:
    """An edge ``src -- dst`` that could join the spanning tree."""

    weight: Weight
    seq: int
    src: Node = field(compare=False)
    dst: Node = field(compare=False)


def breadth_first(start: Node, visit: Visitor) -> int:
    """Visit every node reachable from ``start`` in hop-distance order.

    Returns the number of nodes visited.
    """
    visited: Set[Node] = set()
    frontier: Deque[Node] = deque([start])
    while frontier:
        node = frontier.popleft()
        if node in visited:
            continue
        visited.add(node)
        visit(node)
        for neighbour in node.neighbors():
            if neighbour not in visited:
                frontier.append(neighbour)
    logger.debug(f"BFS from '{start.name}' visited {len(visited)} nodes")
    return len(visited)


def depth_first(start: Node, visit: Visitor) -> int:
    """Visit every node reachable from ``start`` using an explicit stack.

    The most recently discovered neighbour is explored next. Returns the
    number of nodes visited.
    """
    visited: Set[Node] = set()
    frontier: List[Node] = [start]
    while frontier:
        node = frontier.pop()
        if node in visited:
            continue
        visited.add(node)
        visit(node)
        for neighbour in node.neighbors():
            if neighbour not in visited:
                frontier.append(neighbour)
    logger.debug(f"DFS from '{start.name}' visited {len(visited)} nodes")
    return len(visited)


def dijkstra(
    start: Node, node_count: int
) -> Tuple[Dict[Node, Weight], Dict[Node, Optional[Node]]]:
    """Compute minimal path costs from ``start`` to every reachable node.

    Args:
        start: Source node.
        node_count: Number of nodes in the graph. Lets the search stop
            as soon as everything is finalized.

    Returns:
        ``(costs, parents)`` where ``costs[n]`` is the minimal total
        weight from ``start`` to ``n`` and ``parents[n]`` is the node
        preceding ``n`` on one such path (None for ``start``).
        Unreachable nodes appear in neither mapping.
    """
    seq = itertools.count()
    costs: Dict[Node, Weight] = {}
    parents: Dict[Node, Optional[Node]] = {}
    frontier: List[PathCandidate] = [PathCandidate(0, next(seq), start)]
    pushed = 1

    while frontier and len(costs) < node_count:
        candidate = heapq.heappop(frontier)
        node = candidate.node
        if node in costs:
            continue
        costs[node] = candidate.cost
        parents[node] = candidate.via
        for neighbour in node.neighbors():
            if neighbour in costs:
                continue
            heapq.heappush(
                frontier,
                PathCandidate(
                    candidate.cost + node.weight_to(neighbour),
                    next(seq),
                    neighbour,
                    node,
                ),
            )
            pushed += 1

    logger.debug(
        f"Dijkstra from '{start.name}' finalized {len(costs)} nodes "
        f"({pushed} frontier entries)"
    )
    return costs, parents


def prim_jarnik(
    start: Node, node_count: int
) -> Tuple[List[Node], List[Tuple[Node, Node, Weight]]]:
    """Grow a minimum spanning tree outwards from ``start``.

    Only the connected component containing ``start`` is spanned.

    Args:
        start: Node the tree is rooted at.
        node_count: Number of nodes in the source graph. The search stops
            once the tree holds this many nodes or the frontier empties.

    Returns:
        ``(nodes, edges)``: the source nodes in the order they joined the
        tree, and the chosen edges as ``(src, dst, weight)`` triples.
    """
    seq = itertools.count()
    in_tree: Set[Node] = {start}
    nodes: List[Node] = [start]
    edges: List[Tuple[Node, Node, Weight]] = []
    frontier: List[EdgeCandidate] = []

    def push_edges_from(src: Node) -> None:
        for dst in src.neighbors():
            if dst not in in_tree:
                heapq.heappush(
                    frontier, EdgeCandidate(src.weight_to(dst), next(seq), src, dst)
                )

    push_edges_from(start)
    while frontier and len(in_tree) < node_count:
        candidate = heapq.heappop(frontier)
        if candidate.dst in in_tree:
            continue
        in_tree.add(candidate.dst)
        nodes.append(candidate.dst)
        edges.append((candidate.src, candidate.dst, candidate.weight))
        push_edges_from(candidate.dst)

    logger.debug(
        f"Prim-Jarnik from '{start.name}' spanned {len(nodes)} nodes "
        f"with {len(edges)} edges"
    )
    return nodes, edges
