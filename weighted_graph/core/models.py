"""Core data models for the weighted graph engine."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Union

from weighted_graph.core.errors import InvalidWeight, NoSuchEdge

if TYPE_CHECKING:
    from weighted_graph.storage.base import BaseStorage

logger = logging.getLogger(__name__)

Weight = Union[int, float]


@dataclass
class GraphConfig:
    """Tuneable knobs for graph construction.

    Attributes:
        allow_self_loops: Whether a node may be given an edge to itself.
            No algorithm ever creates one; this only gates caller input.
        integer_weights: Require edge weights to be ``int``. When False,
            finite non-negative floats are accepted as well.
    """

    allow_self_loops: bool = True
    integer_weights: bool = True


def validate_weight(weight: Any, config: GraphConfig) -> Weight:
    """Return ``weight`` unchanged if it is a legal edge weight.

    Raises:
        InvalidWeight: If the weight is not a number, is a bool, is
            negative, is not finite, or is a float while
            ``config.integer_weights`` is set.
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidWeight(weight, "must be a number")
    if config.integer_weights and not isinstance(weight, int):
        raise InvalidWeight(weight, "must be an integer")
    if isinstance(weight, float) and not math.isfinite(weight):
        raise InvalidWeight(weight, "must be finite")
    if weight < 0:
        raise InvalidWeight(weight, "must be non-negative")
    return weight


class Node:
    """A named vertex in a weighted graph.

    A node is a handle into its graph's storage: adjacency lives in the
    storage keyed by name, so nodes never point at each other directly.
    Create nodes through :meth:`Graph.get_or_create_node`, which returns
    the same handle for the same name every time.

    Attributes:
        name: Unique, immutable identifier of this node within its graph.
    """

    __slots__ = ("_name", "_storage", "_config")

    def __init__(
        self,
        name: str,
        storage: BaseStorage,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self._name = name
        self._storage = storage
        self._config = config or GraphConfig()

    @property
    def name(self) -> str:
        return self._name

    def neighbors(self) -> List[Node]:
        """Nodes one edge away, in a stable order for unchanged adjacency."""
        return self._storage.get_related(self._name)

    def degree(self) -> int:
        return len(self._storage.get_related(self._name))

    def has_neighbor(self, other: Node) -> bool:
        if other._storage is not self._storage:
            return False
        return self._storage.get_weight(self._name, other.name) is not None

    def weight_to(self, other: Node) -> Weight:
        """Return the weight of the edge between this node and ``other``.

        Raises:
            NoSuchEdge: If ``other`` is not a neighbour of this node.
        """
        if not self.has_neighbor(other):
            raise NoSuchEdge(self._name, other.name)
        weight = self._storage.get_weight(self._name, other.name)
        assert weight is not None
        return weight

    def add_undirected_edge(self, other: Node, weight: Weight) -> None:
        """Connect this node and ``other`` with ``weight`` on both sides.

        Adding the same pair again overwrites the weight on both sides.

        Raises:
            InvalidWeight: If ``weight`` is negative or otherwise illegal.
            ValueError: If ``other`` belongs to a different graph, or the
                edge is a self-loop and the graph forbids them.
        """
        if other._storage is not self._storage:
            raise ValueError(
                f"Node '{other.name}' belongs to a different graph than '{self._name}'"
            )
        if other is self and not self._config.allow_self_loops:
            raise ValueError(f"Self-loops are not allowed (node '{self._name}')")
        validate_weight(weight, self._config)
        self._storage.save_edge(self._name, other.name, weight)
        logger.debug(f"Edge {self._name} -- {other.name} set to weight {weight}")

    def __repr__(self) -> str:
        return f"Node({self._name!r})"
