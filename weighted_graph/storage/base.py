"""Abstract base class for weighted graph storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from weighted_graph.core.models import Node, Weight


class BaseStorage(ABC):
    """Interface that all storage backends must implement.

    A backend is the arena that owns every node handle of one graph and
    the adjacency between them, keyed by node name.
    """

    @abstractmethod
    def save_node(self, node: Node) -> None:
        """Register a node handle. Overwrites if the name is already present."""

    @abstractmethod
    def get_node(self, name: str) -> Optional[Node]:
        """Return the node handle for ``name``, or None if not found."""

    @abstractmethod
    def has_node(self, name: str) -> bool:
        """Return True if a node named ``name`` is registered."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of registered nodes."""

    @abstractmethod
    def save_edge(self, source: str, target: str, weight: Weight) -> None:
        """Store ``weight`` on both ``source -> target`` and ``target -> source``."""

    @abstractmethod
    def get_weight(self, source: str, target: str) -> Optional[Weight]:
        """Return the weight of the edge, or None if the nodes aren't adjacent."""

    @abstractmethod
    def get_related(self, name: str) -> List[Node]:
        """Return all nodes directly connected to the given node."""

    @abstractmethod
    def all_nodes(self) -> List[Node]:
        """Return all nodes in storage, in registration order."""

    @abstractmethod
    def all_edges(self) -> List[Tuple[str, str, Weight]]:
        """Return every undirected edge exactly once as ``(source, target, weight)``."""
