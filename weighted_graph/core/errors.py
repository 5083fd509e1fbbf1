"""Exceptions raised by the weighted graph engine."""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for every error raised by ``weighted_graph``."""


class UnknownNode(GraphError, KeyError):
    """A traversal or algorithm was started from a name the graph doesn't hold."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Node '{self.name}' not found in graph"


class NoSuchEdge(GraphError, KeyError):
    """A weight was requested between two nodes with no direct edge."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"No edge between '{self.source}' and '{self.target}'"


class InvalidWeight(GraphError, ValueError):
    """An edge weight was rejected at insertion time."""

    def __init__(self, weight: Any, reason: str) -> None:
        super().__init__(weight, reason)
        self.weight = weight
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid edge weight {self.weight!r}: {self.reason}"


class NoPath(GraphError):
    """The target node is not reachable from the start node."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"No path from '{self.source}' to '{self.target}'"
