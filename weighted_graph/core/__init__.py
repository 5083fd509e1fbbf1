from weighted_graph.core.errors import GraphError, InvalidWeight, NoPath, NoSuchEdge, UnknownNode
from weighted_graph.core.graph import Graph
from weighted_graph.core.models import GraphConfig, Node
from weighted_graph.core.visitor import NodeCollector, Visitor

__all__ = [
    "Graph",
    "GraphConfig",
    "GraphError",
    "InvalidWeight",
    "Node",
    "NodeCollector",
    "NoPath",
    "NoSuchEdge",
    "UnknownNode",
    "Visitor",
]
