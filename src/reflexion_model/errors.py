"""Exceptions raised by the reflexion graph."""

from .types import EdgeId, NodeId


class ReflexionGraphError(Exception):
    """Base exception for graph operations."""
    pass


class ParentNotFound(ReflexionGraphError):
    """Raised when a node declares a parent that is not in the graph."""
    def __init__(self, node_id: NodeId):
        self.node_id = node_id
        super().__init__(f"Parent node not found: {node_id}")


class NodeNotFound(ReflexionGraphError):
    """Raised when a node id is not in the graph."""
    def __init__(self, node_id: NodeId):
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class EdgeNotFound(ReflexionGraphError):
    """Raised when an edge id is not in the graph."""
    def __init__(self, edge_id: EdgeId):
        self.edge_id = edge_id
        super().__init__(f"Edge not found: {edge_id}")
