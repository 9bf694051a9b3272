"""Reflexion model graph: intended architecture vs. extracted implementation."""

from .types import (
    NodeId,
    EdgeId,
    Counter,
    SubgraphKind,
    EdgeKind,
    NodeCategory,
    NodeKind,
)
from .state import StateGroup, EdgeState, NodeState
from .models import Node, Edge
from .errors import ReflexionGraphError, ParentNotFound, NodeNotFound, EdgeNotFound
from .config import ReflexionGraphConfig, load_config
from .graph import ReflexionGraph

__all__ = [
    "NodeId",
    "EdgeId",
    "Counter",
    "SubgraphKind",
    "EdgeKind",
    "NodeCategory",
    "NodeKind",
    "StateGroup",
    "EdgeState",
    "NodeState",
    "Node",
    "Edge",
    "ReflexionGraphError",
    "ParentNotFound",
    "NodeNotFound",
    "EdgeNotFound",
    "ReflexionGraphConfig",
    "load_config",
    "ReflexionGraph",
]
