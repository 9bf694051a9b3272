"""Core data models for the reflexion graph."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .state import EdgeState
from .types import Counter, EdgeId, EdgeKind, NodeId, NodeKind, SubgraphKind


@dataclass
class Node:
    """
    A vertex of the architecture or implementation view.

    ``id`` is a placeholder until the node is inserted into a graph, which
    assigns the real identifier. ``children`` is maintained by the graph.
    """
    name: str
    subgraph: SubgraphKind
    parent: Optional[NodeId] = None
    kind: Optional[NodeKind] = None
    id: NodeId = 0
    children: List[NodeId] = field(default_factory=list)

    def __post_init__(self):
        self.subgraph = SubgraphKind(self.subgraph)
        if self.subgraph is SubgraphKind.PROPAGATED:
            raise ValueError(f"Node {self.name!r}: propagated subgraph holds edges only")


@dataclass
class Edge:
    """A directed relationship between two nodes, scoped to one subgraph."""
    source: NodeId
    target: NodeId
    kind: Union[EdgeKind, str]
    subgraph: SubgraphKind
    state: EdgeState = EdgeState.UNDEFINED
    counter: Counter = 0
    id: EdgeId = 0

    def __post_init__(self):
        if not isinstance(self.kind, EdgeKind):
            self.kind = EdgeKind(self.kind)
        self.subgraph = SubgraphKind(self.subgraph)
        self.state = EdgeState(self.state)
