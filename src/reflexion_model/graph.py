"""Reflexion graph store: architecture, implementation and propagated views."""

from collections import deque
from dataclasses import replace
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

import networkx as nx

from .config import ReflexionGraphConfig
from .errors import EdgeNotFound, NodeNotFound, ParentNotFound
from .logger import get_logger, set_log_level
from .models import Edge, Node
from .state import EdgeState
from .types import Counter, EdgeId, NodeId, SubgraphKind


class ReflexionGraph:
    """
    Exclusive owner of every node and edge of a reflexion analysis.

    The graph assigns identities, keeps the containment hierarchy and two
    outgoing-edge indices keyed by source node:

    - implementation index: ``IMPLEMENTATION`` edges
    - architecture index: ``ARCHITECTURE`` and ``PROPAGATED`` edges, since
      propagated edges are implementation facts lifted onto architecture nodes

    It also stores the implementation-to-architecture node mapping and the
    propagation table (architecture/propagated edge -> supporting
    implementation edges) for the comparison engine. Records handed in or out
    are copies; all mutation goes through the methods below.

    Not thread-safe. Every failing call raises before mutating anything.

    The config's ``log_level`` is applied to the package-wide logger, so the
    most recently constructed graph sets the level for all graphs.
    """

    def __init__(self, config: Optional[ReflexionGraphConfig] = None):
        """Initialize an empty graph."""
        self.config = config or ReflexionGraphConfig()
        set_log_level(self.config.log_level)
        self.logger = get_logger()

        self._nodes: Dict[NodeId, Node] = {}
        self._edges: Dict[EdgeId, Edge] = {}
        self._impl_out: Dict[NodeId, List[EdgeId]] = {}
        self._arch_out: Dict[NodeId, List[EdgeId]] = {}
        self._maps_to: Dict[NodeId, NodeId] = {}
        self._propagation_table: Dict[EdgeId, Set[EdgeId]] = {}
        self._next_node_id: NodeId = 1
        self._next_edge_id: EdgeId = 1

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> NodeId:
        """
        Insert a node and return its freshly assigned id.

        Any id on the given record is ignored. If the node declares a parent,
        the new id is appended to that parent's children.

        Raises:
            ParentNotFound: the declared parent is not in the graph
        """
        if node.parent is not None and node.parent not in self._nodes:
            error = ParentNotFound(node.parent)
            self.logger.rejected(f"add_node({node.name!r})", error)
            raise error

        # Re-runs record validation; must succeed before an id is taken
        stored = replace(node, id=0, children=[])

        node_id = self._next_node_id
        self._next_node_id += 1

        stored.id = node_id
        self._nodes[node_id] = stored
        if stored.parent is not None:
            self._nodes[stored.parent].children.append(node_id)

        self.logger.debug("Added %s node %s (%r)", stored.subgraph.value, node_id, stored.name)
        if len(self._nodes) == self.config.max_nodes + 1:
            self.logger.warning("Graph size (%d nodes) exceeds recommended limit of %d",
                                len(self._nodes), self.config.max_nodes)
        return node_id

    def add_edge(self, edge: Edge) -> EdgeId:
        """
        Insert an edge and return its freshly assigned id.

        Raises:
            NodeNotFound: the source (checked first) or target is not in the graph
        """
        for endpoint in (edge.source, edge.target):
            if endpoint not in self._nodes:
                error = NodeNotFound(endpoint)
                self.logger.rejected(
                    f"add_edge({edge.subgraph.value} {edge.source} -> {edge.target})", error)
                raise error

        stored = replace(edge, id=0)

        edge_id = self._next_edge_id
        self._next_edge_id += 1

        stored.id = edge_id
        self._edges[edge_id] = stored
        self._out_index(stored.subgraph).setdefault(stored.source, []).append(edge_id)

        self.logger.debug("Added %s edge %s: %s -[%s]-> %s", stored.subgraph.value, edge_id,
                          stored.source, stored.kind, stored.target)
        if len(self._edges) == self.config.max_edges + 1:
            self.logger.warning("Graph size (%d edges) exceeds recommended limit of %d",
                                len(self._edges), self.config.max_edges)
        return edge_id

    def _out_index(self, subgraph: SubgraphKind) -> Dict[NodeId, List[EdgeId]]:
        if subgraph is SubgraphKind.IMPLEMENTATION:
            return self._impl_out
        return self._arch_out

    # ------------------------------------------------------------------
    # Nodes and hierarchy
    # ------------------------------------------------------------------

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    def get_node(self, node_id: NodeId) -> Node:
        """Return a copy of the node record."""
        return _copy_node(self._node(node_id))

    def nodes(self, subgraph: Optional[SubgraphKind] = None) -> List[Node]:
        """Copies of all nodes, optionally limited to one subgraph, in id order."""
        return [_copy_node(node) for node in self._nodes.values()
                if subgraph is None or node.subgraph is subgraph]

    def parent(self, node_id: NodeId) -> Optional[NodeId]:
        return self._node(node_id).parent

    def children(self, node_id: NodeId) -> Tuple[NodeId, ...]:
        return tuple(self._node(node_id).children)

    def descendants(self, node_id: NodeId) -> List[NodeId]:
        """All transitive children of a node, breadth first."""
        result = []
        queue = deque(self._node(node_id).children)
        while queue:
            child = queue.popleft()
            result.append(child)
            queue.extend(self._nodes[child].children)
        return result

    def roots(self, subgraph: Optional[SubgraphKind] = None) -> List[NodeId]:
        """Ids of nodes without a parent."""
        return [node_id for node_id, node in self._nodes.items()
                if node.parent is None and (subgraph is None or node.subgraph is subgraph)]

    def _node(self, node_id: NodeId) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFound(node_id) from None

    # ------------------------------------------------------------------
    # Edges and adjacency
    # ------------------------------------------------------------------

    def has_edge(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    def number_of_edges(self) -> int:
        return len(self._edges)

    def get_edge(self, edge_id: EdgeId) -> Edge:
        """Return a copy of the edge record."""
        return replace(self._edge(edge_id))

    def edges(self, subgraph: Optional[SubgraphKind] = None) -> List[Edge]:
        """Copies of all edges, optionally limited to one subgraph, in id order."""
        return [replace(edge) for edge in self._edges.values()
                if subgraph is None or edge.subgraph is subgraph]

    def arch_out_edges(self, node_id: NodeId) -> Tuple[EdgeId, ...]:
        """Architecture and propagated edges leaving a node, in insertion order."""
        return tuple(self._arch_out.get(node_id, ()))

    def impl_out_edges(self, node_id: NodeId) -> Tuple[EdgeId, ...]:
        """Implementation edges leaving a node, in insertion order."""
        return tuple(self._impl_out.get(node_id, ()))

    def _edge(self, edge_id: EdgeId) -> Edge:
        try:
            return self._edges[edge_id]
        except KeyError:
            raise EdgeNotFound(edge_id) from None

    # ------------------------------------------------------------------
    # Node mapping
    # ------------------------------------------------------------------

    def map_node(self, impl_node: NodeId, arch_node: NodeId):
        """
        Map an implementation node onto an architecture node.

        A node maps to at most one target; mapping again replaces the old
        target. Subgraph membership of either side is not checked.
        """
        self._node(impl_node)
        self._node(arch_node)
        self._maps_to[impl_node] = arch_node

    def unmap_node(self, impl_node: NodeId):
        self._maps_to.pop(impl_node, None)

    def maps_to(self, impl_node: NodeId) -> Optional[NodeId]:
        return self._maps_to.get(impl_node)

    def mapping(self) -> Dict[NodeId, NodeId]:
        return dict(self._maps_to)

    # ------------------------------------------------------------------
    # Classification write-back
    # ------------------------------------------------------------------

    def set_edge_state(self, edge_id: EdgeId, state: EdgeState):
        if not isinstance(state, EdgeState):
            raise TypeError(f"Expected EdgeState, got {type(state).__name__}")
        self._edge(edge_id).state = state

    def set_edge_counter(self, edge_id: EdgeId, value: Counter):
        self._edge(edge_id).counter = int(value)

    def increment_counter(self, edge_id: EdgeId, delta: Counter = 1) -> Counter:
        """Add ``delta`` to an edge's counter and return the new value."""
        edge = self._edge(edge_id)
        edge.counter += int(delta)
        return edge.counter

    def add_support(self, edge_id: EdgeId, impl_edge_id: EdgeId):
        """Record that ``impl_edge_id`` is evidence for ``edge_id``."""
        self._edge(edge_id)
        self._edge(impl_edge_id)
        self._propagation_table.setdefault(edge_id, set()).add(impl_edge_id)

    def supporting_edges(self, edge_id: EdgeId) -> FrozenSet[EdgeId]:
        return frozenset(self._propagation_table.get(edge_id, ()))

    def propagation_table(self) -> Dict[EdgeId, FrozenSet[EdgeId]]:
        return {edge_id: frozenset(support)
                for edge_id, support in self._propagation_table.items()}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset_for_full_analysis(self):
        """
        Put the graph in its canonical pre-analysis state.

        - architecture edges: SPECIFIED, counter 0
        - implementation and propagated edges: UNDEFINED, counter 0
        - propagation table cleared

        Identities, adjacency, hierarchy and mapping are left alone.
        """
        for edge in self._edges.values():
            edge.counter = 0
            if edge.subgraph is SubgraphKind.ARCHITECTURE:
                edge.state = EdgeState.SPECIFIED
            else:
                edge.state = EdgeState.UNDEFINED
        self._propagation_table.clear()

        self.logger.info("Reset %d edges for full analysis", len(self._edges))

    def discard_propagated_subgraph(self) -> List[EdgeId]:
        """
        Remove every propagated edge and its bookkeeping.

        Architecture and implementation edges, nodes and the mapping are
        untouched. Removed ids are never handed out again.

        Returns:
            Ids of the removed edges, in id order
        """
        removed = [edge_id for edge_id, edge in self._edges.items()
                   if edge.subgraph is SubgraphKind.PROPAGATED]
        if not removed:
            return removed

        removed_set = set(removed)
        for edge_id in removed:
            edge = self._edges.pop(edge_id)
            for index in (self._arch_out, self._impl_out):
                outgoing = index.get(edge.source)
                if outgoing is not None:
                    outgoing[:] = [e for e in outgoing if e != edge_id]
            self._propagation_table.pop(edge_id, None)

        for support in self._propagation_table.values():
            support -= removed_set

        self.logger.info("Discarded %d propagated edges", len(removed))
        return removed

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_networkx(self, subgraph: Optional[SubgraphKind] = None) -> nx.MultiDiGraph:
        """
        Snapshot the graph as a NetworkX MultiDiGraph.

        Nodes are keyed by node id, edges by edge id. With ``subgraph`` set,
        only that subgraph's edges are included, with the nodes of that
        subgraph plus any endpoint they touch.
        """
        graph = nx.MultiDiGraph()
        edges = [edge for edge in self._edges.values()
                 if subgraph is None or edge.subgraph is subgraph]

        node_ids = {node_id for node_id, node in self._nodes.items()
                    if subgraph is None or node.subgraph is subgraph}
        for edge in edges:
            node_ids.update((edge.source, edge.target))

        for node_id in sorted(node_ids):
            node = self._nodes[node_id]
            graph.add_node(node_id, name=node.name, subgraph=node.subgraph,
                           parent=node.parent, kind=node.kind)
        for edge in edges:
            graph.add_edge(edge.source, edge.target, key=edge.id, kind=edge.kind,
                           subgraph=edge.subgraph, state=edge.state, counter=edge.counter)
        return graph


def _copy_node(node: Node) -> Node:
    return replace(node, children=list(node.children))
