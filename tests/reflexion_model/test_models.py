"""Tests for the reflexion graph data models."""

import pytest

from reflexion_model.models import Edge, Node
from reflexion_model.state import EdgeState
from reflexion_model.types import EdgeKind, NodeCategory, NodeKind, SubgraphKind


class TestDataModels:
    """Test the node and edge records."""

    def test_node_creation(self):
        node = Node(
            name="Billing",
            subgraph=SubgraphKind.ARCHITECTURE,
            kind=NodeKind(NodeCategory.SERVICE),
        )
        assert node.name == "Billing"
        assert node.subgraph is SubgraphKind.ARCHITECTURE
        assert node.parent is None
        assert node.id == 0
        assert node.children == []

    def test_node_subgraph_from_string(self):
        node = Node(name="billing.py", subgraph="implementation")
        assert node.subgraph is SubgraphKind.IMPLEMENTATION

    def test_node_rejects_propagated_subgraph(self):
        with pytest.raises(ValueError):
            Node(name="X", subgraph=SubgraphKind.PROPAGATED)

    def test_nodes_do_not_share_children(self):
        first = Node(name="A", subgraph=SubgraphKind.ARCHITECTURE)
        second = Node(name="B", subgraph=SubgraphKind.ARCHITECTURE)
        first.children.append(5)
        assert second.children == []

    def test_edge_creation(self):
        edge = Edge(source=1, target=2, kind=EdgeKind.calls(),
                    subgraph=SubgraphKind.IMPLEMENTATION)
        assert edge.source == 1
        assert edge.target == 2
        assert edge.kind == EdgeKind.calls()
        assert edge.state is EdgeState.UNDEFINED
        assert edge.counter == 0
        assert edge.id == 0

    def test_edge_kind_coerced_from_string(self):
        edge = Edge(source=1, target=2, kind="depends_on", subgraph="architecture")
        assert edge.kind == EdgeKind.depends_on()
        assert edge.subgraph is SubgraphKind.ARCHITECTURE

    def test_edge_rejects_unknown_state(self):
        with pytest.raises(ValueError):
            Edge(source=1, target=2, kind="calls", subgraph=SubgraphKind.IMPLEMENTATION,
                 state="broken")
