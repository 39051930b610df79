"""Tests for Node, Edge and NodeKind."""

import pytest

from giftgraph.errors import InternalInconsistency
from giftgraph.model.entities import SINK_ID, SOURCE_ID, Edge, Node, NodeKind


class TestNode:
    def test_node_creation_has_empty_adjacency(self):
        node = Node(id=1, kind=NodeKind.PARTICIPANT, name="Alice")
        assert node.id == 1
        assert node.name == "Alice"
        assert node.outgoing == {}
        assert node.incoming == {}
        assert node.is_participant

    def test_terminal_nodes_are_not_participants(self):
        assert not Node(SOURCE_ID, NodeKind.SOURCE, "Source").is_participant
        assert not Node(SINK_ID, NodeKind.SINK, "Sink").is_participant

    def test_adjacency_maps_are_not_shared(self):
        a = Node(1, NodeKind.PARTICIPANT, "A")
        b = Node(2, NodeKind.PARTICIPANT, "B")
        a.outgoing[2] = 0
        assert b.outgoing == {}

    def test_reset_adjacency(self):
        node = Node(1, NodeKind.PARTICIPANT, "A", outgoing={2: 0}, incoming={3: 1})
        node.reset_adjacency()
        assert node.outgoing == {}
        assert node.incoming == {}


class TestReservedIds:
    def test_source_and_sink_ids_are_distinct_negatives(self):
        assert SOURCE_ID < 0
        assert SINK_ID < 0
        assert SOURCE_ID != SINK_ID

    def test_node_kind_values(self):
        assert [k.name for k in NodeKind] == ["SOURCE", "SINK", "PARTICIPANT"]


class TestEdge:
    def test_edge_defaults(self):
        edge = Edge(id=0, source=SOURCE_ID, target=1, capacity=12)
        assert edge.used_capacity == 0
        assert edge.note == ""
        assert edge.residual_capacity == 12

    @pytest.mark.parametrize(
        "field_name, value",
        [("id", 7), ("source", 3), ("target", 3), ("capacity", 99)],
    )
    def test_endpoints_and_capacity_are_read_only(self, field_name, value):
        edge = Edge(id=0, source=1, target=2, capacity=4)
        with pytest.raises(AttributeError):
            setattr(edge, field_name, value)
        assert (edge.id, edge.source, edge.target, edge.capacity) == (0, 1, 2, 4)

    def test_used_capacity_and_note_are_writable(self):
        edge = Edge(id=0, source=1, target=2, capacity=4)
        edge.used_capacity = 2
        edge.note = "updated"
        assert edge.residual_capacity == 2
        assert edge.note == "updated"

    def test_self_loop_rejected(self):
        with pytest.raises(InternalInconsistency):
            Edge(id=0, source=1, target=1, capacity=4)

    def test_commit_updates_used_capacity(self):
        edge = Edge(id=0, source=1, target=2, capacity=4)
        edge.commit(3)
        assert edge.used_capacity == 3
        assert edge.residual_capacity == 1
        edge.commit(-2)
        assert edge.used_capacity == 1

    @pytest.mark.parametrize("amount", [5, -1])
    def test_commit_outside_bounds_raises(self, amount):
        edge = Edge(id=0, source=1, target=2, capacity=4)
        with pytest.raises(ValueError):
            edge.commit(amount)
        assert edge.used_capacity == 0
