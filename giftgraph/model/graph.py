"""Gift graph assembly and edge wiring.

A ``GiftGraph`` holds the source, the sink and the participants, plus a flat
list of every ``Edge``. Nodes index into that list by position, which keeps
each edge owned by the graph alone while both of its endpoints can find it.

Example:
    >>> from giftgraph import build_graph, participants_from_names
    >>> graph = build_graph(participants_from_names(["Alice", "Bob", "Carol"]))
    >>> graph.edge_count
    9
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional

from giftgraph.config import CAPACITY_CONFIG, CapacityConfig, ParticipantConfig
from giftgraph.errors import InternalInconsistency, InvalidInput
from giftgraph.logging import get_logger
from giftgraph.model.entities import SINK_ID, SOURCE_ID, Edge, Node, NodeKind
from giftgraph.model.participants import resolve_participants

logger = get_logger(__name__)


@dataclass(frozen=True)
class GraphSummary:
    """Counts and capacity totals of a wired gift graph."""

    participant_count: int
    edge_count: int
    source_edge_count: int
    sink_edge_count: int
    peer_edge_count: int
    source_capacity: int
    sink_capacity: int
    peer_capacity: int

    @property
    def total_capacity(self) -> int:
        return self.source_capacity + self.sink_capacity + self.peer_capacity


@dataclass
class GiftGraph:
    """Flow network of participants between a single source and sink.

    Attributes:
        source (Node): The source node, id ``SOURCE_ID``.
        sink (Node): The sink node, id ``SINK_ID``.
        participants (Dict[int, Node]): Participant id -> Node.
        capacities (CapacityConfig): Capacities used by ``initialize_edges``.
        edges (List[Edge]): Every edge; node adjacency maps hold indices into it.
    """

    source: Node
    sink: Node
    participants: Dict[int, Node]
    capacities: CapacityConfig = CAPACITY_CONFIG
    edges: List[Edge] = field(default_factory=list)
    _next_edge_id: int = field(default=0, init=False, repr=False)

    #
    # Construction
    #
    def initialize_edges(self) -> None:
        """Discard all edges and wire the complete network from scratch.

        Every participant gets an edge from the source and an edge to the
        sink. Every pair of participants gets exactly one edge, directed from
        the lower id to the higher id. Edge ids from an earlier wiring are not
        reused.

        Raises:
            InternalInconsistency: If the adjacency maps disagree about an
                edge while wiring.
        """
        caps = self.capacities
        self.source.reset_adjacency()
        self.sink.reset_adjacency()
        self.edges = []

        people = [self.participants[pid] for pid in sorted(self.participants)]

        for person in people:
            person.reset_adjacency()
            self._add_edge(
                self.source,
                person,
                caps.source_capacity,
                f"Edge from source to person {person.name}",
            )
            self._add_edge(
                person,
                self.sink,
                caps.sink_capacity,
                f"Edge from person {person.name} to sink node",
            )
        logger.debug(f"Wired {2 * len(people)} source/sink edges")

        peer_edges = 0
        for person1 in people:
            for person2 in people:
                if person1.id == person2.id:
                    continue

                # Only _add_edge writes these maps after the reset above, so a
                # mismatch means an edge was registered on one side only.
                forward = person2.id in person1.outgoing
                if forward != (person1.id in person2.incoming):
                    raise InternalInconsistency(
                        f"Asymmetric adjacency for edge {person1.id}->{person2.id}"
                    )
                backward = person2.id in person1.incoming
                if backward != (person1.id in person2.outgoing):
                    raise InternalInconsistency(
                        f"Asymmetric adjacency for edge {person2.id}->{person1.id}"
                    )
                if forward or backward:
                    continue

                self._add_edge(
                    person1,
                    person2,
                    caps.peer_capacity,
                    f"Edge from person {person1.name} to person {person2.name}",
                )
                peer_edges += 1
        logger.debug(f"Wired {peer_edges} participant edges")

    def _add_edge(self, u: Node, v: Node, capacity: int, note: str) -> Edge:
        if v.id in u.outgoing or u.id in v.incoming:
            raise InternalInconsistency(f"Edge {u.id}->{v.id} is already registered")

        edge = Edge(
            id=self._next_edge_id,
            source=u.id,
            target=v.id,
            capacity=capacity,
            note=note,
        )
        self._next_edge_id += 1

        index = len(self.edges)
        self.edges.append(edge)
        u.outgoing[v.id] = index
        v.incoming[u.id] = index
        return edge

    #
    # Queries
    #
    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def total_capacity(self) -> int:
        return sum(edge.capacity for edge in self.edges)

    def nodes(self) -> Iterator[Node]:
        """Yield the source, the sink, then participants by ascending id."""
        yield self.source
        yield self.sink
        for pid in sorted(self.participants):
            yield self.participants[pid]

    def node(self, node_id: int) -> Node:
        """Return the node with ``node_id``.

        Raises:
            ValueError: If no such node exists.
        """
        if node_id == SOURCE_ID:
            return self.source
        if node_id == SINK_ID:
            return self.sink
        try:
            return self.participants[node_id]
        except KeyError:
            raise ValueError(f"Node '{node_id}' does not exist.") from None

    def edge(self, u: int, v: int) -> Optional[Edge]:
        """Return the edge from ``u`` to ``v``, or None if there is none."""
        index = self.node(u).outgoing.get(v)
        return None if index is None else self.edges[index]

    def out_edges(self, node_id: int) -> List[Edge]:
        return [self.edges[i] for i in self.node(node_id).outgoing.values()]

    def in_edges(self, node_id: int) -> List[Edge]:
        return [self.edges[i] for i in self.node(node_id).incoming.values()]

    def neighbors(self, node_id: int) -> List[int]:
        """Ids of nodes joined to ``node_id`` by an edge in either direction."""
        node = self.node(node_id)
        seen = dict.fromkeys(node.outgoing)
        seen.update(dict.fromkeys(node.incoming))
        return list(seen)

    def check_integrity(self) -> None:
        """Verify that outgoing and incoming maps index the same edge set.

        Raises:
            InternalInconsistency: On the first mismatch found.
        """
        out_refs = 0
        in_refs = 0
        for node in self.nodes():
            for target_id, index in node.outgoing.items():
                edge = self._edge_at(index)
                if edge.source != node.id or edge.target != target_id:
                    raise InternalInconsistency(
                        f"Node {node.id} outgoing[{target_id}] points at "
                        f"edge {edge.source}->{edge.target}"
                    )
                if self.node(target_id).incoming.get(node.id) != index:
                    raise InternalInconsistency(
                        f"Edge {node.id}->{target_id} missing from incoming map"
                    )
                out_refs += 1
            for origin_id, index in node.incoming.items():
                edge = self._edge_at(index)
                if edge.source != origin_id or edge.target != node.id:
                    raise InternalInconsistency(
                        f"Node {node.id} incoming[{origin_id}] points at "
                        f"edge {edge.source}->{edge.target}"
                    )
                in_refs += 1
        if out_refs != len(self.edges) or in_refs != len(self.edges):
            raise InternalInconsistency(
                f"{len(self.edges)} edges but {out_refs} outgoing and "
                f"{in_refs} incoming references"
            )

    def _edge_at(self, index: int) -> Edge:
        if not 0 <= index < len(self.edges):
            raise InternalInconsistency(f"Edge index {index} out of range")
        return self.edges[index]

    def summary(self) -> GraphSummary:
        """Return edge counts and capacity totals by edge type."""
        source_edges = [e for e in self.edges if e.source == SOURCE_ID]
        sink_edges = [e for e in self.edges if e.target == SINK_ID]
        peer_edges = [
            e for e in self.edges if e.source != SOURCE_ID and e.target != SINK_ID
        ]
        return GraphSummary(
            participant_count=len(self.participants),
            edge_count=len(self.edges),
            source_edge_count=len(source_edges),
            sink_edge_count=len(sink_edges),
            peer_edge_count=len(peer_edges),
            source_capacity=sum(e.capacity for e in source_edges),
            sink_capacity=sum(e.capacity for e in sink_edges),
            peer_capacity=sum(e.capacity for e in peer_edges),
        )


def build_graph(
    participants: Mapping[int, Node],
    capacities: Optional[CapacityConfig] = None,
) -> GiftGraph:
    """Create the source and sink, then wire a complete gift graph.

    The graph wires its own copies of the participant nodes; the nodes in
    ``participants`` are left untouched.

    Args:
        participants: Participant id -> Node, as produced by the participant
            factory functions.
        capacities: Edge capacities; defaults to ``CAPACITY_CONFIG``.

    Returns:
        A fully wired GiftGraph.

    Raises:
        InvalidInput: If a participant id is not a positive integer matching
            its mapping key, or a capacity is not positive.
    """
    capacities = capacities or CAPACITY_CONFIG
    capacities.validate()

    for pid, node in participants.items():
        if node.id != pid or pid <= 0 or node.kind != NodeKind.PARTICIPANT:
            raise InvalidInput(
                f"Participant entry {pid!r} is not a participant node with that id"
            )

    source = Node(id=SOURCE_ID, kind=NodeKind.SOURCE, name="Source")
    sink = Node(id=SINK_ID, kind=NodeKind.SINK, name="Sink")
    graph = GiftGraph(
        source=source,
        sink=sink,
        participants={
            pid: Node(id=node.id, kind=node.kind, name=node.name)
            for pid, node in participants.items()
        },
        capacities=capacities,
    )
    graph.initialize_edges()

    logger.info(
        f"Built gift graph with {len(graph.participants)} participants "
        f"and {graph.edge_count} edges"
    )
    return graph


def build_graph_from_config(
    config: ParticipantConfig,
    capacities: Optional[CapacityConfig] = None,
) -> GiftGraph:
    """Resolve participants from ``config`` and build the graph."""
    return build_graph(resolve_participants(config), capacities)
