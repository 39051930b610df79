"""Nodes and edges of a gift-giving flow network."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict

from giftgraph.errors import InternalInconsistency

#: Reserved identifier of the source node.
SOURCE_ID = -1

#: Reserved identifier of the sink node.
SINK_ID = -2

# Edge fields that cannot change once set
_FIXED_EDGE_FIELDS = frozenset({"id", "source", "target", "capacity"})


class NodeKind(IntEnum):
    """Role of a node in the flow network."""

    SOURCE = 0
    SINK = 1
    PARTICIPANT = 2


@dataclass
class Node:
    """Represents a vertex in the flow network.

    Adjacency is stored as indices into the owning graph's edge list, so the
    outgoing and incoming views of a node refer to the same ``Edge`` records
    without holding them.

    Attributes:
        id (int): Unique identifier. Negative for the source and sink, 1..N
            for participants.
        kind (NodeKind): Source, sink or participant.
        name (str): Display name.
        outgoing (Dict[int, int]): Target node id -> edge index.
        incoming (Dict[int, int]): Source node id -> edge index.
    """

    id: int
    kind: NodeKind
    name: str
    outgoing: Dict[int, int] = field(default_factory=dict)
    incoming: Dict[int, int] = field(default_factory=dict)

    @property
    def is_participant(self) -> bool:
        return self.kind == NodeKind.PARTICIPANT

    def reset_adjacency(self) -> None:
        """Forget every edge touching this node."""
        self.outgoing = {}
        self.incoming = {}


@dataclass
class Edge:
    """Represents a directed, capacity-bounded connection between two nodes.

    ``id``, ``source``, ``target`` and ``capacity`` are fixed once the edge
    exists and assigning them raises ``AttributeError``. Only ``used_capacity``
    (and the descriptive ``note``) may change.

    Attributes:
        id (int): Identifier unique within the owning graph, never reused.
        source (int): Id of the node the edge leaves.
        target (int): Id of the node the edge enters.
        capacity (int): Upper bound on flow.
        used_capacity (int): Flow already committed (default 0).
        note (str): Free-form description.
    """

    id: int
    source: int
    target: int
    capacity: int
    used_capacity: int = 0
    note: str = ""

    def __post_init__(self) -> None:
        if self.source == self.target:
            raise InternalInconsistency(
                f"Edge {self.id} would be a self-loop on node {self.source}"
            )

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIXED_EDGE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Edge.{name} cannot be changed")
        super().__setattr__(name, value)

    @property
    def residual_capacity(self) -> int:
        """Capacity still available on this edge."""
        return self.capacity - self.used_capacity

    def commit(self, amount: int) -> None:
        """Add ``amount`` (may be negative) to the used capacity.

        Args:
            amount: Flow to push (positive) or cancel (negative).

        Raises:
            ValueError: If the result would fall outside ``[0, capacity]``.
        """
        used = self.used_capacity + amount
        if used < 0 or used > self.capacity:
            raise ValueError(
                f"Edge {self.source}->{self.target}: used capacity {used} "
                f"outside [0, {self.capacity}]"
            )
        self.used_capacity = used
