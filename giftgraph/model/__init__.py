"""Gift graph model package.

Defines the node and edge vocabulary, the participant factory functions and
the ``GiftGraph`` aggregate that wires them into a flow network.
"""

from giftgraph.model.entities import SINK_ID, SOURCE_ID, Edge, Node, NodeKind
from giftgraph.model.graph import (
    GiftGraph,
    GraphSummary,
    build_graph,
    build_graph_from_config,
)
from giftgraph.model.participants import (
    participants_from_count,
    participants_from_names,
    resolve_participants,
)

__all__ = [
    # Entities
    "Node",
    "Edge",
    "NodeKind",
    "SOURCE_ID",
    "SINK_ID",
    # Participants
    "participants_from_names",
    "participants_from_count",
    "resolve_participants",
    # Graph
    "GiftGraph",
    "GraphSummary",
    "build_graph",
    "build_graph_from_config",
]
