"""giftgraph: capacity graphs for gift exchanges.

giftgraph builds the flow network of a gift exchange: a source that hands
each participant up to twelve gifts a year, a sink that takes up to twelve
gifts a year from each participant, and an edge of capacity four between
every pair of participants. The resulting graph is meant to be handed to a
max-flow solver.

Primary API:
    build_graph() - Wire a graph from a participant mapping
    build_graph_from_config() - Resolve participant input and wire a graph
    participants_from_names(), participants_from_count() - Participant factory
    GiftGraph, Node, Edge, NodeKind - Graph model
    to_digraph() - Export to NetworkX

Example:
    from giftgraph import build_graph, participants_from_count, to_digraph
    import networkx as nx

    graph = build_graph(participants_from_count(4))
    flow = nx.maximum_flow_value(to_digraph(graph), graph.source.id, graph.sink.id)
"""

from __future__ import annotations

from giftgraph import cli, logging
from giftgraph._version import __version__
from giftgraph.config import (
    CAPACITY_CONFIG,
    CapacityConfig,
    ParticipantConfig,
    parse_names,
)
from giftgraph.errors import GiftGraphError, InternalInconsistency, InvalidInput
from giftgraph.graph.convert import to_digraph
from giftgraph.model import (
    SINK_ID,
    SOURCE_ID,
    Edge,
    GiftGraph,
    GraphSummary,
    Node,
    NodeKind,
    build_graph,
    build_graph_from_config,
    participants_from_count,
    participants_from_names,
    resolve_participants,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "NodeKind",
    "SOURCE_ID",
    "SINK_ID",
    "GiftGraph",
    "GraphSummary",
    # Construction
    "build_graph",
    "build_graph_from_config",
    "participants_from_names",
    "participants_from_count",
    "resolve_participants",
    # Configuration
    "CapacityConfig",
    "CAPACITY_CONFIG",
    "ParticipantConfig",
    "parse_names",
    # Errors
    "GiftGraphError",
    "InvalidInput",
    "InternalInconsistency",
    # Export
    "to_digraph",
    # Utilities
    "cli",
    "logging",
]
