"""Conversion of a GiftGraph into a NetworkX DiGraph.

Flow algorithms are not part of giftgraph. The exported graph carries the
capacity under the ``capacity`` attribute, which is what NetworkX's
``maximum_flow`` and ``minimum_cut`` read by default.
"""

from typing import Callable, Optional

import networkx as nx

from giftgraph.model.entities import Edge
from giftgraph.model.graph import GiftGraph


def to_digraph(
    graph: GiftGraph,
    edge_func: Optional[Callable[[Edge], dict]] = None,
) -> nx.DiGraph:
    """Convert a GiftGraph to a NetworkX DiGraph.

    Nodes are keyed by their integer id and carry ``kind`` (the NodeKind
    name) and ``name``. Each edge carries ``capacity``, ``used_capacity``,
    ``note`` and ``edge_id`` unless ``edge_func`` is given, in which case its
    return value becomes the edge's attributes.

    Args:
        graph: A wired GiftGraph.
        edge_func: Optional function mapping an Edge to an attribute dict.

    Returns:
        A NetworkX DiGraph with one edge per GiftGraph edge.
    """
    nx_graph = nx.DiGraph()
    for node in graph.nodes():
        nx_graph.add_node(node.id, kind=node.kind.name, name=node.name)

    for edge in graph.edges:
        if edge_func:
            edge_data = edge_func(edge)
        else:
            edge_data = {
                "capacity": edge.capacity,
                "used_capacity": edge.used_capacity,
                "note": edge.note,
                "edge_id": edge.id,
            }
        nx_graph.add_edge(edge.source, edge.target, **edge_data)
    return nx_graph
