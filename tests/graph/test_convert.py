import networkx as nx

from giftgraph.config import CapacityConfig
from giftgraph.graph.convert import to_digraph
from giftgraph.model.entities import SINK_ID, SOURCE_ID
from giftgraph.model.graph import build_graph
from giftgraph.model.participants import participants_from_count


def test_to_digraph_nodes_and_attrs(trio_graph):
    nxg = to_digraph(trio_graph)

    assert isinstance(nxg, nx.DiGraph)
    assert set(nxg.nodes) == {SOURCE_ID, SINK_ID, 1, 2, 3}
    assert nxg.nodes[SOURCE_ID] == {"kind": "SOURCE", "name": "Source"}
    assert nxg.nodes[2] == {"kind": "PARTICIPANT", "name": "Bob"}


def test_to_digraph_edges_match_graph(trio_graph):
    nxg = to_digraph(trio_graph)

    assert nxg.number_of_edges() == trio_graph.edge_count
    for edge in trio_graph.edges:
        data = nxg.edges[edge.source, edge.target]
        assert data["capacity"] == edge.capacity
        assert data["used_capacity"] == 0
        assert data["note"] == edge.note
        assert data["edge_id"] == edge.id


def test_edge_func_applied_in_conversion(trio_graph):
    nxg = to_digraph(trio_graph, edge_func=lambda e: {"weight": e.capacity * 2})
    assert nxg.edges[SOURCE_ID, 1] == {"weight": 24}


def test_max_flow_saturates_terminals(graph_of_size):
    graph = graph_of_size(5)
    value = nx.maximum_flow_value(to_digraph(graph), SOURCE_ID, SINK_ID)
    assert value == 12 * 5


def test_max_flow_limited_by_sink_capacity():
    caps = CapacityConfig(source_capacity=12, sink_capacity=4, peer_capacity=4)
    graph = build_graph(participants_from_count(3), caps)
    cut_value, (reachable, _) = nx.minimum_cut(to_digraph(graph), SOURCE_ID, SINK_ID)
    assert cut_value == 4 * 3
    assert SOURCE_ID in reachable
