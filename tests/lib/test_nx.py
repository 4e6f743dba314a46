"""Tests for NetworkX conversion utilities."""

import networkx as nx
import pytest

from navplan.lib.nx import from_networkx, to_networkx
from navplan.types.dto import Edge, Vector3


def test_from_digraph():
    G = nx.DiGraph()
    G.add_node("A", energy_cost=0, score_gain=1, position=(0, 0, 0))
    G.add_node("B", energy_cost=3, score_gain=5, position=[1, 2, 3])
    G.add_edge("A", "B", energy_cost=2)

    graph = from_networkx(G)
    assert graph.node_ids() == ["A", "B"]
    assert graph.get_node("B").position == Vector3(1.0, 2.0, 3.0)
    assert graph.get_node("B").energy_cost == 3
    assert graph.get_edge("A", "B") == Edge("A", "B", 2)
    assert not graph.has_edge("B", "A")


def test_missing_attributes_default():
    G = nx.DiGraph()
    G.add_edge(1, 2)
    graph = from_networkx(G)
    node = graph.get_node("1")
    assert node.position == Vector3(0.0, 0.0, 0.0)
    assert node.energy_cost == 0 and node.score_gain == 0
    assert graph.get_edge("1", "2").energy_cost == 0


def test_undirected_graph_yields_both_directions():
    G = nx.Graph()
    G.add_edge("A", "B", energy_cost=4)
    graph = from_networkx(G)
    assert graph.get_edge("A", "B").energy_cost == 4
    assert graph.get_edge("B", "A").energy_cost == 4


def test_bidirectional_flag():
    G = nx.DiGraph()
    G.add_edge("A", "B", energy_cost=1)
    graph = from_networkx(G, bidirectional=True)
    assert graph.has_edge("B", "A")


def test_multigraph_keeps_cheapest_parallel_edge():
    G = nx.MultiDiGraph()
    G.add_edge("A", "B", energy_cost=5)
    G.add_edge("A", "B", energy_cost=2)
    G.add_edge("A", "B", energy_cost=9)
    graph = from_networkx(G)
    assert graph.edge_count() == 1
    assert graph.get_edge("A", "B").energy_cost == 2


def test_custom_attribute_names():
    G = nx.DiGraph()
    G.add_node("A", fuel=2, reward=7, xyz=(1, 1, 1))
    G.add_node("B")
    G.add_edge("A", "B", weight=3)
    graph = from_networkx(
        G,
        energy_attr="fuel",
        score_attr="reward",
        position_attr="xyz",
        edge_energy_attr="weight",
    )
    node = graph.get_node("A")
    assert (node.energy_cost, node.score_gain) == (2, 7)
    assert graph.get_edge("A", "B").energy_cost == 3


def test_name_collision_raises():
    G = nx.DiGraph()
    G.add_node(1)
    G.add_node("1")
    with pytest.raises(ValueError, match="already exists"):
        from_networkx(G)


def test_round_trip_preserves_structure(abc_graph):
    G = to_networkx(abc_graph)
    back = from_networkx(G)
    assert back.get_nodes() == abc_graph.get_nodes()
    assert back.get_edges() == abc_graph.get_edges()


def test_none_attributes_default():
    G = nx.DiGraph()
    G.add_node("A", energy_cost=None, score_gain=None)
    G.add_node("B", energy_cost=2)
    G.add_edge("A", "B", energy_cost=None)
    G.add_edge("B", "A", energy_cost=1)
    graph = from_networkx(G)
    assert graph.get_node("A").energy_cost == 0
    assert graph.get_node("A").score_gain == 0
    assert graph.get_edge("A", "B").energy_cost == 0


def test_multigraph_with_costless_parallel_edge():
    G = nx.MultiDiGraph()
    G.add_edge("A", "B", energy_cost=3)
    G.add_edge("A", "B", energy_cost=None)
    graph = from_networkx(G)
    assert graph.get_edge("A", "B").energy_cost == 0
