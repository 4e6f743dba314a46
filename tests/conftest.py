"""Shared graph fixtures.

Graphs are drawn with edge energy in brackets and node energy in parens.
"""

from __future__ import annotations

import pytest

from navplan.graph.navigation_graph import NavigationGraph
from navplan.types.dto import Edge, Node, Vector3


@pytest.fixture
def abc_graph() -> NavigationGraph:
    #        [1]
    #   A(0) ───► B(3)
    #    │         │
    #    │[1]      │[1]
    #    ▼         ▼
    #    └──────► C(2)
    g = NavigationGraph()
    g.add_node(Node("A", Vector3(0.0, 0.0, 0.0), energy_cost=0, score_gain=0))
    g.add_node(Node("B", Vector3(1.0, 0.0, 0.0), energy_cost=3, score_gain=5))
    g.add_node(Node("C", Vector3(1.0, 0.0, 1.0), energy_cost=2, score_gain=4))
    g.add_edge(Edge("A", "B", energy_cost=1))
    g.add_edge(Edge("A", "C", energy_cost=1))
    g.add_edge(Edge("B", "C", energy_cost=1))
    return g


@pytest.fixture
def disconnected_graph() -> NavigationGraph:
    # A ◄──► B      C ◄──► D
    g = NavigationGraph()
    for name in "ABCD":
        g.add_node(Node(name, energy_cost=1))
    g.add_undirected_edge("A", "B", 1)
    g.add_undirected_edge("C", "D", 1)
    return g


@pytest.fixture
def square_graph() -> NavigationGraph:
    # Two equal-cost routes A -> C, via B or via D; nodes cost nothing.
    #
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   └────────►D─────────┘
    #       [1]        [1]
    g = NavigationGraph()
    # Insert D before B so insertion order disagrees with id order
    for name in "ADBC":
        g.add_node(Node(name))
    g.add_edge(Edge("A", "D", 1))
    g.add_edge(Edge("A", "B", 1))
    g.add_edge(Edge("D", "C", 1))
    g.add_edge(Edge("B", "C", 1))
    return g


@pytest.fixture
def line_graph() -> NavigationGraph:
    # A ──► B ──► C ──► D ──► E, each hop [2], each node (1)
    g = NavigationGraph()
    names = "ABCDE"
    for i, name in enumerate(names):
        g.add_node(Node(name, Vector3(float(i), 0.0, 0.0), energy_cost=1, score_gain=i))
    for u, v in zip(names, names[1:]):
        g.add_edge(Edge(u, v, 2))
    return g
