"""navplan: headless path planning for node-based navigation.

navplan stores a directed graph of locations, lets a caller assemble a route
one step at a time under an energy budget, and reports the Dijkstra minimum
cost between the route's endpoints as a reference for route efficiency.

Primary API:
    NavigationGraph - Node/edge store with strict construction rules
    PathBuilder - Step-validated route construction under a budget
    dijkstra_shortest_path() - Minimum-cost path with a pluggable cost model
    load_map_file() / graph_from_map() - Tactical map documents

Example:
    from navplan import Edge, NavigationGraph, Node, PathBuilder

    graph = NavigationGraph()
    graph.add_node(Node("A"))
    graph.add_node(Node("B", energy_cost=3, score_gain=5))
    graph.add_edge(Edge("A", "B", energy_cost=1))

    builder = PathBuilder(graph, energy_budget=5)
    builder.try_append("A")
    builder.try_append("B")
    state = builder.get_state()
"""

from __future__ import annotations

from navplan import cli, logging
from navplan._version import __version__
from navplan.algorithms.cost import edge_plus_node_energy, walk_cost
from navplan.algorithms.spf import dijkstra_shortest_path
from navplan.config import PLANNER_CONFIG, PlannerConfig
from navplan.dsl.loader import (
    apply_to_graph,
    graph_from_map,
    load_map_document,
    load_map_file,
)
from navplan.graph.navigation_graph import NavigationGraph
from navplan.lib.nx import from_networkx, to_networkx
from navplan.model.path_builder import PathBuilder
from navplan.types.base import EdgeCostFn, GraphStore, NodeSelection
from navplan.types.dto import (
    DijkstraResult,
    Edge,
    Node,
    PathBuilderState,
    PathTotals,
    Vector3,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "NavigationGraph",
    "Node",
    "Edge",
    "Vector3",
    "PathBuilder",
    "PathBuilderState",
    "PathTotals",
    # Algorithms
    "dijkstra_shortest_path",
    "DijkstraResult",
    "edge_plus_node_energy",
    "walk_cost",
    # Types
    "EdgeCostFn",
    "GraphStore",
    "NodeSelection",
    # Configuration
    "PlannerConfig",
    "PLANNER_CONFIG",
    # Map documents
    "load_map_document",
    "load_map_file",
    "apply_to_graph",
    "graph_from_map",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
