"""Path algorithms: Dijkstra solver and cost models."""

from navplan.algorithms.cost import edge_plus_node_energy, walk_cost
from navplan.algorithms.spf import dijkstra_shortest_path

__all__ = ["dijkstra_shortest_path", "edge_plus_node_energy", "walk_cost"]
