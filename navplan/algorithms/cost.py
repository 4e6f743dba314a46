"""Cost models for the solver and helpers to price a concrete walk."""

from __future__ import annotations

from typing import Optional, Sequence

from navplan.types.base import Cost, EdgeCostFn, GraphStore, NodeID


def _edge_energy(graph: GraphStore, from_id: NodeID, to_id: NodeID) -> Cost:
    for edge in graph.get_edges_from(from_id):
        if edge.to_id == to_id:
            return edge.energy_cost
    return 0.0


def edge_plus_node_energy(graph: GraphStore) -> EdgeCostFn:
    """Return a cost function charging edge energy plus destination node energy.

    A missing edge or an unresolved destination contributes 0.
    """

    def cost(from_id: NodeID, to_id: NodeID) -> Cost:
        node = graph.get_node(to_id)
        node_cost = node.energy_cost if node is not None else 0.0
        return _edge_energy(graph, from_id, to_id) + node_cost

    return cost


def walk_cost(sequence: Sequence[NodeID], edge_cost: EdgeCostFn) -> Optional[Cost]:
    """Sum ``edge_cost`` over consecutive pairs of ``sequence``.

    Returns None when the sequence has fewer than two ids.
    """
    if len(sequence) < 2:
        return None
    total: Cost = 0.0
    for from_id, to_id in zip(sequence, sequence[1:]):
        total += edge_cost(from_id, to_id)
    return total
