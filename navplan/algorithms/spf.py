"""Single-source Dijkstra between two nodes with a caller-supplied cost model.

The solver does not read edge weights itself. Every relaxation asks the
``edge_cost(from_id, to_id)`` callable, which lets callers charge for the
edge, the destination node, or anything else.

Notes:
    Two node-selection strategies exist (see :class:`NodeSelection`). Both
    settle nodes in ``(distance, node_id)`` order, so equal-distance ties are
    broken by lexicographic node id and the two strategies return identical
    results. The search stops as soon as the goal is settled; the goal is
    never expanded.
"""

from __future__ import annotations

import math
from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from navplan.logging import get_logger
from navplan.types.base import Cost, EdgeCostFn, GraphStore, NodeID, NodeSelection
from navplan.types.dto import DijkstraResult

LOGGER = get_logger(__name__)

_INF = math.inf


def _relax(
    graph: GraphStore,
    current: NodeID,
    dist: Dict[NodeID, Cost],
    prev: Dict[NodeID, Optional[NodeID]],
    visited: Set[NodeID],
    edge_cost: EdgeCostFn,
) -> List[Tuple[Cost, NodeID]]:
    """Relax outgoing edges of ``current``; return improved ``(dist, id)`` pairs."""
    improved: List[Tuple[Cost, NodeID]] = []
    base = dist[current]
    for edge in graph.get_edges_from(current):
        neighbor = edge.to_id
        if neighbor in visited or neighbor not in dist:
            continue
        alt = base + edge_cost(current, neighbor)
        if alt < dist[neighbor]:
            dist[neighbor] = alt
            prev[neighbor] = current
            improved.append((alt, neighbor))
    return improved


def _settle_linear_scan(
    graph: GraphStore,
    goal_id: NodeID,
    dist: Dict[NodeID, Cost],
    prev: Dict[NodeID, Optional[NodeID]],
    edge_cost: EdgeCostFn,
) -> None:
    """O(V^2) baseline: scan every unvisited node for the minimum."""
    visited: Set[NodeID] = set()
    while True:
        current: Optional[NodeID] = None
        best = _INF
        for node_id, d in dist.items():
            if node_id in visited:
                continue
            if d < best or (d == best and current is not None and node_id < current):
                best = d
                current = node_id

        if current is None:
            break
        if current == goal_id:
            break

        visited.add(current)
        _relax(graph, current, dist, prev, visited, edge_cost)


def _settle_heap(
    graph: GraphStore,
    start_id: NodeID,
    goal_id: NodeID,
    dist: Dict[NodeID, Cost],
    prev: Dict[NodeID, Optional[NodeID]],
    edge_cost: EdgeCostFn,
) -> None:
    """Binary-heap selection with lazy deletion of stale entries."""
    visited: Set[NodeID] = set()
    min_pq: List[Tuple[Cost, NodeID]] = [(0.0, start_id)]
    while min_pq:
        d, current = heappop(min_pq)
        if current in visited or d > dist[current]:
            continue
        if current == goal_id:
            break

        visited.add(current)
        for entry in _relax(graph, current, dist, prev, visited, edge_cost):
            heappush(min_pq, entry)


def dijkstra_shortest_path(
    graph: GraphStore,
    start_id: NodeID,
    goal_id: NodeID,
    edge_cost: EdgeCostFn,
    *,
    selection: NodeSelection = NodeSelection.HEAP,
) -> Optional[DijkstraResult]:
    """Compute a minimum-cost path from ``start_id`` to ``goal_id``.

    Args:
        graph: Graph store to search.
        start_id: First node of the path.
        goal_id: Last node of the path.
        edge_cost: Cost of stepping ``from_id -> to_id``. Should be
            non-negative; returning ``math.inf`` makes a step impassable.
        selection: Node-selection strategy.

    Returns:
        ``DijkstraResult`` with the path in start-to-goal order, or None when
        either node is unknown or the goal is unreachable. Identical ids
        return a single-node path with cost 0 without touching the graph.
    """
    if start_id == goal_id:
        return DijkstraResult(path=[start_id], cost=0.0)

    dist: Dict[NodeID, Cost] = {}
    prev: Dict[NodeID, Optional[NodeID]] = {}
    for node in graph.get_nodes():
        dist[node.id] = _INF
        prev[node.id] = None

    if start_id not in dist or goal_id not in dist:
        LOGGER.debug(
            "No path %s -> %s: endpoint not in graph", start_id, goal_id
        )
        return None

    dist[start_id] = 0.0

    if selection == NodeSelection.LINEAR_SCAN:
        _settle_linear_scan(graph, goal_id, dist, prev, edge_cost)
    else:
        _settle_heap(graph, start_id, goal_id, dist, prev, edge_cost)

    goal_dist = dist[goal_id]
    if not math.isfinite(goal_dist):
        LOGGER.debug("No path %s -> %s: goal unreachable", start_id, goal_id)
        return None

    path: List[NodeID] = []
    cur: Optional[NodeID] = goal_id
    while cur is not None:
        path.append(cur)
        if len(path) > len(dist):
            # Predecessor cycle; cannot happen with non-negative costs
            return None
        cur = prev[cur]
    path.reverse()

    if path[0] != start_id:
        return None
    return DijkstraResult(path=path, cost=goal_dist)
