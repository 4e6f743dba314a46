"""Immutable data containers exchanged between the graph, solver and builder."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from navplan.types.base import Cost, NodeID


class Vector3(NamedTuple):
    """Spatial coordinate of a node. Opaque to the planner beyond copying."""

    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Vector3":
        """Build from any 3-item sequence such as a JSON ``[x, y, z]`` list.

        Raises:
            ValueError: If ``values`` does not hold exactly three numbers.
        """
        if len(values) != 3:
            raise ValueError(f"Position must have 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))


@dataclass(frozen=True)
class Node:
    """A point in the navigation graph.

    Attributes:
        id: Unique node identifier.
        position: Spatial coordinate.
        energy_cost: Energy consumed when the node is visited (non-negative).
        score_gain: Score gained when the node is visited.
    """

    id: NodeID
    position: Vector3 = Vector3(0.0, 0.0, 0.0)
    energy_cost: Cost = 0.0
    score_gain: Cost = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.position, Vector3):
            object.__setattr__(self, "position", Vector3.from_sequence(self.position))
        if self.energy_cost < 0:
            raise ValueError(
                f"Node '{self.id}' has negative energy_cost {self.energy_cost}"
            )


@dataclass(frozen=True)
class Edge:
    """One directed connection ``from_id -> to_id`` with an optional cost."""

    from_id: NodeID
    to_id: NodeID
    energy_cost: Cost = 0.0

    def __post_init__(self) -> None:
        if self.energy_cost is None:
            object.__setattr__(self, "energy_cost", 0.0)


@dataclass(frozen=True)
class PathTotals:
    """Sums over the resolved nodes of a path."""

    node_count: int
    total_energy: Cost
    total_score: Cost


@dataclass(frozen=True)
class DijkstraResult:
    """Minimum-cost path (start first, goal last) and its cost."""

    path: List[NodeID]
    cost: Cost


@dataclass(frozen=True)
class PathBuilderState:
    """Snapshot of a path builder for display or debugging.

    Attributes:
        sequence: Node ids in visiting order.
        totals: Energy/score sums over resolved nodes.
        energy_budget: Current budget.
        is_over_budget: ``totals.total_energy > energy_budget``.
        dijkstra_min_cost: Minimal first-to-last cost, or None.
        walk_cost: Cost of walking ``sequence`` under the same cost model, or None.
        unresolved_ids: Ids in ``sequence`` that no longer resolve in the graph.
    """

    sequence: List[NodeID]
    totals: PathTotals
    energy_budget: Cost
    is_over_budget: bool
    dijkstra_min_cost: Optional[Cost]
    walk_cost: Optional[Cost] = None
    unresolved_ids: List[NodeID] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return plain JSON-serializable data."""
        return {
            "sequence": list(self.sequence),
            "totals": {
                "node_count": self.totals.node_count,
                "total_energy": self.totals.total_energy,
                "total_score": self.totals.total_score,
            },
            "energy_budget": self.energy_budget,
            "is_over_budget": self.is_over_budget,
            "dijkstra_min_cost": _finite_or_none(self.dijkstra_min_cost),
            "walk_cost": _finite_or_none(self.walk_cost),
            "unresolved_ids": list(self.unresolved_ids),
        }


def _finite_or_none(value: Optional[Cost]) -> Optional[Cost]:
    if value is None or not math.isfinite(value):
        return None
    return value
