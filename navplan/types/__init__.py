"""Shared types for navplan."""

from navplan.types.base import Cost, EdgeCostFn, GraphStore, NodeID, NodeSelection
from navplan.types.dto import (
    DijkstraResult,
    Edge,
    Node,
    PathBuilderState,
    PathTotals,
    Vector3,
)

__all__ = [
    "Cost",
    "EdgeCostFn",
    "GraphStore",
    "NodeID",
    "NodeSelection",
    "DijkstraResult",
    "Edge",
    "Node",
    "PathBuilderState",
    "PathTotals",
    "Vector3",
]
