"""Base aliases, enums and protocols shared across navplan."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, Union

if TYPE_CHECKING:
    from navplan.types.dto import Edge, Node

#: Numeric energy/score value.
Cost = Union[int, float]

#: Node identifier. Ids are plain strings throughout the planner.
NodeID = str

#: Caller-supplied traversal cost for the directed step ``from_id -> to_id``.
EdgeCostFn = Callable[[NodeID, NodeID], Cost]


class NodeSelection(IntEnum):
    """How Dijkstra picks the next unvisited node.

    Both strategies settle nodes in the same order: smallest tentative
    distance first, ties broken by lexicographic node id.
    """

    #: Linear scan over all tentative distances, O(V^2) overall.
    LINEAR_SCAN = 1
    #: Binary heap with lazy deletion, O((V + E) log V).
    HEAP = 2

    @classmethod
    def from_string(cls, value: str) -> "NodeSelection":
        """Parse ``"scan"``, ``"linear_scan"`` or ``"heap"`` (case-insensitive).

        Raises:
            ValueError: If the string names no strategy.
        """
        key = value.strip().upper()
        if key == "SCAN":
            key = "LINEAR_SCAN"
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid node selection '{value}'. Valid values are: {valid}"
            ) from None


class GraphStore(Protocol):
    """Read-only graph queries consumed by the solver and the path builder."""

    def get_nodes(self) -> List["Node"]: ...

    def get_node(self, node_id: NodeID) -> Optional["Node"]: ...

    def has_edge(self, from_id: NodeID, to_id: NodeID) -> bool: ...

    def get_edges_from(self, node_id: NodeID) -> List["Edge"]: ...
