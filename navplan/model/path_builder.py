"""Interactive, step-validated route construction under an energy budget.

`PathBuilder` holds an ordered, duplicate-free sequence of node ids. Each
append is checked against the graph (there must be an edge from the current
last node) and against the no-revisit rule. Rejections are reported through
return values, never exceptions.

The sequence is stored as a tuple and replaced wholesale on every mutation,
so snapshots handed out earlier never change.

Example:
    builder = PathBuilder(graph, energy_budget=5)
    builder.try_append("A")
    builder.try_append("B")
    state = builder.get_state()
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from navplan.algorithms.cost import edge_plus_node_energy, walk_cost
from navplan.algorithms.spf import dijkstra_shortest_path
from navplan.config import PLANNER_CONFIG, PlannerConfig
from navplan.logging import get_logger
from navplan.types.base import Cost, GraphStore, NodeID
from navplan.types.dto import Node, PathBuilderState, PathTotals, Vector3

LOGGER = get_logger(__name__)


class PathBuilder:
    """Stateful planning session over a read-only graph store.

    Attributes are private; use the accessors. Any operation may be called in
    any order. Instances are not thread-safe: callers serialize access.
    """

    def __init__(
        self,
        graph: GraphStore,
        energy_budget: Cost,
        config: Optional[PlannerConfig] = None,
    ) -> None:
        self._graph = graph
        self._config = config or PLANNER_CONFIG
        self._energy_budget: Cost = max(0, energy_budget)
        self._sequence: Tuple[NodeID, ...] = ()

    #
    # Budget
    #
    def set_energy_budget(self, budget: Cost) -> None:
        """Set the budget; negative values are clamped to 0."""
        self._energy_budget = max(0, budget)

    def get_energy_budget(self) -> Cost:
        return self._energy_budget

    #
    # Sequence mutation
    #
    def clear(self) -> None:
        self._sequence = ()

    def try_append(self, node_id: NodeID) -> bool:
        """Append ``node_id`` if the step is valid.

        The step is rejected when ``node_id`` is already in the sequence, or
        when the sequence is non-empty and the graph has no edge from the
        last node to ``node_id``. The first id of an empty sequence is
        accepted without a graph lookup.

        Returns:
            True if the id was appended.
        """
        if node_id in self._sequence:
            LOGGER.debug("Rejected '%s': already in path", node_id)
            return False

        if not self._sequence:
            self._sequence = (node_id,)
            return True

        last = self._sequence[-1]
        if not self._graph.has_edge(last, node_id):
            LOGGER.debug("Rejected '%s': no edge from '%s'", node_id, last)
            return False

        self._sequence = self._sequence + (node_id,)
        return True

    def pop(self) -> Optional[NodeID]:
        """Remove and return the last id, or None if the sequence is empty."""
        if not self._sequence:
            return None
        last = self._sequence[-1]
        self._sequence = self._sequence[:-1]
        return last

    #
    # Queries
    #
    def get_sequence(self) -> List[NodeID]:
        """Return a copy of the current id order."""
        return list(self._sequence)

    def get_nodes(self) -> List[Node]:
        """Resolve the sequence through the graph.

        Ids that no longer resolve are dropped from the result. Use
        :meth:`get_unresolved_ids` to detect the mismatch.
        """
        nodes: List[Node] = []
        missing: List[NodeID] = []
        for node_id in self._sequence:
            node = self._graph.get_node(node_id)
            if node is None:
                missing.append(node_id)
            else:
                nodes.append(node)
        if missing and self._config.warn_on_unresolved:
            LOGGER.warning(
                "Path references %d unresolved node(s): %s",
                len(missing),
                ", ".join(missing),
            )
        return nodes

    def get_unresolved_ids(self) -> List[NodeID]:
        """Return ids in the sequence that the graph no longer knows."""
        return [n for n in self._sequence if self._graph.get_node(n) is None]

    def get_totals(self) -> PathTotals:
        nodes = self.get_nodes()
        return PathTotals(
            node_count=len(nodes),
            total_energy=sum(n.energy_cost for n in nodes),
            total_score=sum(n.score_gain for n in nodes),
        )

    def is_over_budget(self) -> bool:
        """True iff total energy strictly exceeds the budget."""
        return self.get_totals().total_energy > self._energy_budget

    def get_dijkstra_min_cost(self) -> Optional[Cost]:
        """Minimal first-to-last cost (edge energy + destination node energy).

        Informational only: the value never affects the sequence.

        Returns:
            The cost, or None with fewer than two ids or no connecting path.
        """
        if len(self._sequence) < 2:
            return None
        result = dijkstra_shortest_path(
            self._graph,
            self._sequence[0],
            self._sequence[-1],
            edge_plus_node_energy(self._graph),
            selection=self._config.node_selection,
        )
        return result.cost if result is not None else None

    def get_walk_cost(self) -> Optional[Cost]:
        """Cost of walking the current sequence under the Dijkstra cost model."""
        return walk_cost(self._sequence, edge_plus_node_energy(self._graph))

    def get_positions(self) -> List[Vector3]:
        """Return coordinates of the resolved nodes, untransformed."""
        return [Vector3(*n.position) for n in self.get_nodes()]

    def get_state(self) -> PathBuilderState:
        totals = self.get_totals()
        return PathBuilderState(
            sequence=self.get_sequence(),
            totals=totals,
            energy_budget=self._energy_budget,
            is_over_budget=totals.total_energy > self._energy_budget,
            dijkstra_min_cost=self.get_dijkstra_min_cost(),
            walk_cost=self.get_walk_cost(),
            unresolved_ids=self.get_unresolved_ids(),
        )

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        return (
            f"PathBuilder(sequence={list(self._sequence)}, "
            f"energy_budget={self._energy_budget})"
        )
