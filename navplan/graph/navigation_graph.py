"""Directed navigation graph with strict construction rules.

`NavigationGraph` stores :class:`~navplan.types.dto.Node` and
:class:`~navplan.types.dto.Edge` objects in a `networkx.DiGraph`. Construction
is strict: no implicit node creation when adding an edge, no duplicate nodes,
no duplicate directed edges. Queries are lenient: unknown ids yield ``None``,
``False`` or an empty list instead of raising.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import networkx as nx

from navplan.logging import get_logger
from navplan.types.base import Cost, NodeID
from navplan.types.dto import Edge, Node

LOGGER = get_logger(__name__)

# Attribute keys holding the dataclass payloads on the backing DiGraph
_NODE_KEY = "node"
_EDGE_KEY = "edge"


class NavigationGraph:
    """Authoritative container of nodes and directed edges.

    Node enumeration follows insertion order, so iteration is stable for the
    lifetime of the graph.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()

    #
    # Construction
    #
    def add_node(self, node: Node) -> None:
        """Add a node.

        Raises:
            ValueError: If a node with the same id already exists.
        """
        if node.id in self._graph:
            raise ValueError(f"Node '{node.id}' already exists in this graph.")
        self._graph.add_node(node.id, **{_NODE_KEY: node})

    def add_edge(self, edge: Edge) -> None:
        """Add a directed edge between two existing nodes.

        Raises:
            ValueError: If an endpoint is missing or the edge already exists.
        """
        if edge.from_id not in self._graph:
            raise ValueError(f"Source node '{edge.from_id}' does not exist.")
        if edge.to_id not in self._graph:
            raise ValueError(f"Target node '{edge.to_id}' does not exist.")
        if self._graph.has_edge(edge.from_id, edge.to_id):
            raise ValueError(
                f"Edge '{edge.from_id}' -> '{edge.to_id}' already exists."
            )
        self._graph.add_edge(edge.from_id, edge.to_id, **{_EDGE_KEY: edge})

    def add_undirected_edge(
        self, from_id: NodeID, to_id: NodeID, energy_cost: Cost = 0.0
    ) -> None:
        """Add ``from_id -> to_id`` and ``to_id -> from_id`` with the same cost.

        A self-loop is added once.
        """
        self.add_edge(Edge(from_id, to_id, energy_cost))
        if from_id != to_id:
            self.add_edge(Edge(to_id, from_id, energy_cost))

    def remove_node(self, node_id: NodeID) -> None:
        """Remove a node together with every incident edge.

        Raises:
            ValueError: If the node does not exist.
        """
        if node_id not in self._graph:
            raise ValueError(f"Node '{node_id}' does not exist.")
        self._graph.remove_node(node_id)
        LOGGER.debug("Removed node '%s'", node_id)

    def clear(self) -> None:
        """Drop all nodes and edges."""
        self._graph.clear()

    #
    # Queries
    #
    def get_nodes(self) -> List[Node]:
        """Return every node in insertion order."""
        return [data[_NODE_KEY] for _, data in self._graph.nodes(data=True)]

    def get_node(self, node_id: NodeID) -> Optional[Node]:
        """Return the node with this id, or None."""
        data = self._graph.nodes.get(node_id)
        if data is None:
            return None
        return data[_NODE_KEY]

    def has_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        """True iff the directed edge ``from_id -> to_id`` exists."""
        return self._graph.has_edge(from_id, to_id)

    def get_edge(self, from_id: NodeID, to_id: NodeID) -> Optional[Edge]:
        """Return the directed edge ``from_id -> to_id``, or None."""
        data = self._graph.get_edge_data(from_id, to_id)
        if data is None:
            return None
        return data[_EDGE_KEY]

    def get_edges_from(self, node_id: NodeID) -> List[Edge]:
        """Return outgoing edges of ``node_id``; empty for unknown ids."""
        if node_id not in self._graph:
            return []
        return [data[_EDGE_KEY] for _, data in self._graph.succ[node_id].items()]

    def get_edges(self) -> List[Edge]:
        """Return every edge, grouped by source node in insertion order."""
        return [data[_EDGE_KEY] for _, _, data in self._graph.edges(data=True)]

    def node_ids(self) -> List[NodeID]:
        return list(self._graph.nodes)

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.get_nodes())

    def __repr__(self) -> str:
        return f"NavigationGraph(nodes={len(self)}, edges={self.edge_count()})"

    #
    # Interop
    #
    def to_networkx(self) -> nx.DiGraph:
        """Return a standalone `networkx.DiGraph` with flattened attributes.

        Node attributes: ``position`` (tuple), ``energy_cost``, ``score_gain``.
        Edge attributes: ``energy_cost``. The result shares no state with
        this graph.
        """
        out = nx.DiGraph()
        for node in self.get_nodes():
            out.add_node(
                node.id,
                position=tuple(node.position),
                energy_cost=node.energy_cost,
                score_gain=node.score_gain,
            )
        for edge in self.get_edges():
            out.add_edge(edge.from_id, edge.to_id, energy_cost=edge.energy_cost)
        return out
