"""NetworkX graph conversion utilities.

Build a :class:`~navplan.graph.NavigationGraph` from any NetworkX graph, or
export one back for analysis and drawing with NetworkX tooling.

Example:
    >>> import networkx as nx
    >>> from navplan.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_node("A", energy_cost=0, score_gain=0, position=(0, 0, 0))
    >>> G.add_node("B", energy_cost=3, score_gain=5, position=(1, 0, 0))
    >>> G.add_edge("A", "B", energy_cost=1)
    >>>
    >>> graph = from_networkx(G)
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from navplan.graph.navigation_graph import NavigationGraph
from navplan.types.dto import Edge, Node, Vector3

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def from_networkx(
    G: NxGraph,
    *,
    energy_attr: str = "energy_cost",
    score_attr: str = "score_gain",
    position_attr: str = "position",
    edge_energy_attr: str = "energy_cost",
    bidirectional: bool = False,
) -> NavigationGraph:
    """Convert a NetworkX graph to a NavigationGraph.

    Node names are converted to strings. Missing or ``None`` attributes
    default to 0 and to the origin for positions. For multigraphs the
    cheapest parallel edge is kept, since a navigation graph holds one edge
    per direction.

    Args:
        G: Source graph. Undirected graphs always yield both directions.
        energy_attr: Node attribute for the visit energy cost.
        score_attr: Node attribute for the visit score gain.
        position_attr: Node attribute holding an ``(x, y, z)`` sequence.
        edge_energy_attr: Edge attribute for the traversal energy cost.
        bidirectional: Add the reverse of every directed edge as well.

    Returns:
        A new NavigationGraph.

    Raises:
        ValueError: If two node names collide after string conversion.
    """
    graph = NavigationGraph()
    for name, attrs in G.nodes(data=True):
        position = attrs.get(position_attr)
        graph.add_node(
            Node(
                id=str(name),
                position=Vector3.from_sequence(position)
                if position is not None
                else Vector3(0.0, 0.0, 0.0),
                energy_cost=attrs.get(energy_attr) or 0.0,
                score_gain=attrs.get(score_attr) or 0.0,
            )
        )

    both_ways = bidirectional or not G.is_directed()
    cheapest: dict[tuple[str, str], Any] = {}
    for u, v, attrs in G.edges(data=True):
        cost = attrs.get(edge_energy_attr) or 0.0
        pairs = [(str(u), str(v))]
        if both_ways:
            pairs.append((str(v), str(u)))
        for pair in pairs:
            if pair not in cheapest or cost < cheapest[pair]:
                cheapest[pair] = cost

    for (u, v), cost in cheapest.items():
        graph.add_edge(Edge(u, v, cost))
    return graph


def to_networkx(graph: NavigationGraph) -> "nx.DiGraph":
    """Convert a NavigationGraph to a standalone ``networkx.DiGraph``."""
    return graph.to_networkx()
