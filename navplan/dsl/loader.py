"""Tactical map loader + schema validation.

A tactical map document (version 1) declares nodes with positions and
energy/score values, plus edges between them. Documents may be written in
YAML or JSON; both are parsed with ``yaml.safe_load``. The parsed mapping is
validated against the packaged JSON schema before it is applied to a
:class:`~navplan.graph.NavigationGraph`.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import jsonschema
import yaml

from navplan.config import PLANNER_CONFIG
from navplan.graph.navigation_graph import NavigationGraph
from navplan.logging import get_logger
from navplan.types.dto import Edge, Node, Vector3

LOGGER = get_logger(__name__)

MAP_SCHEMA_RESOURCE = "tactical_map.json"


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("navplan.schemas")
        .joinpath(MAP_SCHEMA_RESOURCE)
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_map_document(text: str) -> Dict[str, Any]:
    """Parse and validate a tactical map document.

    Args:
        text: YAML or JSON source.

    Returns:
        The validated document as a dictionary.

    Raises:
        ValueError: If the document is not a mapping, repeats a node id, or
            has an edge referencing an undeclared node.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("The provided map must be a mapping at top-level.")

    jsonschema.validate(data, _load_schema())

    node_ids = set()
    for node_def in data["nodes"]:
        node_id = node_def["id"]
        if node_id in node_ids:
            raise ValueError(f"Duplicate node id '{node_id}' in map")
        node_ids.add(node_id)

    for edge_def in data["edges"]:
        for key in ("fromId", "toId"):
            if edge_def[key] not in node_ids:
                raise ValueError(
                    f"Edge {edge_def['fromId']} -> {edge_def['toId']} references "
                    f"unknown node '{edge_def[key]}'"
                )

    return data


def load_map_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read ``path`` and return the validated map document."""
    text = Path(path).read_text(encoding="utf-8")
    LOGGER.debug("Loaded map file %s (%d bytes)", path, len(text))
    return load_map_document(text)


def _plan_edges(data: Dict[str, Any], undirected: bool) -> List[Edge]:
    """Expand map edge entries into distinct directed edges.

    In undirected mode a self-loop yields one edge, and an entry whose
    reverse was already listed with the same cost is merged with it.

    Raises:
        ValueError: If one directed pair is listed with different costs.
    """
    planned: Dict[Tuple[str, str], Edge] = {}
    for edge_def in data["edges"]:
        from_id, to_id = edge_def["fromId"], edge_def["toId"]
        energy_cost = edge_def.get("energyCost", 0.0)
        pairs = [(from_id, to_id)]
        if undirected and from_id != to_id:
            pairs.append((to_id, from_id))
        for pair in pairs:
            existing = planned.get(pair)
            if existing is None:
                planned[pair] = Edge(pair[0], pair[1], energy_cost)
            elif existing.energy_cost != energy_cost:
                raise ValueError(
                    f"Edge '{pair[0]}' -> '{pair[1]}' is listed with conflicting "
                    f"energy costs {existing.energy_cost} and {energy_cost}"
                )
    return list(planned.values())


def apply_to_graph(
    graph: NavigationGraph,
    data: Dict[str, Any],
    undirected: Optional[bool] = None,
) -> None:
    """Add the nodes and edges of a validated map document to ``graph``.

    The graph is not cleared first. Edges are added in both directions when
    ``undirected`` is true (default from ``PLANNER_CONFIG``). All conflicts
    are detected before the graph is touched, so a failed call leaves it
    unchanged.

    Raises:
        ValueError: If a map node already exists in ``graph`` or an edge is
            listed with conflicting costs.
    """
    if undirected is None:
        undirected = PLANNER_CONFIG.undirected_map_edges

    nodes = [
        Node(
            id=node_def["id"],
            position=Vector3.from_sequence(node_def["position"]),
            energy_cost=node_def["energyCost"],
            score_gain=node_def["scoreGain"],
        )
        for node_def in data["nodes"]
    ]
    for node in nodes:
        if node.id in graph:
            raise ValueError(f"Node '{node.id}' already exists in this graph.")
    edges = _plan_edges(data, undirected)

    for node in nodes:
        graph.add_node(node)
    for edge in edges:
        graph.add_edge(edge)

    LOGGER.debug(
        "Applied map (episode=%s, stage=%s): %d nodes, %d directed edges",
        data.get("episode"),
        data.get("stage"),
        len(nodes),
        len(edges),
    )


def graph_from_map(
    data: Dict[str, Any], undirected: Optional[bool] = None
) -> NavigationGraph:
    """Build a fresh graph from a validated map document."""
    graph = NavigationGraph()
    apply_to_graph(graph, data, undirected=undirected)
    return graph
