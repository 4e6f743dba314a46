"""Tactical map documents: parsing, validation and graph construction."""

from navplan.dsl.loader import (
    apply_to_graph,
    graph_from_map,
    load_map_document,
    load_map_file,
)

__all__ = ["apply_to_graph", "graph_from_map", "load_map_document", "load_map_file"]
