"""Command-line interface for navplan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import jsonschema
import yaml

from navplan.algorithms.cost import edge_plus_node_energy
from navplan.algorithms.spf import dijkstra_shortest_path
from navplan.config import PLANNER_CONFIG
from navplan.dsl.loader import graph_from_map, load_map_file
from navplan.graph.navigation_graph import NavigationGraph
from navplan.logging import get_logger, set_global_log_level
from navplan.model.path_builder import PathBuilder
from navplan.types.base import NodeSelection

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost with up to three decimals, trailing zeros trimmed.

    Examples:
        3.0 -> "3"; 0.25 -> "0.25"; 1234.5 -> "1,234.5".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _load_graph(path: Path) -> Optional[NavigationGraph]:
    """Load a map file, logging and returning None on failure."""
    try:
        return graph_from_map(load_map_file(path))
    except FileNotFoundError:
        logger.error("Map file not found: %s", path)
    except jsonschema.ValidationError as exc:
        logger.error("Invalid map %s: %s", path, exc.message)
    except yaml.YAMLError as exc:
        logger.error("Malformed map %s: %s", path, exc)
    except (ValueError, OSError) as exc:
        logger.error("Failed to load map %s: %s", path, exc)
    return None


def _inspect_map(path: Path, detail: bool = False) -> None:
    graph = _load_graph(path)
    if graph is None:
        sys.exit(1)

    print(f"Map: {path}")
    print(f"   Nodes: {len(graph)}")
    print(f"   Edges: {graph.edge_count()}")

    if not detail:
        return

    node_rows = [
        [
            n.id,
            ", ".join(_format_cost(c) for c in n.position),
            _format_cost(n.energy_cost),
            _format_cost(n.score_gain),
            str(len(graph.get_edges_from(n.id))),
        ]
        for n in graph.get_nodes()
    ]
    print()
    print(_format_table(["Node", "Position", "Energy", "Score", "Out"], node_rows))

    edge_rows = [
        [e.from_id, e.to_id, _format_cost(e.energy_cost)] for e in graph.get_edges()
    ]
    if edge_rows:
        print()
        print(_format_table(["From", "To", "Energy"], edge_rows))


def _route(path: Path, start: str, goal: str, selection: NodeSelection) -> None:
    graph = _load_graph(path)
    if graph is None:
        sys.exit(1)

    result = dijkstra_shortest_path(
        graph, start, goal, edge_plus_node_energy(graph), selection=selection
    )
    if result is None:
        print(f"No path from '{start}' to '{goal}'")
        sys.exit(1)

    print(f"Path: {' -> '.join(result.path)}")
    print(f"Cost: {_format_cost(result.cost)}")


def _plan(path: Path, node_ids: List[str], budget: float) -> None:
    graph = _load_graph(path)
    if graph is None:
        sys.exit(1)

    builder = PathBuilder(graph, budget)
    for node_id in node_ids:
        if not builder.try_append(node_id):
            logger.info("Step '%s' rejected", node_id)

    print(json.dumps(builder.get_state().to_dict(), indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``navplan`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="navplan",
        description="Inspect navigation maps and plan routes under an energy budget.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,route,plan}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser("inspect", help="Validate and summarize a map")
    inspect_parser.add_argument("map", type=Path, help="Path to map YAML/JSON")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show complete node and edge tables",
    )

    route_parser = subparsers.add_parser(
        "route", help="Compute the minimum-energy path between two nodes"
    )
    route_parser.add_argument("map", type=Path, help="Path to map YAML/JSON")
    route_parser.add_argument("start", help="Start node id")
    route_parser.add_argument("goal", help="Goal node id")
    route_parser.add_argument(
        "--selection",
        type=NodeSelection.from_string,
        default=PLANNER_CONFIG.node_selection,
        help="Node selection strategy: heap (default) or scan",
    )

    plan_parser = subparsers.add_parser(
        "plan", help="Build a path step by step and report its state"
    )
    plan_parser.add_argument("map", type=Path, help="Path to map YAML/JSON")
    plan_parser.add_argument("nodes", nargs="+", help="Node ids in visiting order")
    plan_parser.add_argument(
        "--budget",
        "-b",
        type=float,
        default=PLANNER_CONFIG.default_energy_budget,
        help="Energy budget for the path",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "inspect":
        _inspect_map(args.map, args.detail)
    elif args.command == "route":
        _route(args.map, args.start, args.goal, args.selection)
    elif args.command == "plan":
        _plan(args.map, args.nodes, args.budget)


if __name__ == "__main__":
    main()
