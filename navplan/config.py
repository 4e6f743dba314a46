"""Configuration classes for navplan components."""

from dataclasses import dataclass

from navplan.types.base import NodeSelection


@dataclass
class PlannerConfig:
    """Defaults used by the path builder, the map loader and the CLI."""

    # Node-selection strategy used by Dijkstra when the caller does not pick one
    node_selection: NodeSelection = NodeSelection.HEAP

    # Map edges become two directed edges unless a caller overrides it
    undirected_map_edges: bool = True

    # Log a warning when a path references ids missing from the graph
    warn_on_unresolved: bool = True

    # Budget used by the CLI when --budget is not given
    default_energy_budget: float = 0.0


# Global configuration instance
PLANNER_CONFIG = PlannerConfig()
