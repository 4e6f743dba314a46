"""Graph storage for navigation nodes and directed edges."""

from navplan.graph.navigation_graph import NavigationGraph

__all__ = ["NavigationGraph"]
