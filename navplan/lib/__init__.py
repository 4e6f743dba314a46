"""Third-party library integrations."""

from navplan.lib.nx import from_networkx, to_networkx

__all__ = ["from_networkx", "to_networkx"]
