"""Planning session model."""

from navplan.model.path_builder import PathBuilder

__all__ = ["PathBuilder"]
