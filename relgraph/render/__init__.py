"""Rendering backends for assembled graphs."""

from relgraph.render.graphviz_backend import DEFAULT_FORMATS, GraphvizRenderer

__all__ = ["DEFAULT_FORMATS", "GraphvizRenderer"]
