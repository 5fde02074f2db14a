"""Graph assembly package.

Public re-exports so callers can write::

    from relgraph.graph import GraphBuilder, ColorAllocator, sanitize
"""

from relgraph.graph.builder import GraphBuilder
from relgraph.graph.colors import PALETTE, ColorAllocator
from relgraph.graph.diagnostics import Diagnostic, Diagnostics
from relgraph.graph.models import Cluster, GraphEdge, GraphNode, RootGraph
from relgraph.graph.sanitize import sanitize

__all__ = [
    "GraphBuilder",
    "PALETTE",
    "ColorAllocator",
    "Diagnostic",
    "Diagnostics",
    "Cluster",
    "GraphEdge",
    "GraphNode",
    "RootGraph",
    "sanitize",
]
