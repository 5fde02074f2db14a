"""relgraph — relationship diagrams for relational metadata models.

Public re-exports so callers can write::

    from relgraph import generate_diagram, load_document
"""

from relgraph.documenter import BuildResult, DiagramResult, build_graph, generate_diagram
from relgraph.errors import GraphBuildError, PreconditionViolation, RenderError
from relgraph.metadata import load_document

__all__ = [
    "BuildResult",
    "DiagramResult",
    "build_graph",
    "generate_diagram",
    "GraphBuildError",
    "PreconditionViolation",
    "RenderError",
    "load_document",
]
