"""Fatal error types raised while building or rendering a diagram.

These signal defects in the assembly code or the rendering backend, never
gaps in the input metadata.  Gaps in the metadata are reported through
:mod:`relgraph.graph.diagnostics` instead.
"""

from __future__ import annotations


class GraphBuildError(Exception):
    """Base class for errors that abort the current build."""


class PreconditionViolation(GraphBuildError, ValueError):
    """A required argument reached the edge-creation step as ``None``."""


class RenderError(GraphBuildError, RuntimeError):
    """The rendering backend failed to produce its result."""
