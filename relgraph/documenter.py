"""Diagram generation pipeline.

``generate_diagram`` orchestrates one document end to end:

    metadata → GraphBuilder (clusters, nodes, edges) → GraphvizRenderer
    → <output_dir>/<basename>.svg + <basename>.png

Every call builds a fresh graph, color allocator and diagnostics list, so
nothing leaks between documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from relgraph.config import settings
from relgraph.graph.builder import GraphBuilder
from relgraph.graph.colors import ColorAllocator
from relgraph.graph.diagnostics import Diagnostics
from relgraph.graph.models import RootGraph
from relgraph.metadata.models import EntityRelationship, TableEntity
from relgraph.render.graphviz_backend import DEFAULT_FORMATS, GraphvizRenderer


@dataclass
class BuildResult:
    graph: RootGraph
    diagnostics: Diagnostics
    colors: ColorAllocator


@dataclass
class DiagramResult:
    build: BuildResult
    files: dict[str, Path] = field(default_factory=dict)

    @property
    def svg_path(self) -> Optional[Path]:
        return self.files.get("svg")

    @property
    def png_path(self) -> Optional[Path]:
        return self.files.get("png")


def build_graph(
    tables: Iterable[TableEntity],
    relationships: Iterable[EntityRelationship],
    name: str = "solution",
) -> BuildResult:
    """Assemble the relationship graph without rendering it."""
    builder = GraphBuilder(
        tables,
        relationships,
        name=name,
        rankdir=settings.rankdir,
        fontname=settings.fontname,
    )
    graph = builder.build()
    return BuildResult(graph=graph, diagnostics=builder.diagnostics, colors=builder.colors)


def generate_diagram(
    tables: Iterable[TableEntity],
    relationships: Iterable[EntityRelationship],
    output_dir: Union[str, Path, None] = None,
    *,
    name: str = "solution",
    basename: Optional[str] = None,
    formats: Iterable[str] = DEFAULT_FORMATS,
    renderer: Optional[GraphvizRenderer] = None,
) -> DiagramResult:
    """Build the graph for *tables* / *relationships* and write the diagram files.

    Args:
        tables: Every table of the document.
        relationships: Every declared relationship of the document.
        output_dir: Target directory.  Defaults to ``settings.output_dir``.
        name: Graph name (usually the solution's unique name).
        basename: File name without extension.  Defaults to ``settings.basename``.
        formats: Graphviz output formats, SVG and PNG by default.
        renderer: Override the rendering backend (mainly for tests).

    Returns:
        A :class:`DiagramResult` with the build result and the written paths.

    Raises:
        PreconditionViolation: The assembly code passed a null element on.
        RenderError: Graphviz could not produce the output files.
    """
    build = build_graph(tables, relationships, name=name)
    backend = renderer or GraphvizRenderer()
    files = backend.render(build.graph, output_dir=output_dir, basename=basename, formats=formats)
    return DiagramResult(build=build, files=files)
