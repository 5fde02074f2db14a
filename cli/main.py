"""relgraph CLI — entry-point for diagram generation.

Usage:
    python cli/main.py --help

Commands:
    render   → build the graph and write SVG + PNG diagrams
    dot      → print the DOT source of the graph
    inspect  → print clusters, nodes and edges as an ASCII tree
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from relgraph.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from relgraph.config import settings
from relgraph.documenter import build_graph, generate_diagram
from relgraph.errors import GraphBuildError
from relgraph.metadata.loader import MetadataDocument, MetadataError, load_document
from relgraph.render.graphviz_backend import GraphvizRenderer

from cli.rendering import render_diagnostics, render_tree

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

app = typer.Typer(
    name="relgraph",
    help="Relationship diagrams for relational metadata models.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Python log level."),
) -> None:
    """Configure logging for every command."""
    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}",
            param_hint="--log-level / RELGRAPH_LOG_LEVEL",
        )
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(tag: str, input_path: Path) -> MetadataDocument:
    try:
        return load_document(input_path)
    except MetadataError as exc:
        typer.echo(f"[{tag}] ❌ {exc}")
        raise typer.Exit(code=1)


def _echo_diagnostics(tag: str, lines: list[str]) -> None:
    for line in lines:
        typer.echo(f"[{tag}] {line}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("render")
def render(
    input_path: Path = typer.Option(..., "--input", "-i", help="Metadata JSON document."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory."),
    basename: Optional[str] = typer.Option(None, "--basename", help="File name without extension."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also list skipped lookups."),
) -> None:
    """Build the relationship graph and write SVG + PNG diagrams."""
    doc = _load("render", input_path)
    typer.echo(f"[render] Building graph for {doc.name!r} ({len(doc.tables)} table(s)) …")

    try:
        result = generate_diagram(
            doc.to_tables(),
            doc.to_relationships(),
            output_dir=output,
            name=doc.name,
            basename=basename,
        )
    except GraphBuildError as exc:
        typer.echo(f"[render] ❌ {exc}")
        raise typer.Exit(code=1)

    _echo_diagnostics("render", render_diagnostics(result.build.diagnostics, verbose))
    graph = result.build.graph
    typer.echo(f"[render] Clusters: {len(graph.clusters)}  Edges: {len(graph.edges)}")
    for fmt, path in result.files.items():
        typer.echo(f"[render] ✅ {fmt}: {path}")


@app.command("dot")
def dot(
    input_path: Path = typer.Option(..., "--input", "-i", help="Metadata JSON document."),
) -> None:
    """Print the DOT source of the relationship graph."""
    doc = _load("dot", input_path)
    result = build_graph(doc.to_tables(), doc.to_relationships(), name=doc.name)
    typer.echo(GraphvizRenderer().to_dot(result.graph))


@app.command("inspect")
def inspect(
    input_path: Path = typer.Option(..., "--input", "-i", help="Metadata JSON document."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also list skipped lookups."),
) -> None:
    """Show clusters, nodes and edges of the graph as an ASCII tree."""
    doc = _load("inspect", input_path)
    result = build_graph(doc.to_tables(), doc.to_relationships(), name=doc.name)
    typer.echo(render_tree(result.graph))
    _echo_diagnostics("inspect", render_diagnostics(result.diagnostics, verbose))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
