"""Utilities for rendering assembled graphs in the CLI."""

from __future__ import annotations

from relgraph.graph.diagnostics import Diagnostics
from relgraph.graph.models import RootGraph


def render_tree(graph: RootGraph) -> str:
    """Render a graph as an ASCII tree of clusters and their nodes.

    Args:
        graph: The assembled graph.

    Returns:
        String representation of the tree, followed by the edge list.
    """
    lines = [f"📁 {graph.name}"]

    clusters = list(graph.clusters.values())
    for i, cluster in enumerate(clusters):
        is_last = i == len(clusters) - 1
        connector = "└── " if is_last else "├── "
        lines.append(f"{connector}🗂️ {cluster.label or cluster.key}")

        child_prefix = "    " if is_last else "│   "
        nodes = list(cluster.nodes.values())
        for j, node in enumerate(nodes):
            node_connector = "└── " if j == len(nodes) - 1 else "├── "
            color = node.attrs.get("fillcolor", "")
            lines.append(f"{child_prefix}{node_connector}🔑 {node.label or node.key} {color}".rstrip())

    if graph.edges:
        lines.append("")
        lines.append(f"Edges ({len(graph.edges)}):")
        for edge in graph.edges.values():
            lines.append(f"  {edge.tail.key} --[{edge.label}]--> {edge.head.key}")

    return "\n".join(lines)


def render_diagnostics(diagnostics: Diagnostics, verbose: bool = False) -> list[str]:
    """One line per diagnostic; only warnings unless *verbose*."""
    entries = diagnostics.entries if verbose else diagnostics.warnings
    return [f"⚠️  [{d.kind}] {d.message}" for d in entries]
