"""Render a :class:`~relgraph.graph.models.RootGraph` with Graphviz.

The assembled graph is translated into a ``graphviz.Graph`` (undirected),
one ``cluster_*`` subgraph per table cluster.  Layout and rasterisation are
left to the Graphviz ``dot`` executable.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable, Optional, Union

import graphviz

from relgraph.config import settings
from relgraph.errors import RenderError
from relgraph.graph.models import RootGraph

logger = logging.getLogger(__name__)

DEFAULT_FORMATS: tuple[str, ...] = ("svg", "png")


class GraphvizRenderer:
    """Translate and export graphs through the ``graphviz`` package.

    *rankdir* and *fontname* override the values the graph was built with;
    left as ``None`` the graph keeps its own.
    """

    def __init__(
        self,
        engine: Optional[str] = None,
        rankdir: Optional[str] = None,
        fontname: Optional[str] = None,
    ) -> None:
        self.engine = engine or settings.layout_engine
        self.rankdir = rankdir
        self.fontname = fontname

    def to_graphviz(self, root: RootGraph) -> graphviz.Graph:
        """Return a ``graphviz.Graph`` describing *root*."""
        graph_attr = dict(root.graph_attr)
        node_attr = dict(root.node_attr)
        if self.rankdir:
            graph_attr["rankdir"] = self.rankdir
        if self.fontname:
            graph_attr["fontname"] = self.fontname
            node_attr["fontname"] = self.fontname

        dot = graphviz.Graph(
            name=root.name,
            engine=self.engine,
            graph_attr=graph_attr,
            node_attr=node_attr,
            edge_attr=dict(root.edge_attr),
        )

        for cluster in root.clusters.values():
            with dot.subgraph(name=cluster.key) as sub:
                sub.attr(**cluster.attrs)
                for node in cluster.nodes.values():
                    sub.node(node.key, **node.attrs)

        for edge in root.edges.values():
            dot.edge(edge.tail.key, edge.head.key, tooltip=edge.name, **edge.attrs)

        return dot

    def to_dot(self, root: RootGraph) -> str:
        """DOT source for *root*; does not need the Graphviz executables."""
        return self.to_graphviz(root).source

    def pipe(self, root: RootGraph, format: str = "svg") -> bytes:
        """Lay out *root* and return the rendered bytes in *format*."""
        dot = self.to_graphviz(root)
        try:
            return dot.pipe(format=format)
        except (graphviz.ExecutableNotFound, subprocess.CalledProcessError) as exc:
            raise RenderError(f"Graphviz failed to render {format}: {exc}") from exc

    def render(
        self,
        root: RootGraph,
        output_dir: Union[str, Path, None] = None,
        basename: Optional[str] = None,
        formats: Iterable[str] = DEFAULT_FORMATS,
    ) -> dict[str, Path]:
        """Write one file per format to *output_dir* and return their paths.

        Raises:
            RenderError: If Graphviz is missing or exits with an error.
        """
        directory = settings.ensure_output_dir(Path(output_dir) if output_dir else None)
        name = basename or settings.basename
        dot = self.to_graphviz(root)

        written: dict[str, Path] = {}
        for fmt in formats:
            try:
                out = dot.render(filename=name, directory=str(directory), format=fmt, cleanup=True)
            except (graphviz.ExecutableNotFound, subprocess.CalledProcessError) as exc:
                raise RenderError(f"Graphviz failed to render {fmt}: {exc}") from exc
            written[fmt] = Path(out)
            logger.info("Wrote %s diagram to %s", fmt, out)
        return written
