"""Diagram endpoints.

Routes
------
POST   /diagrams/dot       Build the graph and return its DOT source + warnings
POST   /diagrams/svg       Build and render the graph, return ``image/svg+xml``
POST   /diagrams/summary   Build the graph and return clusters / nodes / edges
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel

from relgraph.documenter import BuildResult, build_graph
from relgraph.errors import RenderError
from relgraph.graph.diagnostics import Diagnostics
from relgraph.metadata.loader import MetadataDocument

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class DiagnosticResponse(BaseModel):
    kind: str
    table: str
    message: str


class DotResponse(BaseModel):
    name: str
    dot: str
    warnings: list[DiagnosticResponse]


class NodeResponse(BaseModel):
    key: str
    label: str | None
    fillcolor: str | None


class ClusterResponse(BaseModel):
    key: str
    label: str | None
    nodes: list[NodeResponse]


class EdgeResponse(BaseModel):
    tail: str
    head: str
    name: str
    label: str | None
    color: str | None


class SummaryResponse(BaseModel):
    name: str
    clusters: list[ClusterResponse]
    edges: list[EdgeResponse]
    warnings: list[DiagnosticResponse]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build(body: MetadataDocument) -> BuildResult:
    return build_graph(body.to_tables(), body.to_relationships(), name=body.name)


def _warnings(diagnostics: Diagnostics) -> list[dict[str, Any]]:
    return [
        {"kind": d.kind, "table": d.table, "message": d.message}
        for d in diagnostics.warnings
    ]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/dot", response_model=DotResponse)
def dot_source(body: MetadataDocument, request: Request) -> dict[str, Any]:
    """Return the DOT source of the assembled graph."""
    result = _build(body)
    renderer = request.app.state.renderer
    return {
        "name": result.graph.name,
        "dot": renderer.to_dot(result.graph),
        "warnings": _warnings(result.diagnostics),
    }


@router.post("/svg")
def svg(body: MetadataDocument, request: Request) -> Response:
    """Render the assembled graph to SVG."""
    result = _build(body)
    renderer = request.app.state.renderer
    try:
        content = renderer.pipe(result.graph, format="svg")
    except RenderError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return Response(
        content=content,
        media_type="image/svg+xml",
        headers={"X-Relgraph-Warnings": str(len(result.diagnostics.warnings))},
    )


@router.post("/summary", response_model=SummaryResponse)
def summary(body: MetadataDocument) -> dict[str, Any]:
    """Return the clusters, nodes and edges of the assembled graph."""
    result = _build(body)
    graph = result.graph
    return {
        "name": graph.name,
        "clusters": [
            {
                "key": c.key,
                "label": c.label,
                "nodes": [
                    {"key": n.key, "label": n.label, "fillcolor": n.attrs.get("fillcolor")}
                    for n in c.nodes.values()
                ],
            }
            for c in graph.clusters.values()
        ],
        "edges": [
            {
                "tail": e.tail.key,
                "head": e.head.key,
                "name": e.name,
                "label": e.label,
                "color": e.attrs.get("color"),
            }
            for e in graph.edges.values()
        ],
        "warnings": _warnings(result.diagnostics),
    }
