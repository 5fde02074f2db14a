"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /diagrams  — build and render relationship diagrams from a metadata document

The rendering backend lives on ``app.state.renderer`` so tests can swap it.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from relgraph.render.graphviz_backend import GraphvizRenderer

from relgraph.api.routers import diagrams as diagrams_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="relgraph API",
        description=(
            "REST interface for relgraph. Turns a metadata document (tables, "
            "lookup columns, relationships) into a clustered relationship "
            "diagram as DOT, SVG or a JSON summary."
        ),
        version="0.1.0",
    )
    app.state.renderer = GraphvizRenderer()

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(diagrams_router.router, prefix="/diagrams", tags=["diagrams"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn relgraph.api.app:app --reload
app = create_app()
