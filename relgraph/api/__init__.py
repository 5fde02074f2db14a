"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from relgraph.api import app

    uvicorn relgraph.api:app --reload
"""

from relgraph.api.app import app

__all__ = ["app"]
