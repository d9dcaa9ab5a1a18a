"""Request-scoped access to the search engine held by the application."""

from fastapi import HTTPException, Request

from ..core.engine import SearchEngine


def get_engine(request: Request) -> SearchEngine:
    """Return the engine loaded at startup."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(
            status_code=503,
            detail="Search engine is not loaded"
        )
    return engine
