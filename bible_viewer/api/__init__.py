"""API endpoints for the bible viewer."""

from .search import router as search_router
from .lexicon import router as lexicon_router
from .verses import router as verses_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "lexicon_router",
    "verses_router",
    "health_router",
    "metrics_router",
]
