"""Main FastAPI application for the Hebrew Bible Viewer."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    lexicon_router,
    verses_router,
    health_router,
    metrics_router,
)
from .config import Settings, configure_logging, get_settings
from .core.engine import SearchEngine
from .core.errors import NoMatchingEntries, QueryError
from .core.index import VerseIndex
from .core.lexicon import Lexicon
from .models.response import ErrorResponse

settings = get_settings()
configure_logging(settings)
logger = structlog.get_logger()


def load_engine(settings: Settings) -> SearchEngine:
    """
    Build the search engine from the configured data files.

    A bundle is preferred over the corpus/lexicon sources. With no data
    configured, an empty engine is returned and health reports degraded.
    """
    if settings.bundle_file:
        return SearchEngine.from_bundle(settings.bundle_file, max_results=settings.max_search_results)
    if settings.corpus_file and settings.lexicon_file:
        return SearchEngine.from_sources(
            settings.corpus_file,
            settings.lexicon_file,
            book_filter=settings.book_filter,
            max_results=settings.max_search_results
        )
    logger.warning("No bundle or corpus/lexicon files configured, starting with an empty index")
    return SearchEngine(VerseIndex([]), Lexicon(), max_results=settings.max_search_results)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Hebrew Bible Viewer service", version=settings.app_version)

    if getattr(app.state, "engine", None) is None:
        try:
            app.state.engine = load_engine(settings)
        except Exception as e:
            logger.error("Failed to load search engine", error=str(e))
            raise

    engine_stats = app.state.engine.get_stats()
    logger.info(
        "Search engine ready",
        **engine_stats["index_stats"],
        **engine_stats["lexicon_stats"]
    )

    yield

    # Shutdown
    logger.info("Shutting down Hebrew Bible Viewer service")


def create_app(engine: Optional[SearchEngine] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        engine: Preloaded engine; when omitted it is loaded at startup

    Returns:
        The configured application
    """
    app = FastAPI(
        title=settings.app_name,
        description="Extended regular expression search over the Hebrew Bible with Strong's numbers",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.engine = engine

    # Add middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        """Log all HTTP requests."""
        start_time = time.time()

        logger.info(
            "Request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent")
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2)
        )

        return response

    @app.exception_handler(QueryError)
    async def query_exception_handler(request: Request, exc: QueryError) -> JSONResponse:
        """Answer query errors with their user facing reason."""
        logger.info(
            "Query error",
            method=request.method,
            url=str(request.url),
            error=type(exc).__name__,
            reason=exc.reason
        )

        details = None
        if isinstance(exc, NoMatchingEntries):
            details = {"block": exc.block, "suggestions": exc.suggestions}

        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error=type(exc).__name__,
                message=exc.reason,
                details=details
            ).model_dump(mode="json")
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle global exceptions."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                message="An unexpected error occurred",
                details={"exception": str(exc)} if settings.debug else None
            ).model_dump(mode="json")
        )

    # Include API routers
    app.include_router(search_router)
    app.include_router(lexicon_router)
    app.include_router(verses_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    # Root endpoint
    @app.get("/", summary="Root endpoint", description="Get basic information about the API")
    async def root() -> dict:
        """Root endpoint with basic API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": "Extended regular expression search over the Hebrew Bible",
            "docs_url": "/docs",
            "health_url": "/api/v1/health",
            "status": "running"
        }

    # API info endpoint
    @app.get("/api", summary="API information", description="Get detailed API information")
    async def api_info() -> dict:
        """Get detailed API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": "Extended regular expression search over the Hebrew Bible",
            "endpoints": {
                "search": "/api/v1/search?q=query",
                "compile": "/api/v1/compile",
                "lexicon_entry": "/api/v1/lexicon/{tag}",
                "lexicon_search": "/api/v1/lexicon?pattern=pattern",
                "books": "/api/v1/books",
                "verse": "/api/v1/verses/{book}/{chapter}/{verse}",
                "health": "/api/v1/health",
                "metrics": "/api/v1/metrics"
            },
            "query_syntax": {
                "<...>": "Strong's numbers, or lexicon words matching the inner pattern",
                "@": "zero or more of the letters אהוי",
                "#": "any single letter",
                "ש": "either shin or sin",
                "2xy2": "verbs derived from the two-letter root xy"
            },
            "limits": {
                "max_query_length": settings.max_query_length,
                "max_search_results": settings.max_search_results
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bible_viewer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
