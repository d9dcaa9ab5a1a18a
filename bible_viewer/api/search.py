"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..core.engine import SearchEngine
from ..core.errors import QueryError
from ..models.request import CompileRequest, SearchRequest
from ..models.response import CompileResponse, SearchResponse
from .dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search verses",
    description="Search every verse with an extended regular expression"
)
async def search_verses(
    q: str = Query(..., min_length=1, description="Extended search query"),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=100000,
        description="Maximum number of verses to return"
    ),
    verbs_only: bool = Query(
        False,
        description="Restrict every <...> block to verbs"
    ),
    engine: SearchEngine = Depends(get_engine),
) -> SearchResponse:
    """
    Search verses for an extended query.

    Besides regular expression syntax, the query supports <...> blocks
    (Strong's numbers or lexicon words), @ (optional matres lectionis),
    # (any letter) and the 2xy2 root shorthand.
    """
    try:
        _check_query_length(q)
        return engine.search(
            query=q,
            max_results=max_results or settings.max_search_results,
            verbs_only=verbs_only
        )

    except (HTTPException, QueryError):
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search verses using a structured request body"
)
async def search_with_body(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_engine),
) -> SearchResponse:
    """Search verses using a JSON request body."""
    try:
        _check_query_length(request.query)
        return engine.search(
            query=request.query,
            max_results=request.max_results or settings.max_search_results,
            verbs_only=request.verbs_only
        )

    except (HTTPException, QueryError):
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/compile",
    response_model=CompileResponse,
    summary="Compile a query",
    description="Show the regular expression a query compiles to, without searching"
)
async def compile_query(
    request: CompileRequest,
    engine: SearchEngine = Depends(get_engine),
) -> CompileResponse:
    """
    Compile a query without running it.

    Useful to see which Strong's numbers each <...> block resolved to.
    """
    try:
        _check_query_length(request.query)
        return engine.explain(request.query, verbs_only=request.verbs_only)

    except (HTTPException, QueryError):
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Compilation failed: {str(e)}"
        )
