"""Lexicon lookup API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ..core.engine import SearchEngine, entry_to_response
from ..core.errors import QueryError
from ..models.response import LexiconEntryResponse, LexiconSearchResponse
from .dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["lexicon"])


@router.get(
    "/lexicon/{tag}",
    response_model=LexiconEntryResponse,
    summary="Lexicon entry by Strong's number",
    description="Get the vocalized word and word type of a Strong's number"
)
async def get_entry(
    tag: int = Path(..., ge=0, description="Strong's number"),
    engine: SearchEngine = Depends(get_engine),
) -> LexiconEntryResponse:
    entry = engine.get_entry(tag)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"Strong's number {tag} not found in lexicon"
        )
    return entry_to_response(entry)


@router.get(
    "/lexicon",
    response_model=LexiconSearchResponse,
    summary="Find lexicon entries",
    description="Find entries whose Strong's number or unvocalized word matches a pattern"
)
async def find_entries(
    pattern: str = Query(..., min_length=1, description="Pattern, as inside a <...> block"),
    verbs_only: bool = Query(False, description="Keep only verbs"),
    limit: int = Query(100, ge=1, le=10000, description="Maximum number of entries to return"),
    engine: SearchEngine = Depends(get_engine),
) -> LexiconSearchResponse:
    """
    Find lexicon entries by pattern.

    The pattern must match the whole Strong's number or the whole
    unvocalized word, e.g. ``אור``, ``ש.ר`` or ``72\\d\\d``.
    """
    try:
        entries = engine.find_entries(pattern, verbs_only=verbs_only)
        return LexiconSearchResponse(
            pattern=pattern,
            total_results=len(entries),
            truncated=len(entries) > limit,
            results=[entry_to_response(entry) for entry in entries[:limit]]
        )

    except QueryError:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Lexicon lookup failed: {str(e)}"
        )
