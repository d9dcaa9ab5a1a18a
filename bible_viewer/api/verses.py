"""Verse lookup API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from ..core.engine import SearchEngine
from ..models.response import VerseResponse
from .dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["verses"])


@router.get(
    "/books",
    response_model=List[str],
    summary="Get all book names",
    description="Get the Hebrew names of all loaded books, in canonical order"
)
async def get_books(engine: SearchEngine = Depends(get_engine)) -> List[str]:
    return engine.book_names()


@router.get(
    "/verses/{book}/{chapter}/{verse}",
    response_model=VerseResponse,
    summary="Get a verse",
    description="Get a verse by book name and 1-based chapter and verse numbers"
)
async def get_verse(
    book: str = Path(..., description="Hebrew book name"),
    chapter: int = Path(..., ge=1, description="1-based chapter number"),
    verse: int = Path(..., ge=1, description="1-based verse number"),
    engine: SearchEngine = Depends(get_engine),
) -> VerseResponse:
    found = engine.get_verse(book, chapter - 1, verse - 1)
    if found is None:
        raise HTTPException(
            status_code=404,
            detail=f"Verse {book} {chapter}:{verse} not found"
        )
    return VerseResponse(
        book=found.book,
        chapter=found.chapter,
        verse=found.verse,
        location=found.location,
        words=list(found.words),
        tags=list(found.tags),
        text=found.text
    )
