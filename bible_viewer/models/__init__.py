"""Data models for the bible viewer API."""

from .response import (
    CompileResponse,
    ErrorResponse,
    HealthResponse,
    LexiconBlockResponse,
    LexiconEntryResponse,
    LexiconSearchResponse,
    MetricsResponse,
    SearchResponse,
    VerseResponse,
    VerseResult,
)
from .request import CompileRequest, SearchRequest

__all__ = [
    "CompileResponse",
    "ErrorResponse",
    "HealthResponse",
    "LexiconBlockResponse",
    "LexiconEntryResponse",
    "LexiconSearchResponse",
    "MetricsResponse",
    "SearchResponse",
    "VerseResponse",
    "VerseResult",
    "CompileRequest",
    "SearchRequest",
]
