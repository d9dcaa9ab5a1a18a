"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LexiconEntryResponse(BaseModel):
    """A Strong's number with its lexicon data."""

    tag: int = Field(..., ge=0, description="Strong's number")
    word: str = Field(..., description="Vocalized word")
    searchable: str = Field(..., description="Word without points, accents or final letters")
    category: str = Field(..., description="Word type (Verb, Noun, ...)")
    category_hebrew: str = Field(..., description="Word type in Hebrew")
    biblehub_url: Optional[str] = Field(None, description="Link to the Biblehub entry")


class LexiconBlockResponse(BaseModel):
    """How a <...> block of the query was resolved."""

    block: str = Field(..., description="The block as typed")
    replacement: str = Field(..., description="The pattern that replaced it")
    tags: List[int] = Field(..., description="Matching Strong's numbers")


class VerseResult(BaseModel):
    """A verse that matched the query."""

    book: str = Field(..., description="Hebrew book name")
    chapter: str = Field(..., description="Chapter as a Hebrew numeral")
    verse: str = Field(..., description="Verse as a Hebrew numeral")
    chapter_index: int = Field(..., ge=0, description="0-based chapter index")
    verse_index: int = Field(..., ge=0, description="0-based verse index")
    location: str = Field(..., description="Human readable location")
    words: List[str] = Field(..., description="The verse words, vocalized")
    tags: List[int] = Field(..., description="Strong's number of every word")
    matched_word_indexes: List[int] = Field(..., description="Sorted indexes of the words covered by matches")
    matched_text: List[str] = Field(..., description="Matched substrings of the search string")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    pattern: str = Field(..., description="Compiled regular expression")
    verbs_only: bool = Field(..., description="Whether <...> blocks were restricted to verbs")
    lexicon_blocks: List[LexiconBlockResponse] = Field(..., description="Resolved <...> blocks")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Number of verses returned")
    truncated: bool = Field(..., description="Whether the result cap was reached")
    results: List[VerseResult] = Field(..., description="Matching verses in canonical order")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class CompileResponse(BaseModel):
    """Response for query compilation without searching."""

    query: str = Field(..., description="Original search query")
    pattern: str = Field(..., description="Compiled regular expression")
    verbs_only: bool = Field(..., description="Whether <...> blocks were restricted to verbs")
    lexicon_blocks: List[LexiconBlockResponse] = Field(..., description="Resolved <...> blocks")


class LexiconSearchResponse(BaseModel):
    """Lexicon entries matching a pattern."""

    pattern: str = Field(..., description="The pattern as given")
    total_results: int = Field(..., description="Number of matching entries, before the limit")
    truncated: bool = Field(default=False, description="Whether results were cut at the limit")
    results: List[LexiconEntryResponse] = Field(..., description="Matching entries in tag order")


class VerseResponse(BaseModel):
    """A single verse looked up by location."""

    book: str
    chapter: str
    verse: str
    location: str
    words: List[str]
    tags: List[int]
    text: str


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    failed_queries: int = Field(..., description="Queries rejected with a query error")
    average_response_time_ms: float = Field(..., description="Average response time")
    error_rate: float = Field(..., description="Error rate percentage")
    total_verses: int = Field(..., description="Verses in the index")
    total_lexicon_entries: int = Field(..., description="Entries in the lexicon")
    memory_usage_mb: float = Field(..., description="Memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
