"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, max_length=500, description="Extended search query")
    max_results: Optional[int] = Field(
        None, ge=1, le=100000, description="Maximum number of verses to return"
    )
    verbs_only: bool = Field(
        default=False, description="Restrict every <...> block to verbs"
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject blank queries; inner whitespace is significant and kept."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v


class CompileRequest(BaseModel):
    """Request model for compiling a query without running it."""

    query: str = Field(..., min_length=1, max_length=500, description="Extended search query")
    verbs_only: bool = Field(default=False, description="Restrict every <...> block to verbs")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v
