"""Metrics and monitoring API endpoints."""

from datetime import datetime

import psutil
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..core.engine import SearchEngine
from ..models.response import MetricsResponse
from .dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["metrics"])


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics and resource usage of the search engine"
)
async def get_metrics(engine: SearchEngine = Depends(get_engine)) -> MetricsResponse:
    """
    Get performance metrics for the search engine.

    Memory is the resident set size of this process.
    """
    try:
        stats = engine.get_stats()
        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            failed_queries=stats["failed_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            error_rate=stats["error_rate"] * 100,
            total_verses=stats["index_stats"]["total_verses"],
            total_lexicon_entries=stats["lexicon_stats"]["total_entries"],
            memory_usage_mb=memory_usage_mb
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.get(
    "/metrics/detailed",
    summary="Get detailed metrics",
    description="Get query, index, lexicon and system metrics"
)
async def get_detailed_metrics(engine: SearchEngine = Depends(get_engine)) -> JSONResponse:
    try:
        stats = engine.get_stats()
        memory_info = psutil.virtual_memory()

        return JSONResponse(
            status_code=200,
            content={
                "query_metrics": {
                    "total_queries": stats["total_queries"],
                    "failed_queries": stats["failed_queries"],
                    "matched_queries": stats["matched_queries"],
                    "no_matches": stats["no_matches"],
                    "truncated_queries": stats["truncated_queries"],
                    "average_response_time_ms": stats["average_execution_time_ms"],
                    "total_execution_time_ms": stats["total_execution_time"]
                },
                "index_metrics": stats["index_stats"],
                "lexicon_metrics": stats["lexicon_stats"],
                "system_metrics": {
                    "process_memory_mb": psutil.Process().memory_info().rss / (1024 * 1024),
                    "memory_usage_percent": memory_info.percent,
                    "available_memory_mb": memory_info.available / (1024 * 1024)
                },
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get detailed metrics: {str(e)}"
        )
