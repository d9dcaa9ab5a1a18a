"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check(request: Request) -> HealthResponse:
    """
    Perform a health check on the search service.

    The service is degraded when no verses or no lexicon entries are
    loaded, and unhealthy when the engine is missing or cannot search.
    """
    try:
        uptime = time.time() - app_start_time
        engine = getattr(request.app.state, "engine", None)

        dependencies = {
            "search_engine": "healthy",
            "verse_index": "healthy",
            "lexicon": "healthy"
        }

        if engine is None:
            dependencies = {name: "unhealthy" for name in dependencies}
        else:
            if len(engine.verse_index) == 0:
                dependencies["verse_index"] = "degraded"
            if len(engine.lexicon) == 0:
                dependencies["lexicon"] = "degraded"
            try:
                engine.compile("א")
            except Exception:
                dependencies["search_engine"] = "unhealthy"

        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check(request: Request) -> JSONResponse:
    """Ready once the engine is loaded."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "timestamp": datetime.utcnow().isoformat()
            }
        )
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "index_stats": engine.verse_index.get_stats()
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
