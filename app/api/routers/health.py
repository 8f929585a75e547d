# app/api/routers/health.py

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_correlation_id
from app.config.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health(
    request: Request,
    correlation_id: Annotated[str, Depends(get_correlation_id)],
):
    """Health check with actor and correlation ID from request state."""
    settings = get_settings()
    return {
        "status": "ok",
        "user_id": getattr(request.state, "user_id", None),
        "correlation_id": correlation_id,
        "environment": settings.environment,
        "version": settings.version,
    }
