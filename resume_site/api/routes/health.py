"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the resume content does not validate
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from resume_site.api.dependencies import get_content_provider
from resume_site.services.content_provider import ContentProvider

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "resume-site"}


@router.get("/ready")
async def readiness_check(provider: ContentProvider = Depends(get_content_provider)):
    """Readiness probe — includes resume content validity."""
    if provider.safe_load() is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "content_invalid"},
        )
    return {"status": "ready", "checks": {"content": provider.state.value}}
