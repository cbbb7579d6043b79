"""Health Probe — liveness endpoint for container orchestration and harness startup.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Reports the registered operation count so harnesses can detect a stale build
"""

from fastapi import APIRouter, status

from formalisms import __version__
from formalisms.core.operation_registry import OPERATIONS

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "polyglot-formalisms",
        "version": __version__,
        "operations": len(OPERATIONS),
    }
