"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - No readiness probe: there is no external dependency to check
"""

import logging

from fastapi import APIRouter, Depends, status

from roster.api.dependencies import get_record_store
from roster.core.record_store import RecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(store: RecordStore = Depends(get_record_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "roster-api",
        "records": store.count(),
    }
