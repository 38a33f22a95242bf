"""
Health check endpoints.
"""
import time
import logging
from fastapi import APIRouter

from mentorship_admin.db import check_database_health
from mentorship_admin.core.settings import settings

logger = logging.getLogger("mentorship_admin.health")
router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "version": "1.0.0"
    }


@router.get("/detailed")
async def detailed_health_check():
    """Detailed health check with database status."""
    start_time = time.time()

    db_health = await check_database_health()
    health_status = {
        "status": "healthy" if db_health["status"] == "healthy" else "degraded",
        "timestamp": time.time(),
        "environment": settings.environment,
        "services": {"database": db_health},
    }
    if health_status["status"] != "healthy":
        logger.warning(f"Detailed health check degraded: {db_health}")

    health_status["response_time_ms"] = round((time.time() - start_time) * 1000, 2)
    return health_status
