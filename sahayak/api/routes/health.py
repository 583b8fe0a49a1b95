"""
Health Check Endpoints.
System health and readiness checks.
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Request

from sahayak.config import get_settings
from sahayak.db.database import is_initialized

router = APIRouter()
settings = get_settings()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "OK",
        "timestamp": _now(),
        "version": settings.APP_VERSION
    }


@router.get("/health/ready")
async def readiness_check(request: Request):
    """
    Readiness check - verifies the dependencies are initialized.
    """
    llm_service = getattr(request.app.state, "llm_service", None)

    checks = {
        "database": is_initialized(),
        "llm_service": bool(llm_service and llm_service.is_initialized),
        "detector": hasattr(request.app.state, "detector")
    }

    return {
        "status": "ready" if all(checks.values()) else "not_ready",
        "checks": checks,
        "timestamp": _now()
    }
