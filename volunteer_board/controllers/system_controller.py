# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints (health, readiness, metrics).
Pure HTTP layer: no business logic.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from volunteer_board.core.config import Settings
from volunteer_board.core.dependencies import get_registration_repo, get_settings
from volunteer_board.core.logging import get_logger
from volunteer_board.repositories.registration_repository import RegistrationRepository

router = APIRouter(tags=["System"])
logger = get_logger(__name__)


@router.get("/health")
def health_check(cfg: Settings = Depends(get_settings)):
    """Liveness probe."""
    return {
        "status": "ok",
        "service": cfg.SERVICE_NAME,
        "version": cfg.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/ready")
def readiness_check(repo: RegistrationRepository = Depends(get_registration_repo)):
    """Readiness probe: verifies the database answers."""
    try:
        repo.verify_connection()
        return {"status": "ok", "database": "connected"}
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        raise HTTPException(status_code=503, detail="Database unavailable")


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
