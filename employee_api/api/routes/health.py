"""Health & Readiness Probes — liveness and upstream readiness for container orchestration.

Invariants:
    - GET /health/ returns 200 whenever the process serves requests (no upstream call)
    - GET /health/ready calls the upstream once; 503 when it is unreachable or unconfigured
    - Readiness reports probe latency so slow upstreams are visible before they time out
"""

import logging
import time

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from employee_api.infrastructure.observability import SERVICE_NAME

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Ready only when the upstream employee API answers."""
    client = getattr(request.app.state, "upstream_client", None)
    if client is None:
        return _not_ready("upstream_not_configured")

    started = time.perf_counter()
    upstream_ok = await client.health_check()
    latency_ms = round((time.perf_counter() - started) * 1000, 1)
    if not upstream_ok:
        logger.warning(f"Readiness failed: upstream unreachable after {latency_ms}ms")
        return _not_ready("upstream_unavailable", latency_ms)
    return {
        "status": "ready",
        "checks": {"upstream": {"status": "healthy", "latency_ms": latency_ms}},
    }


def _not_ready(reason: str, latency_ms: float | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, "latency_ms": latency_ms},
    )
