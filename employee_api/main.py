"""Employee API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Upstream client created on startup and closed on shutdown via lifespan

Run with: uvicorn employee_api.main:app --port 8111
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.routes import employees, health
from employee_api.config import get_settings
from employee_api.infrastructure.observability import setup_logging
from employee_api.infrastructure.upstream_client import UpstreamEmployeeClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.upstream_client = UpstreamEmployeeClient(
        settings.upstream_base_url,
        timeout_seconds=settings.upstream_timeout_seconds,
    )
    logger.info(
        "Employee API started",
        extra={"upstream_url": settings.upstream_base_url},
    )
    yield
    await app.state.upstream_client.aclose()
    logger.info("Employee API shutting down")


app = FastAPI(
    title="Employee API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
