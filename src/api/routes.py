"""
Route definitions: the users page and the health check.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from .dependencies import DbClientDep, SettingsDep, check_database_health
from .page import render_document, render_users_page
from .schemas import ComponentHealth, HealthResponse, HealthStatus

# -----------------------------------------------------------------------------
# Router Definitions
# -----------------------------------------------------------------------------

health_router = APIRouter(tags=["Health"])
page_router = APIRouter(tags=["Pages"])


# -----------------------------------------------------------------------------
# Health Endpoints
# -----------------------------------------------------------------------------


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns the health status of the service and its database.",
)
async def health_check(settings: SettingsDep, client: DbClientDep) -> HealthResponse:
    """Probe the database and report overall status."""
    db_healthy, db_latency = await check_database_health(client)
    database = ComponentHealth(
        name="database",
        status=HealthStatus.HEALTHY if db_healthy else HealthStatus.UNHEALTHY,
        latency_ms=db_latency,
        message=None if db_healthy else "Database connection failed",
    )

    return HealthResponse(
        status=database.status,
        version=settings.app.version,
        environment=settings.environment.value,
        components=[database],
    )


# -----------------------------------------------------------------------------
# Pages
# -----------------------------------------------------------------------------


@page_router.get("/", response_class=HTMLResponse, summary="Users page")
async def users_page(client: DbClientDep) -> HTMLResponse:
    """Render every user as JSON inside a button."""
    fragment = await render_users_page(client)
    return HTMLResponse(render_document(fragment))


__all__ = ["health_router", "page_router"]
