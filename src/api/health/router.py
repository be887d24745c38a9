"""Health check endpoints for monitoring."""

from fastapi import APIRouter

from src.api.core.dependencies import AsyncSessionDep
from src.modules.health.service import HealthService, OverallHealthStatus
from src.utils.settings.app import AppSettings

# Create separate routers for root and health endpoints
root_router = APIRouter()
router = APIRouter(prefix="/health", tags=["health"])


@root_router.get("/")
async def root():
    return {
        "service": "school-credits-api",
        "version": AppSettings().API_VERSION,
        "docs": "/docs",
    }


@router.get("/")
async def health_check(db: AsyncSessionDep) -> OverallHealthStatus:
    """Database connectivity and catalog presence."""
    return await HealthService(db).run_all_checks()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "school-credits-api"}
