from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.models import CreditPackage, DocumentCost
from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    service: str
    status: Literal["healthy", "unhealthy", "degraded"]
    connected: bool
    details: dict = field(default_factory=dict)
    error: str | None = None


@dataclass
class OverallHealthStatus:
    """Overall health status with individual service results."""

    status: Literal["healthy", "degraded", "unhealthy"]
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService:
    """Checks the database connection and that a catalog is loaded."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def check_database_health(self) -> HealthCheckResult:
        try:
            result = await self.db.execute(text("SELECT 1 as test"))
            return HealthCheckResult(
                service="database",
                status="healthy",
                connected=True,
                details={"test_query_result": result.scalar()},
            )
        except SQLAlchemyError as e:
            logger.error("database_health_check_failed", error=str(e))
            return HealthCheckResult(
                service="database",
                status="unhealthy",
                connected=False,
                error=str(e),
            )

    async def check_catalog_health(self) -> HealthCheckResult:
        """Degraded when no active packages or document costs are configured."""
        try:
            packages = await self.db.scalar(
                select(func.count(CreditPackage.id)).where(
                    CreditPackage.is_active.is_(True)
                )
            )
            costs = await self.db.scalar(
                select(func.count(DocumentCost.document_type)).where(
                    DocumentCost.is_active.is_(True)
                )
            )
        except SQLAlchemyError as e:
            logger.error("catalog_health_check_failed", error=str(e))
            return HealthCheckResult(
                service="catalog", status="unhealthy", connected=False, error=str(e)
            )

        return HealthCheckResult(
            service="catalog",
            status="healthy" if packages and costs else "degraded",
            connected=True,
            details={"active_packages": packages or 0, "active_costs": costs or 0},
        )

    async def run_all_checks(self) -> OverallHealthStatus:
        # One session cannot run statements concurrently, so checks run in order
        database = await self.check_database_health()
        services = {database.service: database}
        if database.connected:
            catalog = await self.check_catalog_health()
            services[catalog.service] = catalog

        overall: Literal["healthy", "degraded", "unhealthy"] = "healthy"
        for result in services.values():
            if result.status == "unhealthy":
                overall = "unhealthy"
            elif result.status == "degraded" and overall == "healthy":
                overall = "degraded"

        return OverallHealthStatus(
            status=overall,
            services=services,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
