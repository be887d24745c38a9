"""Read-only view of purchasable credit packages."""

from sqlalchemy import select

from src.core.base import BaseService
from src.database.models import CreditPackage
from src.modules.credits.errors import PackageNotFoundError


class PackageCatalog(BaseService):
    async def list_active_packages(self) -> list[CreditPackage]:
        """Active packages, cheapest first."""
        stmt = (
            select(CreditPackage)
            .where(CreditPackage.is_active.is_(True))
            .order_by(CreditPackage.price.asc(), CreditPackage.id.asc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_purchasable_package(self, package_id: int) -> CreditPackage:
        package = await self.db.get(CreditPackage, package_id)
        if package is None or not package.is_active:
            raise PackageNotFoundError(package_id)
        return package
