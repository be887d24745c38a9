"""Idempotent loader for the default package catalog and cost table."""

import asyncio

from sqlalchemy import select

from src.core.base import BaseService
from src.database.models import CreditPackage, DocumentCost
from src.modules.credits.constants import (
    DEFAULT_CREDIT_PACKAGES,
    DEFAULT_DOCUMENT_COSTS,
)


class CatalogSeeder(BaseService):
    async def seed_defaults(self) -> tuple[int, int]:
        """Insert default packages and costs that are missing.

        Packages are matched by name, costs by document type. Existing rows are
        never modified. Returns the number of packages and costs added.
        """
        existing_names = set(
            (await self.db.execute(select(CreditPackage.name))).scalars().all()
        )
        packages_added = 0
        for config in DEFAULT_CREDIT_PACKAGES:
            if config.name in existing_names:
                continue
            self.db.add(
                CreditPackage(
                    name=config.name,
                    description=config.description,
                    credits=config.credits,
                    price=config.price,
                    is_active=True,
                )
            )
            packages_added += 1

        existing_types = set(
            (await self.db.execute(select(DocumentCost.document_type))).scalars().all()
        )
        costs_added = 0
        for config in DEFAULT_DOCUMENT_COSTS:
            if config.document_type in existing_types:
                continue
            self.db.add(
                DocumentCost(
                    document_type=config.document_type,
                    name=config.name,
                    category=config.category.value,
                    required_credits=config.required_credits,
                    is_active=True,
                )
            )
            costs_added += 1

        await self.commit("seed_catalog")
        self.logger.info(
            "catalog_seeded", packages_added=packages_added, costs_added=costs_added
        )
        return packages_added, costs_added


async def _seed() -> None:
    from src.database.connection import AsyncSessionLocal, create_tables

    await create_tables()
    async with AsyncSessionLocal() as session:
        await CatalogSeeder(session).seed_defaults()


def main() -> None:
    """Console entry point: create tables and load the default catalog."""
    from src.utils.logger import setup_logging
    from src.utils.settings.app import AppSettings

    settings = AppSettings()
    setup_logging(settings.is_production, settings.LOG_LEVEL)
    asyncio.run(_seed())
