"""Credit cost lookup per document type."""

from sqlalchemy import select

from src.core.base import BaseService
from src.database.models import DocumentCost
from src.modules.credits.errors import UnknownDocumentTypeError


def normalize_document_type(document_type: str) -> str:
    return document_type.strip().lower()


class CostTable(BaseService):
    async def get_entry(self, document_type: str) -> DocumentCost:
        key = normalize_document_type(document_type)
        entry = await self.db.get(DocumentCost, key)
        if entry is None or not entry.is_active:
            raise UnknownDocumentTypeError(key)
        return entry

    async def get_cost(self, document_type: str) -> int:
        """Current credit cost of one document of ``document_type``."""
        entry = await self.get_entry(document_type)
        return entry.required_credits

    async def list_costs(self, category: str | None = None) -> list[DocumentCost]:
        stmt = select(DocumentCost).where(DocumentCost.is_active.is_(True))
        if category:
            stmt = stmt.where(DocumentCost.category == category)
        stmt = stmt.order_by(
            DocumentCost.required_credits.asc(), DocumentCost.document_type.asc()
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
