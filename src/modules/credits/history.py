"""Read-back of the purchase and usage logs."""

from dataclasses import dataclass

from sqlalchemy import func, select

from src.core.base import BaseService
from src.database.models import CreditTransaction, CreditUsage, UsageOutcome
from src.modules.credits.ledger import LedgerStore
from src.modules.credits.purchase import start_of_month


@dataclass(frozen=True)
class CreditStats:
    current_balance: int
    total_purchased: int
    total_used: int
    this_month_usage: int
    efficiency: int


class CreditHistoryService(BaseService):
    async def list_transactions(
        self, owner_id: str, limit: int, offset: int
    ) -> tuple[list[CreditTransaction], int]:
        """Purchases for ``owner_id``, most recent first, with the total count."""
        stmt = (
            select(CreditTransaction)
            .where(CreditTransaction.owner_id == owner_id)
            .order_by(CreditTransaction.created_at.desc(), CreditTransaction.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        transactions = result.scalars().all()

        total_stmt = select(func.count(CreditTransaction.id)).where(
            CreditTransaction.owner_id == owner_id
        )
        total = (await self.db.execute(total_stmt)).scalar() or 0
        return list(transactions), total

    async def list_usage(
        self, owner_id: str, limit: int, offset: int
    ) -> tuple[list[CreditUsage], int]:
        """Usage entries for ``owner_id``, most recent first, with the total count."""
        stmt = (
            select(CreditUsage)
            .where(CreditUsage.owner_id == owner_id)
            .order_by(CreditUsage.created_at.desc(), CreditUsage.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        usage = result.scalars().all()

        total_stmt = select(func.count(CreditUsage.id)).where(
            CreditUsage.owner_id == owner_id
        )
        total = (await self.db.execute(total_stmt)).scalar() or 0
        return list(usage), total

    async def get_credit_stats(self, owner_id: str) -> CreditStats:
        balance = await LedgerStore(self.db).get_balance(owner_id)

        month_stmt = select(func.coalesce(func.sum(CreditUsage.credits), 0)).where(
            CreditUsage.owner_id == owner_id,
            CreditUsage.outcome == UsageOutcome.SUCCESS.value,
            CreditUsage.created_at >= start_of_month(),
        )
        this_month_usage = int((await self.db.execute(month_stmt)).scalar() or 0)

        # Whole percentage, halves rounded up
        efficiency = 0
        if balance.lifetime_purchased > 0:
            purchased = balance.lifetime_purchased
            efficiency = (200 * balance.lifetime_consumed + purchased) // (2 * purchased)

        return CreditStats(
            current_balance=balance.current_credits,
            total_purchased=balance.lifetime_purchased,
            total_used=balance.lifetime_consumed,
            this_month_usage=this_month_usage,
            efficiency=efficiency,
        )
