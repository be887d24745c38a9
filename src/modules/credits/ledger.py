"""Persisted per-owner credit balance.

Every mutation is a single conditional UPDATE so concurrent requests for the
same owner cannot overdraw the account. Nothing here commits: the calling
operation owns the transaction and pairs each credit or debit with its log row.
"""

from dataclasses import dataclass

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from src.core.base import BaseService
from src.database.models import CreditBalance
from src.database.models.base import utc_now
from src.modules.credits.errors import InsufficientFundsError, InvalidCreditAmountError


@dataclass(frozen=True)
class Balance:
    owner_id: str
    current_credits: int
    lifetime_purchased: int
    lifetime_consumed: int

    @classmethod
    def from_row(cls, row: CreditBalance) -> "Balance":
        return cls(
            owner_id=row.owner_id,
            current_credits=row.current_credits,
            lifetime_purchased=row.lifetime_purchased,
            lifetime_consumed=row.lifetime_consumed,
        )


class LedgerStore(BaseService):
    """Read and mutate account balances."""

    async def get_balance(self, owner_id: str) -> Balance:
        """Return the owner's balance, opening a zero account on first use."""
        if await self._ensure_account(owner_id):
            await self.commit("open_account")
            self.logger.info("credit_account_opened", owner_id=owner_id)
        return await self._read(owner_id)

    async def snapshot(self, owner_id: str) -> Balance:
        """Balance as seen inside the current transaction, without committing."""
        await self._ensure_account(owner_id)
        return await self._read(owner_id)

    async def credit(self, owner_id: str, amount: int) -> Balance:
        _require_positive(amount)
        await self._ensure_account(owner_id)
        stmt = (
            update(CreditBalance)
            .where(CreditBalance.owner_id == owner_id)
            .values(
                current_credits=CreditBalance.current_credits + amount,
                lifetime_purchased=CreditBalance.lifetime_purchased + amount,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        await self.db.execute(stmt)
        balance = await self._read(owner_id)
        self.logger.debug(
            "ledger_credited",
            owner_id=owner_id,
            amount=amount,
            current_credits=balance.current_credits,
        )
        return balance

    async def debit(self, owner_id: str, amount: int) -> Balance:
        """Subtract ``amount`` if the account covers it.

        Raises InsufficientFundsError and leaves the row untouched otherwise.
        """
        _require_positive(amount)
        await self._ensure_account(owner_id)
        stmt = (
            update(CreditBalance)
            .where(
                CreditBalance.owner_id == owner_id,
                CreditBalance.current_credits >= amount,
            )
            .values(
                current_credits=CreditBalance.current_credits - amount,
                lifetime_consumed=CreditBalance.lifetime_consumed + amount,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount != 1:
            current = await self._read(owner_id)
            raise InsufficientFundsError(owner_id, amount, current.current_credits)

        balance = await self._read(owner_id)
        self.logger.debug(
            "ledger_debited",
            owner_id=owner_id,
            amount=amount,
            current_credits=balance.current_credits,
        )
        return balance

    async def _ensure_account(self, owner_id: str) -> bool:
        """Insert a zero balance row if none exists. Returns True when inserted."""
        values = {
            "owner_id": owner_id,
            "current_credits": 0,
            "lifetime_purchased": 0,
            "lifetime_consumed": 0,
        }
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            stmt = postgresql_insert(CreditBalance.__table__).values(**values)
        elif dialect == "sqlite":
            stmt = sqlite_insert(CreditBalance.__table__).values(**values)
        else:
            existing = await self.db.scalar(
                select(CreditBalance.owner_id).where(
                    CreditBalance.owner_id == owner_id
                )
            )
            if existing is not None:
                return False
            await self.db.execute(insert(CreditBalance.__table__).values(**values))
            return True

        stmt = stmt.on_conflict_do_nothing(index_elements=["owner_id"])
        result = await self.db.execute(stmt)
        return result.rowcount == 1

    async def _read(self, owner_id: str) -> Balance:
        stmt = (
            select(CreditBalance)
            .where(CreditBalance.owner_id == owner_id)
            .execution_options(populate_existing=True)
        )
        row = (await self.db.execute(stmt)).scalar_one()
        return Balance.from_row(row)


def _require_positive(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidCreditAmountError(amount)
