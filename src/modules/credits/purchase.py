"""Buying a credit package."""

from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.base import BaseService
from src.database.models import (
    CreditPackage,
    CreditTransaction,
    PaymentMethod,
    TransactionStatus,
    TransactionType,
)
from src.modules.credits.catalog import PackageCatalog
from src.modules.credits.errors import (
    FreePackageAlreadyClaimedError,
    PaymentDetailsRequiredError,
    PersistenceError,
)
from src.modules.credits.ledger import Balance, LedgerStore
from src.utils.settings.credits import CreditSettings


def start_of_month(now: datetime | None = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


@dataclass(frozen=True)
class PurchaseResult:
    transaction: CreditTransaction
    balance: Balance


class PurchaseService(BaseService):
    """Credits the ledger and appends the purchase record in one transaction."""

    def __init__(self, db: AsyncSession, settings: CreditSettings | None = None):
        super().__init__(db)
        self.settings = settings or CreditSettings()
        self.catalog = PackageCatalog(db)
        self.ledger = LedgerStore(db)

    async def purchase(
        self,
        owner_id: str,
        package_id: int,
        payment_method: PaymentMethod | str,
        payment_number: str | None = None,
        payment_reference: str | None = None,
        notes: str | None = None,
    ) -> PurchaseResult:
        payment_method = PaymentMethod(payment_method)
        package = await self.catalog.get_purchasable_package(package_id)

        if not package.is_free and payment_method.is_mobile_banking:
            missing = [
                field
                for field, value in (
                    ("payment_number", payment_number),
                    ("payment_reference", payment_reference),
                )
                if not value
            ]
            if missing:
                raise PaymentDetailsRequiredError(payment_method.value, missing)

        try:
            balance = await self.ledger.credit(owner_id, package.credits)
            if package.is_free:
                # Counted after the credit UPDATE so the owner's row lock orders claims
                await self._check_free_claims(owner_id, package)
            transaction = CreditTransaction(
                owner_id=owner_id,
                package_id=package.id,
                package_name=package.name,
                transaction_type=TransactionType.PURCHASE.value,
                credits=package.credits,
                amount=package.price,
                payment_method=payment_method.value,
                payment_number=payment_number,
                payment_reference=payment_reference,
                status=TransactionStatus.COMPLETED.value,
                notes=notes,
            )
            self.db.add(transaction)
            await self.db.flush()
        except FreePackageAlreadyClaimedError:
            await self.db.rollback()
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(
                "purchase_failed",
                owner_id=owner_id,
                package_id=package_id,
                error=str(e),
            )
            raise PersistenceError("purchase") from e

        await self.commit("purchase")
        self.logger.info(
            "credits_purchased",
            owner_id=owner_id,
            package_id=package.id,
            credits=package.credits,
            amount=str(package.price),
            payment_method=payment_method.value,
            transaction_id=transaction.id,
            current_credits=balance.current_credits,
        )
        return PurchaseResult(transaction=transaction, balance=balance)

    async def _check_free_claims(self, owner_id: str, package: CreditPackage) -> None:
        stmt = select(func.count(CreditTransaction.id)).where(
            CreditTransaction.owner_id == owner_id,
            CreditTransaction.package_id == package.id,
            CreditTransaction.created_at >= start_of_month(),
        )
        claims = (await self.db.execute(stmt)).scalar() or 0
        if claims >= self.settings.FREE_PACKAGE_CLAIMS_PER_MONTH:
            raise FreePackageAlreadyClaimedError(package.id, claims)
