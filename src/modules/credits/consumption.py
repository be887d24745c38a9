"""Spending credits on document generation.

A single attempt moves through REQUESTED -> COST_RESOLVED -> DEBITED ->
LOGGED -> FULFILLED, or ends in REJECTED when the type is unknown or the
balance does not cover the cost. The debit and the usage row are committed
together before the generator runs; a generator failure leaves the attempt in
LOGGED and is not refunded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.base import BaseService
from src.database.models import CreditUsage, UsageOutcome
from src.modules.credits.costs import CostTable, normalize_document_type
from src.modules.credits.errors import (
    InsufficientFundsError,
    InvalidCreditAmountError,
    PersistenceError,
    UnknownDocumentTypeError,
)
from src.modules.credits.ledger import Balance, LedgerStore
from src.modules.documents.generator import (
    DocumentGenerator,
    DocumentRequest,
    LoggingDocumentGenerator,
)


class ConsumptionState(str, Enum):
    REQUESTED = "requested"
    COST_RESOLVED = "cost_resolved"
    DEBITED = "debited"
    LOGGED = "logged"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ConsumptionResult:
    usage: CreditUsage
    balance: Balance
    state: ConsumptionState


class ConsumptionService(BaseService):
    def __init__(
        self, db: AsyncSession, generator: DocumentGenerator | None = None
    ):
        super().__init__(db)
        self.generator = generator or LoggingDocumentGenerator()
        self.costs = CostTable(db)
        self.ledger = LedgerStore(db)

    async def consume(
        self,
        owner_id: str,
        document_type: str,
        quantity: int = 1,
        description: str | None = None,
        document_reference: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> ConsumptionResult:
        document_type = normalize_document_type(document_type)
        log = self.logger.bind(owner_id=owner_id, document_type=document_type)
        state = ConsumptionState.REQUESTED

        if quantity < 1:
            raise InvalidCreditAmountError(quantity)

        try:
            unit_cost = await self.costs.get_cost(document_type)
        except UnknownDocumentTypeError:
            log.info(
                "consumption_rejected",
                reason="unknown_document_type",
                state=state.value,
            )
            raise
        state = ConsumptionState.COST_RESOLVED
        credits = unit_cost * quantity

        try:
            if credits > 0:
                balance = await self.ledger.debit(owner_id, credits)
            else:
                balance = await self.ledger.snapshot(owner_id)
            state = ConsumptionState.DEBITED

            usage = CreditUsage(
                owner_id=owner_id,
                document_type=document_type,
                quantity=quantity,
                unit_cost=unit_cost,
                credits=credits,
                outcome=UsageOutcome.SUCCESS.value,
                description=description,
                document_reference=document_reference,
                details=details,
            )
            self.db.add(usage)
            await self.db.flush()
        except InsufficientFundsError as e:
            log.info(
                "consumption_rejected",
                reason=UsageOutcome.INSUFFICIENT_FUNDS.value,
                state=ConsumptionState.REJECTED.value,
                required=e.required,
                available=e.available,
            )
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            log.error("consumption_failed", state=state.value, error=str(e))
            raise PersistenceError("consume") from e

        await self.commit("consume")
        state = ConsumptionState.LOGGED
        log.info(
            "credits_consumed",
            usage_id=usage.id,
            quantity=quantity,
            credits=credits,
            current_credits=balance.current_credits,
        )

        request = DocumentRequest(
            owner_id=owner_id,
            document_type=document_type,
            quantity=quantity,
            usage_id=usage.id,
            document_reference=document_reference,
        )
        try:
            await self.generator.generate(request)
            state = ConsumptionState.FULFILLED
        except Exception as e:
            # Debit stays committed; the usage row is the record of the charge
            log.error(
                "document_generation_failed",
                usage_id=usage.id,
                error=str(e),
                exception_type=type(e).__name__,
            )

        return ConsumptionResult(usage=usage, balance=balance, state=state)
