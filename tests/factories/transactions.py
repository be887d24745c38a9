"""Factory for CreditTransaction models."""

from decimal import Decimal

from src.database.models import (
    CreditTransaction,
    PaymentMethod,
    TransactionStatus,
    TransactionType,
)
from .base import AsyncSQLAlchemyModelFactory, OwnerIdFactory


class CreditTransactionFactory(AsyncSQLAlchemyModelFactory[CreditTransaction]):
    """Purchase record. ``package_id`` must reference an existing package."""

    class Meta:
        model = CreditTransaction

    owner_id = OwnerIdFactory()
    package_name = "Starter"
    transaction_type = TransactionType.PURCHASE.value
    credits = 50
    amount = Decimal("250.00")
    payment_method = PaymentMethod.CASH.value
    status = TransactionStatus.COMPLETED.value
