"""Test factories for School Credits API models."""

from .base import AsyncSQLAlchemyModelFactory
from .balances import CreditBalanceFactory
from .document_costs import DocumentCostFactory
from .packages import CreditPackageFactory
from .transactions import CreditTransactionFactory
from .usage import CreditUsageFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "CreditBalanceFactory",
    "CreditPackageFactory",
    "CreditTransactionFactory",
    "CreditUsageFactory",
    "DocumentCostFactory",
]
