"""Database models for the School Credits API."""

from .balances import CreditBalance
from .base import Base
from .document_costs import DocumentCost
from .packages import CreditPackage
from .transactions import (
    CreditTransaction,
    PaymentMethod,
    TransactionStatus,
    TransactionType,
)
from .usage import CreditUsage, UsageOutcome

# Export all models and enums
__all__ = [
    # Base
    "Base",
    # Enums
    "PaymentMethod",
    "TransactionStatus",
    "TransactionType",
    "UsageOutcome",
    # Models
    "CreditBalance",
    "CreditPackage",
    "DocumentCost",
    "CreditTransaction",
    "CreditUsage",
]
