"""Factory for CreditUsage models."""

import factory

from src.database.models import CreditUsage, UsageOutcome
from .base import AsyncSQLAlchemyModelFactory, OwnerIdFactory


class CreditUsageFactory(AsyncSQLAlchemyModelFactory[CreditUsage]):
    class Meta:
        model = CreditUsage

    owner_id = OwnerIdFactory()
    document_type = "id_card"
    quantity = 1
    unit_cost = 2
    credits = factory.LazyAttribute(lambda obj: obj.unit_cost * obj.quantity)
    outcome = UsageOutcome.SUCCESS.value
