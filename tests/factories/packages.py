"""Factory for CreditPackage models."""

from decimal import Decimal

import factory

from src.database.models import CreditPackage
from .base import AsyncSQLAlchemyModelFactory


class CreditPackageFactory(AsyncSQLAlchemyModelFactory[CreditPackage]):
    class Meta:
        model = CreditPackage

    name = factory.Sequence(lambda n: f"Package {n}")
    description = factory.Faker("sentence")
    credits = 50
    price = Decimal("250.00")
    is_active = True
