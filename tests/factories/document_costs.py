"""Factory for DocumentCost models."""

import factory

from src.database.models import DocumentCost
from .base import AsyncSQLAlchemyModelFactory


class DocumentCostFactory(AsyncSQLAlchemyModelFactory[DocumentCost]):
    class Meta:
        model = DocumentCost

    document_type = factory.Sequence(lambda n: f"document_{n}")
    name = factory.LazyAttribute(lambda obj: obj.document_type.replace("_", " ").title())
    category = "student_documents"
    required_credits = 1
    is_active = True
