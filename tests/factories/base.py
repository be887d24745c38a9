"""Base factory for async SQLAlchemy models."""

from typing import Any, TypeVar, Generic
from uuid import uuid4

import factory
from sqlalchemy.ext.asyncio import AsyncSession


T = TypeVar("T")


class AsyncSQLAlchemyModelFactory(factory.Factory, Generic[T]):
    """Builds instances with factory_boy and persists them on an AsyncSession."""

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class: type[T], *args: Any, **kwargs: Any) -> T:
        return model_class(**kwargs)

    @classmethod
    async def create_async(cls, session: AsyncSession, **kwargs: Any) -> T:
        """Build, add and flush one instance."""
        instance = cls.build(**kwargs)
        session.add(instance)
        await session.flush()
        return instance

    @classmethod
    async def create_batch_async(
        cls, session: AsyncSession, size: int, **kwargs: Any
    ) -> list[T]:
        instances = cls.build_batch(size, **kwargs)
        session.add_all(instances)
        await session.flush()
        return instances


class OwnerIdFactory(factory.LazyFunction):
    """Supabase-style user id."""

    def __init__(self) -> None:
        super().__init__(lambda: str(uuid4()))
