from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.credits.errors import PersistenceError
from src.utils.logger import get_logger


class BaseService:
    """Base service class with database dependency injection."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    async def commit(self, operation: str) -> None:
        """Commit the unit of work, rolling back and raising PersistenceError on failure."""
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(
                "commit_failed",
                operation=operation,
                error=str(e),
                exception_type=type(e).__name__,
            )
            raise PersistenceError(operation) from e
