from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.database.models import Base
from src.utils.logger import get_logger
from src.utils.settings.database import DatabaseSettings

logger = get_logger(__name__)

_database_settings = DatabaseSettings()

async_engine = create_async_engine(
    _database_settings.DATABASE_URL_ASYNC, echo=_database_settings.DATABASE_ECHO
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def create_tables(engine: AsyncEngine = async_engine) -> None:
    """Create all tables known to the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_tables_created", tables=sorted(Base.metadata.tables))
