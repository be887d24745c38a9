from typing import Annotated, AsyncGenerator

from fastapi import Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.api.core.exceptions.base import SchoolCreditsException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedOwnerContext
from src.modules.credits.catalog import PackageCatalog
from src.modules.credits.consumption import ConsumptionService
from src.modules.credits.costs import CostTable
from src.modules.credits.history import CreditHistoryService
from src.modules.credits.ledger import LedgerStore
from src.modules.credits.purchase import PurchaseService
from src.modules.documents.generator import DocumentGenerator


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]


async def get_ledger_store(db: AsyncSessionDep) -> LedgerStore:
    return LedgerStore(db)


async def get_package_catalog(db: AsyncSessionDep) -> PackageCatalog:
    return PackageCatalog(db)


async def get_cost_table(db: AsyncSessionDep) -> CostTable:
    return CostTable(db)


async def get_purchase_service(db: AsyncSessionDep) -> PurchaseService:
    return PurchaseService(db)


async def get_consumption_service(
    request: Request, db: AsyncSessionDep
) -> ConsumptionService:
    """Consumption service wired to the application's document generator."""
    generator: DocumentGenerator | None = getattr(
        request.app.state, "document_generator", None
    )
    return ConsumptionService(db, generator=generator)


async def get_credit_history_service(db: AsyncSessionDep) -> CreditHistoryService:
    return CreditHistoryService(db)


async def get_current_owner(request: Request) -> AuthenticatedOwnerContext:
    """Caller identity set by the auth middleware."""
    owner = getattr(request.state, "owner", None)
    if owner is None:
        raise SchoolCreditsException(
            MessageCode.AUTH_REQUIRED, status.HTTP_401_UNAUTHORIZED
        )
    return owner


class PaginationParams:
    def __init__(
        self,
        limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
        offset: Annotated[int, Query(ge=0)] = 0,
    ):
        self.limit = limit
        self.offset = offset


LedgerStoreDep = Annotated[LedgerStore, Depends(get_ledger_store)]
PackageCatalogDep = Annotated[PackageCatalog, Depends(get_package_catalog)]
CostTableDep = Annotated[CostTable, Depends(get_cost_table)]
PurchaseServiceDep = Annotated[PurchaseService, Depends(get_purchase_service)]
ConsumptionServiceDep = Annotated[
    ConsumptionService, Depends(get_consumption_service)
]
CreditHistoryServiceDep = Annotated[
    CreditHistoryService, Depends(get_credit_history_service)
]
CurrentOwnerDep = Annotated[AuthenticatedOwnerContext, Depends(get_current_owner)]
PaginationDep = Annotated[PaginationParams, Depends()]
