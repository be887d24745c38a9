"""Credits domain router."""

from dataclasses import asdict

from fastapi import APIRouter, status

from src.api.core.dependencies import (
    CreditHistoryServiceDep,
    CurrentOwnerDep,
    LedgerStoreDep,
    PackageCatalogDep,
    PaginationDep,
    PurchaseServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode, Paginated
from .schemas import (
    BalanceModel,
    BalanceResponse,
    CreditPackageModel,
    CreditPackagesResponse,
    CreditStatsModel,
    CreditStatsResponse,
    CreditTransactionModel,
    CreditUsageModel,
    PurchaseRequest,
    PurchaseResponse,
    PurchaseResultModel,
    TransactionHistoryResponse,
    UsageHistoryResponse,
)

router = APIRouter(
    prefix="/credits",
    tags=["credits"],
)


@router.get("/balance", response_model=BalanceResponse)
async def get_balance(
    ledger: LedgerStoreDep,
    current_owner: CurrentOwnerDep,
) -> BalanceResponse:
    """Current balance; a first call opens a zero balance."""
    balance = await ledger.get_balance(current_owner.owner_id)
    return APIResponse.success(data=BalanceModel(**asdict(balance)))


@router.get("/stats", response_model=CreditStatsResponse)
async def get_credit_stats(
    history: CreditHistoryServiceDep,
    current_owner: CurrentOwnerDep,
) -> CreditStatsResponse:
    stats = await history.get_credit_stats(current_owner.owner_id)
    return APIResponse.success(data=CreditStatsModel(**asdict(stats)))


@router.get("/packages", response_model=CreditPackagesResponse)
async def list_credit_packages(catalog: PackageCatalogDep) -> CreditPackagesResponse:
    """Active packages ordered by ascending price. Public."""
    packages = await catalog.list_active_packages()
    return APIResponse.success(
        data=[CreditPackageModel.model_validate(package) for package in packages]
    )


@router.post(
    "/purchase",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def purchase_credits(
    body: PurchaseRequest,
    purchase_service: PurchaseServiceDep,
    current_owner: CurrentOwnerDep,
) -> PurchaseResponse:
    result = await purchase_service.purchase(
        owner_id=current_owner.owner_id,
        package_id=body.package_id,
        payment_method=body.payment_method,
        payment_number=body.payment_number,
        payment_reference=body.payment_reference,
        notes=body.notes,
    )
    return APIResponse.success(
        message_code=MessageCode.CREDITS_PURCHASED,
        data=PurchaseResultModel(
            transaction=CreditTransactionModel.model_validate(result.transaction),
            balance=BalanceModel(**asdict(result.balance)),
        ),
    )


@router.get("/transactions", response_model=TransactionHistoryResponse)
async def get_transaction_history(
    history: CreditHistoryServiceDep,
    current_owner: CurrentOwnerDep,
    pagination: PaginationDep,
) -> TransactionHistoryResponse:
    """Purchase history, most recent first."""
    transactions, total = await history.list_transactions(
        current_owner.owner_id, pagination.limit, pagination.offset
    )
    items = [CreditTransactionModel.model_validate(t) for t in transactions]
    return APIResponse.success(
        data=Paginated[CreditTransactionModel].build(
            items, total, pagination.limit, pagination.offset
        )
    )


@router.get("/usage", response_model=UsageHistoryResponse)
async def get_usage_history(
    history: CreditHistoryServiceDep,
    current_owner: CurrentOwnerDep,
    pagination: PaginationDep,
) -> UsageHistoryResponse:
    """Credit consumption history, most recent first."""
    usage, total = await history.list_usage(
        current_owner.owner_id, pagination.limit, pagination.offset
    )
    items = [CreditUsageModel.model_validate(u) for u in usage]
    return APIResponse.success(
        data=Paginated[CreditUsageModel].build(
            items, total, pagination.limit, pagination.offset
        )
    )
