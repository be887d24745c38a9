"""Document cost table and credit-gated generation."""

from dataclasses import asdict

from fastapi import APIRouter, status

from src.api.core.dependencies import (
    ConsumptionServiceDep,
    CostTableDep,
    CurrentOwnerDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.api.credits.schemas import BalanceModel, CreditUsageModel
from .schemas import (
    ConsumptionResponse,
    ConsumptionResultModel,
    DocumentCostModel,
    DocumentCostResponse,
    DocumentCostsResponse,
    GenerateDocumentRequest,
)

router = APIRouter(
    prefix="/documents",
    tags=["documents"],
)


@router.get("/costs", response_model=DocumentCostsResponse)
async def list_document_costs(
    cost_table: CostTableDep,
    category: str | None = None,
) -> DocumentCostsResponse:
    """Active document types ordered by credit cost. Public."""
    entries = await cost_table.list_costs(category)
    return APIResponse.success(
        data=[DocumentCostModel.model_validate(entry) for entry in entries]
    )


@router.get("/costs/{document_type}", response_model=DocumentCostResponse)
async def get_document_cost(
    document_type: str,
    cost_table: CostTableDep,
) -> DocumentCostResponse:
    entry = await cost_table.get_entry(document_type)
    return APIResponse.success(data=DocumentCostModel.model_validate(entry))


@router.post(
    "/generate",
    response_model=ConsumptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_document(
    body: GenerateDocumentRequest,
    consumption_service: ConsumptionServiceDep,
    current_owner: CurrentOwnerDep,
) -> ConsumptionResponse:
    """Debit the document's credits, log the usage and hand off generation."""
    result = await consumption_service.consume(
        owner_id=current_owner.owner_id,
        document_type=body.document_type,
        quantity=body.quantity,
        description=body.description,
        document_reference=body.document_reference,
        details=body.details,
    )
    return APIResponse.success(
        message_code=MessageCode.CREDITS_CONSUMED,
        data=ConsumptionResultModel(
            usage=CreditUsageModel.model_validate(result.usage),
            balance=BalanceModel(**asdict(result.balance)),
            state=result.state.value,
        ),
    )
