"""Document cost and generation schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.api.core.constants import MAX_DOCUMENTS_PER_REQUEST
from src.api.core.messages import APIResponse
from src.api.credits.schemas import BalanceModel, CreditUsageModel
from src.modules.credits.costs import normalize_document_type


class DocumentCostModel(BaseModel):
    document_type: str
    name: str
    category: str
    required_credits: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True)


class GenerateDocumentRequest(BaseModel):
    document_type: str = Field(min_length=1, max_length=64)
    quantity: int = Field(default=1, ge=1, le=MAX_DOCUMENTS_PER_REQUEST)
    description: str | None = Field(default=None, max_length=500)
    document_reference: str | None = Field(default=None, max_length=128)
    details: dict[str, Any] | None = None

    @field_validator("document_type")
    @classmethod
    def normalize_type(cls, v: str) -> str:
        v = normalize_document_type(v)
        if not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(
                "document_type may only contain letters, digits, '_' and '-'"
            )
        return v


class ConsumptionResultModel(BaseModel):
    usage: CreditUsageModel
    balance: BalanceModel
    state: str


DocumentCostsResponse = APIResponse[list[DocumentCostModel]]
DocumentCostResponse = APIResponse[DocumentCostModel]
ConsumptionResponse = APIResponse[ConsumptionResultModel]
