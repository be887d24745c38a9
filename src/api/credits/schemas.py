"""Credits API schemas (combined models/requests)."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.api.core.messages import APIResponse, Paginated
from src.database.models import PaymentMethod


class BalanceModel(BaseModel):
    owner_id: str
    current_credits: int = Field(ge=0)
    lifetime_purchased: int = Field(ge=0)
    lifetime_consumed: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True)


class CreditStatsModel(BaseModel):
    current_balance: int
    total_purchased: int
    total_used: int
    this_month_usage: int
    efficiency: int

    model_config = ConfigDict(from_attributes=True)


class CreditPackageModel(BaseModel):
    id: int
    name: str
    description: str | None
    credits: int = Field(gt=0)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    is_free: bool

    model_config = ConfigDict(from_attributes=True)


class CreditTransactionModel(BaseModel):
    id: int
    package_id: int
    package_name: str
    transaction_type: str
    credits: int
    amount: Decimal
    payment_method: str
    payment_number: str | None
    payment_reference: str | None
    status: str
    notes: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CreditUsageModel(BaseModel):
    id: int
    document_type: str
    quantity: int
    unit_cost: int
    credits: int
    outcome: str
    description: str | None
    document_reference: str | None
    details: dict[str, Any] | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PurchaseRequest(BaseModel):
    package_id: int = Field(gt=0)
    payment_method: PaymentMethod = PaymentMethod.CASH
    payment_number: str | None = Field(default=None, max_length=32)
    payment_reference: str | None = Field(default=None, max_length=128)
    notes: str | None = Field(default=None, max_length=500)

    @field_validator("payment_number")
    @classmethod
    def validate_payment_number(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip().replace(" ", "").replace("-", "")
        if v and not (v.lstrip("+").isdigit() and 10 <= len(v.lstrip("+")) <= 15):
            raise ValueError("payment_number must be a 10-15 digit phone number")
        return v or None

    @model_validator(mode="after")
    def strip_reference(self) -> "PurchaseRequest":
        if self.payment_reference is not None:
            self.payment_reference = self.payment_reference.strip() or None
        return self


class PurchaseResultModel(BaseModel):
    transaction: CreditTransactionModel
    balance: BalanceModel


# Response Models
BalanceResponse = APIResponse[BalanceModel]
CreditStatsResponse = APIResponse[CreditStatsModel]
CreditPackagesResponse = APIResponse[list[CreditPackageModel]]
PurchaseResponse = APIResponse[PurchaseResultModel]
TransactionHistoryResponse = APIResponse[Paginated[CreditTransactionModel]]
UsageHistoryResponse = APIResponse[Paginated[CreditUsageModel]]
