"""Typed failures raised by the credit ledger services."""

from fastapi import status

from src.api.core.exceptions.base import SchoolCreditsException
from src.api.core.messages import MessageCode
from src.database.models import UsageOutcome


class InsufficientFundsError(SchoolCreditsException):
    def __init__(self, owner_id: str, required: int, available: int):
        self.owner_id = owner_id
        self.required = required
        self.available = available
        super().__init__(
            MessageCode.INSUFFICIENT_CREDITS,
            status.HTTP_402_PAYMENT_REQUIRED,
            {
                "required": required,
                "available": available,
                "outcome": UsageOutcome.INSUFFICIENT_FUNDS.value,
            },
        )


class InvalidCreditAmountError(SchoolCreditsException):
    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(
            MessageCode.INVALID_CREDIT_AMOUNT,
            status.HTTP_400_BAD_REQUEST,
            {"amount": amount},
        )


class PackageNotFoundError(SchoolCreditsException):
    """Package is absent or inactive."""

    def __init__(self, package_id: int):
        self.package_id = package_id
        super().__init__(
            MessageCode.PACKAGE_NOT_FOUND,
            status.HTTP_404_NOT_FOUND,
            {"package_id": package_id},
        )


class FreePackageAlreadyClaimedError(SchoolCreditsException):
    def __init__(self, package_id: int, claims_this_month: int):
        super().__init__(
            MessageCode.FREE_PACKAGE_ALREADY_CLAIMED,
            status.HTTP_409_CONFLICT,
            {"package_id": package_id, "claims_this_month": claims_this_month},
        )


class PaymentDetailsRequiredError(SchoolCreditsException):
    def __init__(self, payment_method: str, missing: list[str]):
        super().__init__(
            MessageCode.PAYMENT_DETAILS_REQUIRED,
            status.HTTP_400_BAD_REQUEST,
            {"payment_method": payment_method, "missing_fields": missing},
        )


class UnknownDocumentTypeError(SchoolCreditsException):
    """Document type is not registered in the cost table or is inactive."""

    def __init__(self, document_type: str):
        self.document_type = document_type
        super().__init__(
            MessageCode.UNKNOWN_DOCUMENT_TYPE,
            status.HTTP_404_NOT_FOUND,
            {"document_type": document_type},
        )


class PersistenceError(SchoolCreditsException):
    """A database failure interrupted an operation; nothing was applied."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            MessageCode.PERSISTENCE_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"operation": operation},
        )
