"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Credit ledger
    CREDITS_PURCHASED = "CREDITS_PURCHASED"
    CREDITS_CONSUMED = "CREDITS_CONSUMED"
    INSUFFICIENT_CREDITS = "INSUFFICIENT_CREDITS"
    INVALID_CREDIT_AMOUNT = "INVALID_CREDIT_AMOUNT"

    # Package catalog
    PACKAGE_NOT_FOUND = "PACKAGE_NOT_FOUND"
    FREE_PACKAGE_ALREADY_CLAIMED = "FREE_PACKAGE_ALREADY_CLAIMED"
    PAYMENT_DETAILS_REQUIRED = "PAYMENT_DETAILS_REQUIRED"

    # Cost table
    UNKNOWN_DOCUMENT_TYPE = "UNKNOWN_DOCUMENT_TYPE"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    # Generic errors
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    # Credit ledger
    MessageCode.CREDITS_PURCHASED: "Credits added to your balance",
    MessageCode.CREDITS_CONSUMED: "Credits deducted, document generation started",
    MessageCode.INSUFFICIENT_CREDITS: "Insufficient credits",
    MessageCode.INVALID_CREDIT_AMOUNT: "Credit amount must be a positive integer",
    # Package catalog
    MessageCode.PACKAGE_NOT_FOUND: "Credit package not found or no longer available",
    MessageCode.FREE_PACKAGE_ALREADY_CLAIMED: "Free package already claimed this month",
    MessageCode.PAYMENT_DETAILS_REQUIRED: "Payment number and transaction reference are required",
    # Cost table
    MessageCode.UNKNOWN_DOCUMENT_TYPE: "Unknown document type",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    # Generic errors
    MessageCode.PERSISTENCE_ERROR: "The operation could not be saved, please try again",
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class PaginationInfo(BaseModel):
    """Common pagination information."""

    total: int
    limit: int
    offset: int
    has_more: bool


class Paginated(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    items: list[T]
    pagination: PaginationInfo

    @classmethod
    def build(
        cls, items: list[T], total: int, limit: int, offset: int
    ) -> "Paginated[T]":
        return cls(
            items=items,
            pagination=PaginationInfo(
                total=total,
                limit=limit,
                offset=offset,
                has_more=offset + len(items) < total,
            ),
        )


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
