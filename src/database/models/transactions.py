"""Append-only purchase records."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utc_now


class PaymentMethod(str, Enum):
    CASH = "cash"
    BKASH = "bkash"
    NAGAD = "nagad"
    ROCKET = "rocket"

    @property
    def is_mobile_banking(self) -> bool:
        return self in (PaymentMethod.BKASH, PaymentMethod.NAGAD, PaymentMethod.ROCKET)


class TransactionType(str, Enum):
    PURCHASE = "purchase"


class TransactionStatus(str, Enum):
    COMPLETED = "completed"


class CreditTransaction(Base):
    __tablename__ = "credit_transactions"
    __table_args__ = (
        Index("ix_credit_transactions_owner_created", "owner_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[str] = mapped_column(String(128), nullable=False)
    package_id: Mapped[int] = mapped_column(
        ForeignKey("credit_packages.id", ondelete="RESTRICT"), nullable=False
    )
    package_name: Mapped[str] = mapped_column(String(255), nullable=False)
    transaction_type: Mapped[TransactionType] = mapped_column(
        String(32), nullable=False, default=TransactionType.PURCHASE
    )
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_method: Mapped[PaymentMethod] = mapped_column(String(32), nullable=False)
    payment_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    payment_reference: Mapped[str | None] = mapped_column(String(128), nullable=True)
    status: Mapped[TransactionStatus] = mapped_column(
        String(32), nullable=False, default=TransactionStatus.COMPLETED
    )
    notes: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

