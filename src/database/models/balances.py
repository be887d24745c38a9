"""Per-owner credit balance."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utc_now


class CreditBalance(Base):
    __tablename__ = "credit_balances"
    __table_args__ = (
        CheckConstraint("current_credits >= 0", name="current_non_negative"),
        CheckConstraint("lifetime_purchased >= 0", name="purchased_non_negative"),
        CheckConstraint("lifetime_consumed >= 0", name="consumed_non_negative"),
        CheckConstraint(
            "current_credits = lifetime_purchased - lifetime_consumed",
            name="current_matches_lifetime",
        ),
    )

    owner_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    current_credits: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    lifetime_purchased: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    lifetime_consumed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now
    )
