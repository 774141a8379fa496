"""
Membership renewal schemas.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from pydantic import Field

from gym_ledger.schemas.common.base import ZERO, BaseSchema, FrozenSchema
from gym_ledger.schemas.common.enums import PaymentMode, PaymentStatus, RenewalType
from gym_ledger.schemas.membership.package import Package

__all__ = [
    "RenewalClassification",
    "RenewalPeriod",
    "RenewalRequest",
    "RenewalQuote",
]


class RenewalClassification(FrozenSchema):
    """Timing of a renewal relative to the current expiry."""

    renewal_type: RenewalType
    current_expiry: Optional[Date] = None
    today: Date
    days_until_expiry: Optional[int] = Field(
        default=None,
        description="Whole days from today to expiry; negative once expired, None without expiry",
    )


class RenewalPeriod(FrozenSchema):
    """Start and end (both inclusive) of a renewed membership."""

    start_date: Date
    end_date: Date

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1


class RenewalRequest(BaseSchema):
    """Renewal form input. Missing selections are reported by the engine."""

    member_id: Optional[str] = None
    current_expiry: Optional[Date] = None
    package: Optional[Package] = None
    new_start_date: Optional[Date] = None
    new_end_date: Optional[Date] = None
    extra_discount: Decimal = Field(default=ZERO, ge=ZERO)
    paid_amount: Decimal = Field(default=ZERO)
    pay_mode: Optional[PaymentMode] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class RenewalQuote(FrozenSchema):
    """Everything persisted with a renewal record."""

    classification: RenewalClassification
    period: RenewalPeriod
    package_fees: Decimal
    max_discount_amount: Decimal
    extra_discount: Decimal
    after_discount: Decimal
    final_fees: Decimal
    paid_amount: Decimal
    pending_amount: Decimal
    payment_status: PaymentStatus
    pay_mode: PaymentMode
    notes: Optional[str] = None

    @property
    def renewal_type(self) -> RenewalType:
        return self.classification.renewal_type
