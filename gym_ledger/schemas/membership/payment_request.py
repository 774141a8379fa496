"""
Balance payment request and validation outcome schemas.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from pydantic import Field

from gym_ledger.schemas.common.base import BaseSchema, FrozenSchema
from gym_ledger.schemas.common.enums import MembershipType, PaymentMode

__all__ = [
    "BalancePaymentRequest",
    "PaymentValidationOutcome",
]


class BalancePaymentRequest(BaseSchema):
    """
    A payment as entered on the balance payment form.

    Fields are optional so that missing selections are reported by the
    engine as MISSING_REQUIRED_FIELD instead of failing parsing.
    """

    membership_type: Optional[MembershipType] = None
    amount: Optional[Decimal] = None
    payment_date: Optional[Date] = None
    pay_mode: Optional[PaymentMode] = None
    next_payment_date: Optional[Date] = None
    notes: Optional[str] = Field(default=None, max_length=500)
    editing_payment_id: Optional[str] = Field(
        default=None,
        description="Set when an existing payment is being edited",
    )


class PaymentValidationOutcome(FrozenSchema):
    """Outcome of checking a candidate payment against a ledger cap."""

    accepted: bool
    amount: Decimal
    final_fees: Decimal
    total_paid_excluding_edited: Decimal
    projected_total: Decimal
    max_allowed: Decimal = Field(
        ...,
        description="Largest amount the ledger can still take",
    )
    reason: Optional[str] = None
