"""
Membership ledger schemas.

This module defines the stored inputs of a membership ledger (fees,
discounts and balance payments) and the snapshots derived from them.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, model_validator

from gym_ledger.schemas.common.base import ZERO, BaseSchema, FrozenSchema
from gym_ledger.schemas.common.enums import MembershipType, PaymentMode, PaymentStatus

__all__ = [
    "Payment",
    "MembershipLedger",
    "LedgerSnapshot",
    "MemberLedgers",
    "DualLedgerView",
]


class Payment(BaseSchema):
    """A single balance payment recorded against one ledger."""

    id: Optional[str] = Field(default=None, description="Payment identifier")
    amount: Decimal = Field(..., gt=Decimal("0"), description="Paid amount")
    payment_date: Date = Field(..., description="Date the payment was received")
    pay_mode: PaymentMode = Field(..., description="Payment mode")
    next_payment_date: Optional[Date] = Field(
        default=None,
        description="Promised date of the next installment",
    )
    notes: Optional[str] = Field(default=None, max_length=500)


class MembershipLedger(BaseSchema):
    """
    Ledger of one membership type for one member.

    Only inputs are stored here; every figure is derived by
    FeeLedgerService on demand.
    """

    membership_type: MembershipType
    package_fees: Decimal = Field(..., ge=ZERO)
    max_discount_amount: Decimal = Field(default=ZERO, ge=ZERO)
    extra_discount: Decimal = Field(default=ZERO, ge=ZERO)
    payments: List[Payment] = Field(default_factory=list)

    def find_payment(self, payment_id: str) -> Optional[Payment]:
        for payment in self.payments:
            if payment.id == payment_id:
                return payment
        return None


class LedgerSnapshot(FrozenSchema):
    """Derived figures of a ledger at a point in time."""

    membership_type: MembershipType
    package_fees: Decimal
    max_discount_amount: Decimal
    extra_discount: Decimal
    after_discount: Decimal
    final_fees: Decimal
    total_paid: Decimal
    balance: Decimal
    is_settled: bool
    payment_status: PaymentStatus
    payment_count: int
    excess_paid: Decimal = Field(
        default=ZERO,
        description="Payments beyond final fees, absorbed into a zero balance",
    )


class MemberLedgers(BaseSchema):
    """
    Authoritative membership details of a member.

    Holds zero, one or two ledgers. ``cached_member_type`` is the label
    stored on the member record; it may be stale and is only used as a
    placeholder while these details are loading.
    """

    member_id: Optional[str] = None
    regular: Optional[MembershipLedger] = None
    pt: Optional[MembershipLedger] = None
    cached_member_type: Optional[str] = None

    @model_validator(mode="after")
    def validate_slots(self) -> "MemberLedgers":
        if self.regular is not None and self.regular.membership_type != MembershipType.REGULAR:
            raise ValueError("regular slot must hold a REGULAR ledger")
        if self.pt is not None and self.pt.membership_type != MembershipType.PT:
            raise ValueError("pt slot must hold a PT ledger")
        return self

    def ledger_for(self, membership_type: MembershipType) -> Optional[MembershipLedger]:
        if membership_type == MembershipType.REGULAR:
            return self.regular
        return self.pt


class DualLedgerView(FrozenSchema):
    """What a payment screen should expose for a member."""

    is_authoritative: bool = Field(
        ...,
        description="False while membership details are still loading",
    )
    is_fees_data_ready: bool
    has_regular_membership: bool
    has_pt_membership: bool
    default_type: Optional[MembershipType] = Field(
        default=None,
        description="Ledger to preselect for a new payment; None until data is ready",
    )
    regular: Optional[LedgerSnapshot] = None
    pt: Optional[LedgerSnapshot] = None
    pending_types: List[MembershipType] = Field(default_factory=list)
