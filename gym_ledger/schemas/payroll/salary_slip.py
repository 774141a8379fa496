"""
Salary slip schemas.

A salary slip is the printable artifact of a settled payroll: gym and
trainer identity, attendance, earnings, deductions and net pay.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from gym_ledger.schemas.common.base import ZERO, BaseSchema, FrozenSchema
from gym_ledger.schemas.common.enums import IncentiveType, PaymentMode

__all__ = [
    "GymIdentity",
    "TrainerIdentity",
    "DeductionItem",
    "AttendanceBlock",
    "EarningsBlock",
    "DeductionsBlock",
    "PaymentDetails",
    "SalarySlip",
]


class GymIdentity(BaseSchema):
    gym_name: str = Field(..., min_length=1)
    full_address: Optional[str] = None
    mobile_no: Optional[str] = None
    gst_reg_no: Optional[str] = None


class TrainerIdentity(BaseSchema):
    trainer_id: Optional[str] = None
    trainer_name: str = Field(..., min_length=1)
    employee_code: Optional[str] = None
    designation: str = "Trainer"
    mobile_number: Optional[str] = None
    email: Optional[str] = None
    joining_date: Optional[Date] = None


class DeductionItem(BaseSchema):
    name: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=ZERO)


class AttendanceBlock(FrozenSchema):
    total_days_in_month: int
    present_days: int
    absent_days: int
    discount_days: int
    payable_days: int


class EarningsBlock(FrozenSchema):
    basic_salary: Decimal
    calculated_salary: Decimal
    incentive_amount: Decimal
    incentive_type: Optional[IncentiveType] = None
    gross_earnings: Decimal


class DeductionsBlock(FrozenSchema):
    items: List[DeductionItem] = Field(default_factory=list)
    total_deductions: Decimal = ZERO


class PaymentDetails(FrozenSchema):
    payment_mode: PaymentMode
    payment_date: Optional[Date] = None


class SalarySlip(FrozenSchema):
    """Printable salary settlement document."""

    slip_number: str
    salary_month: str
    salary_period: str
    gym: GymIdentity
    trainer: TrainerIdentity
    attendance: AttendanceBlock
    earnings: EarningsBlock
    deductions: DeductionsBlock
    net_payable_amount: Decimal
    net_payable_in_words: str
    payment_details: PaymentDetails
    generated_on: Date
