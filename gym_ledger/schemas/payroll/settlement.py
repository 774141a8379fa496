"""
Trainer salary settlement schemas.

This module defines the monthly attendance input of a trainer settlement
and the payroll snapshot derived from it.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import Field

from gym_ledger.schemas.common.base import ZERO, BaseSchema, FrozenSchema
from gym_ledger.schemas.common.enums import IncentiveType, PaymentMode

__all__ = [
    "SalarySettlementRequest",
    "PayrollSnapshot",
]


class SalarySettlementRequest(BaseSchema):
    """
    Salary settlement form input for one trainer and one salary month.

    ``present_days`` of 0 is a legal input (unpaid month); only None
    means the field was not supplied.
    """

    trainer_id: Optional[str] = None
    monthly_salary: Optional[Decimal] = None
    salary_month: Optional[str] = Field(
        default=None,
        pattern=r"^\d{4}-(0[1-9]|1[0-2])$",
        description="Salary month as YYYY-MM",
    )
    present_days: Optional[int] = None
    discount_days: int = 0
    incentive_amount: Decimal = ZERO
    incentive_type: Optional[IncentiveType] = None
    pay_mode: Optional[PaymentMode] = None
    salary_sent_date: Optional[Date] = None
    remarks: Optional[str] = Field(default=None, max_length=1000)


class PayrollSnapshot(FrozenSchema):
    """
    Derived payroll figures.

    Money values are carried at full precision; use ``rounded()`` for
    display or persistence.
    """

    salary_month: Optional[str] = None
    monthly_salary: Decimal
    total_days_in_month: int
    present_days: int
    absent_days: int
    discount_days: int
    payable_days: int
    calculated_salary: Decimal
    incentive_amount: Decimal
    incentive_type: Optional[IncentiveType] = None
    final_payable_amount: Decimal

    def rounded(self, quantum: Decimal = Decimal("0.01")) -> "PayrollSnapshot":
        """Return a copy with money figures quantized for persistence."""
        return self.model_copy(
            update={
                "monthly_salary": self.monthly_salary.quantize(quantum, rounding=ROUND_HALF_UP),
                "calculated_salary": self.calculated_salary.quantize(quantum, rounding=ROUND_HALF_UP),
                "incentive_amount": self.incentive_amount.quantize(quantum, rounding=ROUND_HALF_UP),
                "final_payable_amount": self.final_payable_amount.quantize(quantum, rounding=ROUND_HALF_UP),
            }
        )
