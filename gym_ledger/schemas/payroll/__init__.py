from gym_ledger.schemas.payroll.settlement import PayrollSnapshot, SalarySettlementRequest
from gym_ledger.schemas.payroll.salary_slip import (
    AttendanceBlock,
    DeductionItem,
    DeductionsBlock,
    EarningsBlock,
    GymIdentity,
    PaymentDetails,
    SalarySlip,
    TrainerIdentity,
)

__all__ = [
    "SalarySettlementRequest",
    "PayrollSnapshot",
    "GymIdentity",
    "TrainerIdentity",
    "DeductionItem",
    "AttendanceBlock",
    "EarningsBlock",
    "DeductionsBlock",
    "PaymentDetails",
    "SalarySlip",
]
