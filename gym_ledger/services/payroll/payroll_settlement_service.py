"""
Payroll Settlement Service

Prorates a trainer's monthly salary by attendance. Approved discount
days forgive part of the absence; incentives are added on top.

Salary figures are carried at full precision. Rounding happens once, on
the snapshot, for display or persistence.
"""

from decimal import Decimal
from typing import Optional

from gym_ledger.config.settings import Settings
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.common.enums import IncentiveType
from gym_ledger.schemas.payroll.settlement import PayrollSnapshot, SalarySettlementRequest
from gym_ledger.services.base import BaseService, ErrorCode, ServiceResult
from gym_ledger.utils import date_utils
from gym_ledger.utils.formatters import to_decimal


class PayrollSettlementService(BaseService):
    """
    Service for trainer salary settlement.

    Features:
    - Attendance-based proration over the days of the salary month
    - Discount days capped at absent days
    - Incentive on top of the prorated salary
    - Submission readiness where zero present days is a real answer
    """

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(settings)

    def calculate(
        self,
        monthly_salary: Decimal,
        total_days_in_month: int,
        present_days: int,
        discount_days: int = 0,
        incentive_amount: Decimal = ZERO,
        incentive_type: Optional[IncentiveType] = None,
        salary_month: Optional[str] = None,
    ) -> ServiceResult[PayrollSnapshot]:
        """
        Derive the payroll snapshot for one month.

        Args:
            monthly_salary: Full salary for a month of complete attendance
            total_days_in_month: Calendar days in the salary month
            present_days: Days the trainer attended
            discount_days: Absent days forgiven and paid anyway
            incentive_amount: Extra pay on top of the prorated salary
            incentive_type: What the incentive was earned for
            salary_month: ``YYYY-MM`` label carried on the snapshot

        Returns:
            ServiceResult containing PayrollSnapshot
        """
        if monthly_salary is None or to_decimal(monthly_salary) <= ZERO:
            return self._reject(
                ErrorCode.INVALID_AMOUNT,
                "Monthly salary must be greater than zero",
                field="monthly_salary",
                details={"monthly_salary": monthly_salary},
            )

        if total_days_in_month is None or not 28 <= total_days_in_month <= 31:
            return self._reject(
                ErrorCode.INVALID_ATTENDANCE,
                f"Days in month must be between 28 and 31 (got {total_days_in_month})",
                field="total_days_in_month",
                details={"total_days_in_month": total_days_in_month},
            )

        if present_days is None or present_days < 0 or present_days > total_days_in_month:
            return self._reject(
                ErrorCode.INVALID_ATTENDANCE,
                f"Present days must be between 0 and {total_days_in_month}",
                field="present_days",
                details={"present_days": present_days, "total_days_in_month": total_days_in_month},
            )

        absent_days = total_days_in_month - present_days

        if discount_days is None or discount_days < 0 or discount_days > absent_days:
            return self._reject(
                ErrorCode.DISCOUNT_EXCEEDS_ABSENT,
                f"Discount days cannot exceed absent days ({absent_days})",
                field="discount_days",
                details={"discount_days": discount_days, "max_discount_days": absent_days},
            )

        incentive_amount = to_decimal(incentive_amount if incentive_amount is not None else ZERO)
        if incentive_amount < ZERO:
            return self._reject(
                ErrorCode.INVALID_AMOUNT,
                "Incentive amount cannot be negative",
                field="incentive_amount",
                details={"incentive_amount": incentive_amount},
            )

        monthly_salary = to_decimal(monthly_salary)
        payable_days = present_days + discount_days
        calculated_salary = monthly_salary / Decimal(total_days_in_month) * Decimal(payable_days)

        snapshot = PayrollSnapshot(
            salary_month=salary_month,
            monthly_salary=monthly_salary,
            total_days_in_month=total_days_in_month,
            present_days=present_days,
            absent_days=absent_days,
            discount_days=discount_days,
            payable_days=payable_days,
            calculated_salary=calculated_salary,
            incentive_amount=incentive_amount,
            incentive_type=incentive_type,
            final_payable_amount=calculated_salary + incentive_amount,
        )

        self._logger.debug(
            "Payroll calculated",
            extra={
                "salary_month": salary_month,
                "payable_days": payable_days,
                "final_payable_amount": str(snapshot.final_payable_amount),
            },
        )
        return ServiceResult.success(snapshot)

    def check_submission_ready(
        self,
        request: SalarySettlementRequest,
    ) -> ServiceResult[SalarySettlementRequest]:
        """Report the first required input missing from the settlement form."""
        if not request.trainer_id:
            return ServiceResult.missing_field("trainer_id", "Trainer")
        if not request.salary_month:
            return ServiceResult.missing_field("salary_month", "Salary month")
        if request.monthly_salary is None:
            return ServiceResult.missing_field("monthly_salary", "Monthly salary")
        if request.present_days is None:
            return ServiceResult.missing_field("present_days", "Present days")
        if request.salary_sent_date is None:
            return ServiceResult.missing_field("salary_sent_date", "Salary sent date")
        if request.pay_mode is None:
            return ServiceResult.missing_field("pay_mode", "Payment mode")
        return ServiceResult.success(request)

    def calculate_for_request(
        self,
        request: SalarySettlementRequest,
    ) -> ServiceResult[PayrollSnapshot]:
        """
        Validate a settlement form and derive its payroll snapshot.

        The number of days in the month comes from the salary month itself.
        """
        ready = self.check_submission_ready(request)
        if not ready:
            return ready

        result = self.calculate(
            monthly_salary=request.monthly_salary,
            total_days_in_month=date_utils.days_in_month(request.salary_month),
            present_days=request.present_days,
            discount_days=request.discount_days,
            incentive_amount=request.incentive_amount,
            incentive_type=request.incentive_type,
            salary_month=request.salary_month,
        )
        if result:
            self._logger.info(
                "Salary settled",
                extra={
                    "trainer_id": request.trainer_id,
                    "salary_month": request.salary_month,
                    "final_payable_amount": str(result.data.final_payable_amount),
                },
            )
        return result
