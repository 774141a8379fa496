"""
Salary Slip Service

Assembles the printable salary slip of a settled payroll and renders it
to HTML through a Jinja2 template.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from jinja2 import Environment, FileSystemLoader, select_autoescape

from gym_ledger.config.settings import Settings
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.common.enums import PaymentMode
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
from gym_ledger.schemas.payroll.settlement import PayrollSnapshot
from gym_ledger.services.base import BaseService, ErrorCode, ServiceResult
from gym_ledger.utils import date_utils
from gym_ledger.utils.formatters import CurrencyFormatter, amount_in_words

TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
SALARY_SLIP_TEMPLATE = "salary_slip.html"


class SalarySlipService(BaseService):
    """
    Service for salary slip generation.

    Features:
    - Attendance, earnings and itemised deductions blocks
    - Net payable in figures and in words
    - HTML rendering for print
    """

    def __init__(self, settings: Optional[Settings] = None, template_dir: Optional[Path] = None):
        super().__init__(settings)
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
        )
        self.env.filters["inr"] = self._format_currency
        self.env.filters["dmy"] = lambda value: value.strftime("%d/%m/%Y") if value else "-"

    def _format_currency(self, amount: Decimal) -> str:
        return CurrencyFormatter.format_indian_currency(amount, symbol=self.settings.CURRENCY_SYMBOL)

    @staticmethod
    def generate_slip_number(salary_month: str) -> str:
        """``2026-01`` -> ``SAL-202601-1A2B3C``"""
        return f"SAL-{salary_month.replace('-', '')}-{uuid4().hex[:6].upper()}"

    def build_slip(
        self,
        gym: GymIdentity,
        trainer: TrainerIdentity,
        snapshot: PayrollSnapshot,
        pay_mode: PaymentMode,
        payment_date: Optional[date] = None,
        deductions: Optional[List[DeductionItem]] = None,
        slip_number: Optional[str] = None,
        generated_on: Optional[date] = None,
    ) -> ServiceResult[SalarySlip]:
        """
        Assemble a salary slip from a payroll snapshot.

        Money figures are rounded once here; gross earnings come from the
        rounded calculated salary plus the incentive.

        Args:
            gym: Issuing gym identity
            trainer: Paid trainer identity
            snapshot: Payroll snapshot of the settled month
            pay_mode: How the salary was sent
            payment_date: When the salary was sent
            deductions: Itemised deductions, each positive
            slip_number: Explicit slip number (generated when omitted)
            generated_on: Issue date (defaults to today in the gym's timezone)

        Returns:
            ServiceResult containing the SalarySlip
        """
        if not snapshot.salary_month:
            return ServiceResult.missing_field("salary_month", "Salary month")

        figures = snapshot.rounded(self.settings.money_quantum)
        items = list(deductions or [])
        total_deductions = sum((item.amount for item in items), ZERO)
        gross_earnings = figures.calculated_salary + figures.incentive_amount
        net_payable = gross_earnings - total_deductions

        if net_payable < ZERO:
            return self._reject(
                ErrorCode.VALIDATION_ERROR,
                f"Deductions ({total_deductions}) exceed gross earnings ({gross_earnings})",
                field="deductions",
                details={
                    "total_deductions": total_deductions,
                    "gross_earnings": gross_earnings,
                    "max_allowed": gross_earnings,
                },
            )

        slip = SalarySlip(
            slip_number=slip_number or self.generate_slip_number(snapshot.salary_month),
            salary_month=snapshot.salary_month,
            salary_period=date_utils.salary_period_label(snapshot.salary_month),
            gym=gym,
            trainer=trainer,
            attendance=AttendanceBlock(
                total_days_in_month=figures.total_days_in_month,
                present_days=figures.present_days,
                absent_days=figures.absent_days,
                discount_days=figures.discount_days,
                payable_days=figures.payable_days,
            ),
            earnings=EarningsBlock(
                basic_salary=figures.monthly_salary,
                calculated_salary=figures.calculated_salary,
                incentive_amount=figures.incentive_amount,
                incentive_type=figures.incentive_type,
                gross_earnings=gross_earnings,
            ),
            deductions=DeductionsBlock(items=items, total_deductions=total_deductions),
            net_payable_amount=net_payable,
            net_payable_in_words=amount_in_words(net_payable),
            payment_details=PaymentDetails(payment_mode=pay_mode, payment_date=payment_date),
            generated_on=generated_on or date_utils.today(self.settings.TIMEZONE),
        )

        self._logger.info(
            "Salary slip built",
            extra={
                "trainer_id": trainer.trainer_id,
                "salary_month": snapshot.salary_month,
                "slip_number": slip.slip_number,
            },
        )
        return ServiceResult.success(slip)

    def render_html(self, slip: SalarySlip) -> str:
        """Render a salary slip as a standalone printable HTML page."""
        template = self.env.get_template(SALARY_SLIP_TEMPLATE)
        return template.render(slip=slip, footer=self.settings.SALARY_SLIP_FOOTER)
