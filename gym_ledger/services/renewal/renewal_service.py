"""
Renewal Service

Classifies membership renewals (EARLY / STANDARD / LATE), proposes the
renewed period from a package's duration, and prices a renewal.

The classification is informational metadata on the renewal record; it
never decides whether a renewal is allowed.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from gym_ledger.config.settings import Settings
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.common.enums import RenewalType
from gym_ledger.schemas.membership.package import Package
from gym_ledger.schemas.renewal.renewal import (
    RenewalClassification,
    RenewalPeriod,
    RenewalQuote,
    RenewalRequest,
)
from gym_ledger.services.base import BaseService, ErrorCode, ServiceResult
from gym_ledger.services.membership.fee_ledger_service import FeeLedgerService
from gym_ledger.utils import date_utils


class RenewalService(BaseService):
    """
    Service for membership renewals.

    Features:
    - Renewal timing classification against the current expiry
    - Default renewal period (day-based or month-based packages)
    - Renewal pricing with package and extra discounts
    - Initial payment capped at the final fees
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fee_ledger: Optional[FeeLedgerService] = None,
    ):
        super().__init__(settings)
        self.fee_ledger = fee_ledger or FeeLedgerService(self.settings)

    def _today(self, today: Optional[date]) -> date:
        return today or date_utils.today(self.settings.TIMEZONE)

    def classify(
        self,
        current_expiry: Optional[date],
        today: Optional[date] = None,
    ) -> RenewalClassification:
        """
        Classify a renewal from the gap between today and the current expiry.

        A missing expiry counts as already expired.

        Args:
            current_expiry: Last day of the current membership, if any
            today: Reference date (defaults to today in the gym's timezone)

        Returns:
            RenewalClassification
        """
        today = self._today(today)

        if current_expiry is None:
            days_until_expiry = None
            renewal_type = RenewalType.LATE
        else:
            days_until_expiry = date_utils.days_between(today, current_expiry)
            if days_until_expiry < 0:
                renewal_type = RenewalType.LATE
            elif days_until_expiry > self.settings.EARLY_RENEWAL_THRESHOLD_DAYS:
                renewal_type = RenewalType.EARLY
            else:
                renewal_type = RenewalType.STANDARD

        self._logger.debug(
            "Renewal classified",
            extra={
                "current_expiry": str(current_expiry) if current_expiry else None,
                "days_until_expiry": days_until_expiry,
                "renewal_type": renewal_type.value,
            },
        )
        return RenewalClassification(
            renewal_type=renewal_type,
            current_expiry=current_expiry,
            today=today,
            days_until_expiry=days_until_expiry,
        )

    def default_period(
        self,
        package: Package,
        current_expiry: Optional[date] = None,
        today: Optional[date] = None,
        start_date: Optional[date] = None,
    ) -> RenewalPeriod:
        """
        Propose the renewed membership period.

        The new period starts the day after the current expiry (or today
        when there is none) and covers the package duration inclusively.
        """
        if start_date is None:
            start_date = (
                date_utils.add_days(current_expiry, 1)
                if current_expiry is not None
                else self._today(today)
            )

        if package.duration_in_days is not None:
            end_date = date_utils.add_days(start_date, package.duration_in_days - 1)
        else:
            end_date = date_utils.add_days(
                date_utils.add_months(start_date, package.duration_in_months), -1
            )

        return RenewalPeriod(start_date=start_date, end_date=end_date)

    def quote(
        self,
        request: RenewalRequest,
        today: Optional[date] = None,
    ) -> ServiceResult[RenewalQuote]:
        """
        Price a renewal submission.

        Args:
            request: Renewal form input
            today: Reference date for the classification

        Returns:
            ServiceResult containing the renewal quote or the first rule violated
        """
        if request.package is None:
            return ServiceResult.missing_field("package", "Package")
        if request.new_start_date is None:
            return ServiceResult.missing_field("new_start_date", "Start date")
        if request.new_end_date is None:
            return ServiceResult.missing_field("new_end_date", "End date")
        if request.pay_mode is None:
            return ServiceResult.missing_field("pay_mode", "Payment mode")

        if request.new_end_date < request.new_start_date:
            return self._reject(
                ErrorCode.VALIDATION_ERROR,
                "End date must not be before start date",
                field="new_end_date",
                details={
                    "new_start_date": request.new_start_date,
                    "new_end_date": request.new_end_date,
                },
            )

        paid_amount = Decimal(request.paid_amount)
        if paid_amount < ZERO:
            return self._reject(
                ErrorCode.INVALID_AMOUNT,
                "Paid amount cannot be negative",
                field="paid_amount",
                details={"amount": paid_amount},
            )

        package = request.package
        max_discount_amount = self.fee_ledger.discount_policy.resolve_for_package(package)
        after_discount = self.fee_ledger.compute_after_discount(package.fees, max_discount_amount)
        final_fees = self.fee_ledger.compute_final_fees(
            package.fees, max_discount_amount, request.extra_discount
        )

        if paid_amount > final_fees:
            return self._reject(
                ErrorCode.EXCEEDS_BALANCE,
                f"Paid amount ({paid_amount}) exceeds final fees ({final_fees})",
                field="paid_amount",
                details={"amount": paid_amount, "max_allowed": final_fees, "final_fees": final_fees},
            )

        classification = self.classify(request.current_expiry, today)
        renewal = RenewalQuote(
            classification=classification,
            period=RenewalPeriod(start_date=request.new_start_date, end_date=request.new_end_date),
            package_fees=package.fees,
            max_discount_amount=max_discount_amount,
            extra_discount=request.extra_discount,
            after_discount=after_discount,
            final_fees=final_fees,
            paid_amount=paid_amount,
            pending_amount=self.fee_ledger.compute_balance(final_fees, paid_amount),
            payment_status=self.fee_ledger.payment_status(final_fees, paid_amount),
            pay_mode=request.pay_mode,
            notes=request.notes,
        )

        self._logger.info(
            "Renewal quoted",
            extra={
                "member_id": request.member_id,
                "renewal_type": classification.renewal_type.value,
                "final_fees": str(final_fees),
            },
        )
        return ServiceResult.success(renewal, message="Renewal quoted successfully")
