"""
Fee Ledger Service

Derives final fees, total paid, balance and settlement state of a
membership ledger. Every figure is recomputed from the stored inputs;
there is no running balance to drift.
"""

from decimal import Decimal
from typing import Iterable, List, Optional

from gym_ledger.config.settings import Settings
from gym_ledger.core.exceptions import PreconditionError
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.common.enums import MembershipType, PaymentStatus
from gym_ledger.schemas.membership.ledger import LedgerSnapshot, MembershipLedger, Payment
from gym_ledger.schemas.membership.package import Package
from gym_ledger.services.base import BaseService, ErrorCode, ServiceResult
from gym_ledger.services.membership.discount_policy_service import DiscountPolicyService
from gym_ledger.utils.formatters import to_decimal


def _non_negative(field: str, value: Decimal) -> Decimal:
    value = to_decimal(value)
    if value < ZERO:
        raise PreconditionError(field, value, "must not be negative")
    return value


class FeeLedgerService(BaseService):
    """
    Service for membership ledger derivations.

    Features:
    - Two-step discount application, each step floored at zero
    - Balance floored at zero; overpayment is absorbed and reported
    - Settlement only for ledgers with a positive charge
    - Payment status (PAID / PARTIAL / PENDING)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        discount_policy: Optional[DiscountPolicyService] = None,
    ):
        super().__init__(settings)
        self.discount_policy = discount_policy or DiscountPolicyService(self.settings)

    # -------------------------------------------------------------------------
    # Derivations
    # -------------------------------------------------------------------------

    def compute_after_discount(self, package_fees: Decimal, max_discount_amount: Decimal) -> Decimal:
        package_fees = _non_negative("package_fees", package_fees)
        max_discount_amount = _non_negative("max_discount_amount", max_discount_amount)
        return max(ZERO, package_fees - max_discount_amount)

    def compute_final_fees(
        self,
        package_fees: Decimal,
        max_discount_amount: Decimal,
        extra_discount: Decimal = ZERO,
    ) -> Decimal:
        """
        Fee payable after the package discount and the owner's extra discount.

        Both subtractions are clamped independently, so an extra discount
        larger than the discounted fee zeroes the final fee.
        """
        after_discount = self.compute_after_discount(package_fees, max_discount_amount)
        extra_discount = _non_negative("extra_discount", extra_discount)
        return max(ZERO, after_discount - extra_discount)

    @staticmethod
    def compute_total_paid(payments: Iterable[Payment]) -> Decimal:
        return sum((payment.amount for payment in payments), ZERO)

    @staticmethod
    def compute_balance(final_fees: Decimal, total_paid: Decimal) -> Decimal:
        return max(ZERO, to_decimal(final_fees) - to_decimal(total_paid))

    @staticmethod
    def is_settled(final_fees: Decimal, balance: Decimal) -> bool:
        """A zero-charge ledger is inapplicable, never settled."""
        return to_decimal(final_fees) > ZERO and to_decimal(balance) <= ZERO

    @staticmethod
    def payment_status(final_fees: Decimal, total_paid: Decimal) -> PaymentStatus:
        if to_decimal(total_paid) >= to_decimal(final_fees):
            return PaymentStatus.PAID
        if to_decimal(total_paid) > ZERO:
            return PaymentStatus.PARTIAL
        return PaymentStatus.PENDING

    # -------------------------------------------------------------------------
    # Ledger operations
    # -------------------------------------------------------------------------

    def open_ledger(
        self,
        membership_type: MembershipType,
        package: Package,
        extra_discount: Decimal = ZERO,
        payments: Optional[List[Payment]] = None,
    ) -> MembershipLedger:
        """Create a ledger for a member enrolling in a package."""
        return MembershipLedger(
            membership_type=membership_type,
            package_fees=package.fees,
            max_discount_amount=self.discount_policy.resolve_for_package(package),
            extra_discount=extra_discount,
            payments=list(payments or []),
        )

    def snapshot(self, ledger: MembershipLedger) -> LedgerSnapshot:
        """Derive every figure of a ledger from its stored inputs."""
        after_discount = self.compute_after_discount(ledger.package_fees, ledger.max_discount_amount)
        final_fees = self.compute_final_fees(
            ledger.package_fees,
            ledger.max_discount_amount,
            ledger.extra_discount,
        )
        total_paid = self.compute_total_paid(ledger.payments)
        balance = self.compute_balance(final_fees, total_paid)
        excess_paid = max(ZERO, total_paid - final_fees)

        if excess_paid > ZERO:
            self._logger.warning(
                "Ledger overpaid; excess absorbed into zero balance",
                extra={
                    "membership_type": ledger.membership_type.value,
                    "final_fees": str(final_fees),
                    "total_paid": str(total_paid),
                    "excess_paid": str(excess_paid),
                },
            )

        snapshot = LedgerSnapshot(
            membership_type=ledger.membership_type,
            package_fees=ledger.package_fees,
            max_discount_amount=ledger.max_discount_amount,
            extra_discount=ledger.extra_discount,
            after_discount=after_discount,
            final_fees=final_fees,
            total_paid=total_paid,
            balance=balance,
            is_settled=self.is_settled(final_fees, balance),
            payment_status=self.payment_status(final_fees, total_paid),
            payment_count=len(ledger.payments),
            excess_paid=excess_paid,
        )

        self._logger.debug(
            "Ledger derived",
            extra={
                "membership_type": ledger.membership_type.value,
                "final_fees": str(final_fees),
                "balance": str(balance),
            },
        )
        return snapshot

    def with_extra_discount(
        self,
        ledger: MembershipLedger,
        extra_discount: Decimal,
    ) -> ServiceResult[MembershipLedger]:
        """Return a copy of the ledger carrying a new extra discount."""
        if extra_discount is None or to_decimal(extra_discount) < ZERO:
            return self._reject(
                ErrorCode.INVALID_AMOUNT,
                "Extra discount cannot be negative",
                field="extra_discount",
                details={"extra_discount": extra_discount},
            )
        updated = ledger.model_copy(update={"extra_discount": to_decimal(extra_discount)})
        return ServiceResult.success(updated, message="Extra discount applied")
