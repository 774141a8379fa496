"""
Payment Validation Service

Checks a candidate balance payment against the remaining capacity of the
one ledger it is attributed to, and applies accepted payments.

Callers must read the ledger's payments fresh before validating; two
submissions validated against the same stale total can jointly overpay.
"""

from decimal import Decimal
from typing import Optional
from uuid import uuid4

from gym_ledger.config.settings import Settings
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.membership.ledger import MemberLedgers, MembershipLedger, Payment
from gym_ledger.schemas.membership.payment_request import (
    BalancePaymentRequest,
    PaymentValidationOutcome,
)
from gym_ledger.services.base import BaseService, ErrorCode, ServiceResult
from gym_ledger.services.membership.fee_ledger_service import FeeLedgerService
from gym_ledger.utils.formatters import to_decimal


class PaymentValidationService(BaseService):
    """
    Service for balance payment validation.

    Features:
    - Positive-amount check
    - Remaining-cap check reporting the exact maximum allowed
    - Edits exclude the edited payment's old amount from the paid total
    - Submission readiness for the balance payment form
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fee_ledger: Optional[FeeLedgerService] = None,
    ):
        super().__init__(settings)
        self.fee_ledger = fee_ledger or FeeLedgerService(self.settings)

    def validate_amount(
        self,
        amount: Optional[Decimal],
        final_fees: Decimal,
        total_paid: Decimal,
        edited_amount: Optional[Decimal] = None,
    ) -> ServiceResult[PaymentValidationOutcome]:
        """
        Check a candidate amount against a ledger's remaining capacity.

        Args:
            amount: Candidate payment amount
            final_fees: Final fees of the target ledger
            total_paid: Sum of all recorded payments of the target ledger
            edited_amount: Old amount of the payment being edited, if any

        Returns:
            ServiceResult with the validation outcome; EXCEEDS_BALANCE
            failures carry ``max_allowed`` in their details
        """
        if amount is None or to_decimal(amount) <= ZERO:
            return self._reject(
                ErrorCode.INVALID_AMOUNT,
                "Please enter a valid paid fees amount",
                field="amount",
                details={"amount": amount},
            )

        amount = to_decimal(amount)
        final_fees = to_decimal(final_fees)
        paid_excluding_edited = to_decimal(total_paid) - to_decimal(edited_amount or ZERO)
        projected_total = paid_excluding_edited + amount
        remaining = final_fees - paid_excluding_edited

        if projected_total > final_fees:
            max_allowed = max(ZERO, remaining)
            return self._reject(
                ErrorCode.EXCEEDS_BALANCE,
                f"Payment amount ({amount}) exceeds remaining balance ({max_allowed})",
                field="amount",
                details={
                    "amount": amount,
                    "max_allowed": max_allowed,
                    "final_fees": final_fees,
                    "total_paid_excluding_edited": paid_excluding_edited,
                    "projected_total": projected_total,
                },
            )

        outcome = PaymentValidationOutcome(
            accepted=True,
            amount=amount,
            final_fees=final_fees,
            total_paid_excluding_edited=paid_excluding_edited,
            projected_total=projected_total,
            max_allowed=remaining,
        )
        self._logger.info(
            "Payment accepted",
            extra={"amount": str(amount), "remaining_after": str(final_fees - projected_total)},
        )
        return ServiceResult.success(outcome, message="Payment is within the remaining balance")

    def validate_for_ledger(
        self,
        ledger: MembershipLedger,
        amount: Optional[Decimal],
        editing_payment_id: Optional[str] = None,
    ) -> ServiceResult[PaymentValidationOutcome]:
        """Validate against a ledger, re-deriving its final fees and paid total."""
        edited_amount = None
        if editing_payment_id is not None:
            edited = ledger.find_payment(editing_payment_id)
            if edited is None:
                return self._reject(
                    ErrorCode.INVALID_REFERENCE,
                    f"Payment not found: {editing_payment_id}",
                    field="editing_payment_id",
                    details={"payment_id": editing_payment_id},
                )
            edited_amount = edited.amount

        snapshot = self.fee_ledger.snapshot(ledger)
        return self.validate_amount(amount, snapshot.final_fees, snapshot.total_paid, edited_amount)

    def check_submission_ready(self, request: BalancePaymentRequest) -> ServiceResult[BalancePaymentRequest]:
        """Report the first required selection missing from the form."""
        if request.membership_type is None:
            return ServiceResult.missing_field("membership_type", "Membership type")
        if request.amount is None or request.amount <= ZERO:
            return self._reject(
                ErrorCode.INVALID_AMOUNT,
                "Please enter a valid paid fees amount",
                field="amount",
                details={"amount": request.amount},
            )
        if request.payment_date is None:
            return ServiceResult.missing_field("payment_date", "Payment date")
        if request.pay_mode is None:
            return ServiceResult.missing_field("pay_mode", "Payment mode")
        return ServiceResult.success(request)

    def validate_request(
        self,
        member: MemberLedgers,
        request: BalancePaymentRequest,
    ) -> ServiceResult[PaymentValidationOutcome]:
        """
        Validate a form submission against the one ledger it targets.

        The Regular and PT balances are never pooled into a single cap.
        """
        ready = self.check_submission_ready(request)
        if not ready:
            return ready

        ledger = member.ledger_for(request.membership_type)
        if ledger is None:
            return self._reject(
                ErrorCode.INVALID_REFERENCE,
                f"Member has no {request.membership_type.value} membership",
                field="membership_type",
                details={"member_id": member.member_id, "membership_type": request.membership_type.value},
            )
        return self.validate_for_ledger(ledger, request.amount, request.editing_payment_id)

    def record_payment(
        self,
        ledger: MembershipLedger,
        request: BalancePaymentRequest,
    ) -> ServiceResult[MembershipLedger]:
        """
        Validate a payment and return the ledger with it applied.

        New payments are appended; an edit replaces the amount, date, mode
        and notes of the existing entry in place.
        """
        if request.membership_type is not None and request.membership_type != ledger.membership_type:
            return self._reject(
                ErrorCode.INVALID_REFERENCE,
                "Payment membership type does not match the ledger",
                field="membership_type",
                details={
                    "ledger_type": ledger.membership_type.value,
                    "request_type": request.membership_type.value,
                },
            )

        ready = self.check_submission_ready(
            request.model_copy(update={"membership_type": ledger.membership_type})
        )
        if not ready:
            return ready

        validation = self.validate_for_ledger(ledger, request.amount, request.editing_payment_id)
        if not validation:
            return validation

        fields = {
            "amount": to_decimal(request.amount),
            "payment_date": request.payment_date,
            "pay_mode": request.pay_mode,
            "next_payment_date": request.next_payment_date,
            "notes": request.notes,
        }

        if request.editing_payment_id is None:
            payments = ledger.payments + [Payment(id=str(uuid4()), **fields)]
            message = "Payment recorded"
        else:
            payments = [
                payment.model_copy(update=fields) if payment.id == request.editing_payment_id else payment
                for payment in ledger.payments
            ]
            message = "Payment updated"

        return ServiceResult.success(
            ledger.model_copy(update={"payments": payments}),
            message=message,
            metadata={"max_allowed_before": validation.data.max_allowed},
        )
