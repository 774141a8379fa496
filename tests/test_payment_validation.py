from datetime import date
from decimal import Decimal

import pytest

from gym_ledger.schemas.common.enums import MembershipType, PaymentMode
from gym_ledger.schemas.membership.ledger import MemberLedgers
from gym_ledger.schemas.membership.payment_request import BalancePaymentRequest
from gym_ledger.services.base import ErrorCode
from gym_ledger.services.common import to_user_message, to_user_title


def request(**overrides):
    fields = {
        "membership_type": MembershipType.REGULAR,
        "amount": Decimal("1000"),
        "payment_date": date(2026, 1, 20),
        "pay_mode": PaymentMode.UPI,
    }
    fields.update(overrides)
    return BalancePaymentRequest(**fields)


class TestAmountValidation:
    def test_new_payment_over_remaining_balance_is_rejected(self, payment_validator):
        result = payment_validator.validate_amount(Decimal("4000"), Decimal("8500"), Decimal("5000"))

        assert not result
        assert result.code == ErrorCode.EXCEEDS_BALANCE
        assert result.detail("max_allowed") == Decimal("3500")

    def test_edit_excludes_its_own_old_amount(self, payment_validator):
        result = payment_validator.validate_amount(
            Decimal("6000"), Decimal("8500"), Decimal("5000"), edited_amount=Decimal("5000")
        )

        assert result
        assert result.data.total_paid_excluding_edited == Decimal("0")
        assert result.data.projected_total == Decimal("6000")

    @pytest.mark.parametrize("amount", [None, Decimal("0"), Decimal("-1")])
    def test_non_positive_amount_is_invalid(self, payment_validator, amount):
        result = payment_validator.validate_amount(amount, Decimal("8500"), Decimal("0"))
        assert result.code == ErrorCode.INVALID_AMOUNT

    @pytest.mark.parametrize("amount", ["1", "3499.99", "3500", "3500.01", "8500"])
    def test_accepts_iff_within_remaining(self, payment_validator, amount):
        result = payment_validator.validate_amount(Decimal(amount), Decimal("8500"), Decimal("5000"))

        assert result.is_success is (Decimal(amount) <= Decimal("3500"))
        if not result:
            assert result.detail("max_allowed") == Decimal("3500")

    def test_overpaid_ledger_reports_zero_allowance(self, payment_validator):
        result = payment_validator.validate_amount(Decimal("1"), Decimal("8500"), Decimal("9000"))
        assert result.detail("max_allowed") == Decimal("0")

    def test_rejection_message_quotes_exact_ceiling(self, payment_validator):
        result = payment_validator.validate_amount(Decimal("4000"), Decimal("8500"), Decimal("5000"))

        assert to_user_title(result) == "Amount Exceeds Balance"
        assert to_user_message(result) == (
            "Payment amount (₹4,000) exceeds remaining balance (₹3,500). Maximum allowed: ₹3,500"
        )


class TestLedgerValidation:
    def test_validates_against_ledger_payments(self, payment_validator, make_ledger):
        ledger = make_ledger(payments=["5000"])
        result = payment_validator.validate_for_ledger(ledger, Decimal("4000"))
        assert result.detail("max_allowed") == Decimal("3500")

    def test_edit_by_payment_id(self, payment_validator, make_ledger):
        ledger = make_ledger(payments=["5000"])
        assert payment_validator.validate_for_ledger(ledger, Decimal("6000"), editing_payment_id="p1")

    def test_unknown_payment_id(self, payment_validator, make_ledger):
        result = payment_validator.validate_for_ledger(make_ledger(), Decimal("10"), editing_payment_id="nope")
        assert result.code == ErrorCode.INVALID_REFERENCE

    def test_caps_are_never_pooled_across_ledgers(self, payment_validator, make_ledger):
        member = MemberLedgers(
            regular=make_ledger(MembershipType.REGULAR, payments=["8500"]),
            pt=make_ledger(MembershipType.PT, payments=["1000"]),
        )

        regular = payment_validator.validate_request(member, request(amount=Decimal("100")))
        pt = payment_validator.validate_request(
            member, request(membership_type=MembershipType.PT, amount=Decimal("7500"))
        )

        assert regular.code == ErrorCode.EXCEEDS_BALANCE
        assert regular.detail("max_allowed") == Decimal("0")
        assert pt

    def test_missing_target_ledger(self, payment_validator, make_ledger):
        member = MemberLedgers(regular=make_ledger())
        result = payment_validator.validate_request(member, request(membership_type=MembershipType.PT))
        assert result.code == ErrorCode.INVALID_REFERENCE


class TestSubmissionReadiness:
    @pytest.mark.parametrize(
        "missing, code",
        [
            ("membership_type", ErrorCode.MISSING_REQUIRED_FIELD),
            ("amount", ErrorCode.INVALID_AMOUNT),
            ("payment_date", ErrorCode.MISSING_REQUIRED_FIELD),
            ("pay_mode", ErrorCode.MISSING_REQUIRED_FIELD),
        ],
    )
    def test_reports_missing_input(self, payment_validator, missing, code):
        result = payment_validator.check_submission_ready(request(**{missing: None}))
        assert result.code == code
        assert result.error.field == missing

    def test_complete_form_is_ready(self, payment_validator):
        assert payment_validator.check_submission_ready(request())


class TestRecordPayment:
    def test_appends_new_payment(self, payment_validator, fee_ledger, make_ledger):
        result = payment_validator.record_payment(make_ledger(payments=["5000"]), request(amount=Decimal("3500")))

        ledger = result.unwrap()
        assert len(ledger.payments) == 2
        assert ledger.payments[-1].id
        assert fee_ledger.snapshot(ledger).is_settled
        assert result.metadata["max_allowed_before"] == Decimal("3500")

    def test_edits_existing_payment_in_place(self, payment_validator, make_ledger):
        result = payment_validator.record_payment(
            make_ledger(payments=["5000"]),
            request(amount=Decimal("6000"), editing_payment_id="p1", pay_mode=PaymentMode.CARD),
        )

        ledger = result.unwrap()
        assert [p.amount for p in ledger.payments] == [Decimal("6000")]
        assert ledger.payments[0].pay_mode == PaymentMode.CARD

    def test_rejected_payment_leaves_ledger_untouched(self, payment_validator, make_ledger):
        original = make_ledger(payments=["5000"])
        result = payment_validator.record_payment(original, request(amount=Decimal("4000")))

        assert result.code == ErrorCode.EXCEEDS_BALANCE
        assert len(original.payments) == 1

    def test_type_mismatch(self, payment_validator, make_ledger):
        result = payment_validator.record_payment(
            make_ledger(MembershipType.PT), request(membership_type=MembershipType.REGULAR)
        )
        assert result.code == ErrorCode.INVALID_REFERENCE
