from decimal import Decimal

import pytest

from gym_ledger.core.exceptions import PreconditionError
from gym_ledger.schemas.common.enums import DiscountType, MembershipType, PaymentStatus
from gym_ledger.schemas.membership.package import Package
from gym_ledger.services.base import ErrorCode


class TestDiscountPolicy:
    def test_percentage_discount_is_share_of_fees(self, discount_policy):
        amount = discount_policy.resolve_max_discount(
            Decimal("10000"), DiscountType.PERCENTAGE, Decimal("10")
        )
        assert amount == Decimal("1000")

    def test_fixed_discount_is_taken_as_is(self, discount_policy):
        amount = discount_policy.resolve_max_discount(Decimal("10000"), DiscountType.FIXED, Decimal("750"))
        assert amount == Decimal("750")

    def test_fixed_discount_is_not_clamped_to_fees(self, discount_policy):
        amount = discount_policy.resolve_max_discount(Decimal("500"), DiscountType.FIXED, Decimal("800"))
        assert amount == Decimal("800")

    def test_float_input_does_not_leak_binary_noise(self, discount_policy):
        amount = discount_policy.resolve_max_discount(0.1, DiscountType.FIXED, 0.1)
        assert amount == Decimal("0.1")

    @pytest.mark.parametrize("fees, max_discount", [("-1", "10"), ("100", "-5")])
    def test_negative_inputs_break_precondition(self, discount_policy, fees, max_discount):
        with pytest.raises(PreconditionError):
            discount_policy.resolve_max_discount(Decimal(fees), DiscountType.FIXED, Decimal(max_discount))

    def test_percentage_above_hundred_breaks_precondition(self, discount_policy):
        with pytest.raises(PreconditionError) as exc_info:
            discount_policy.resolve_max_discount(Decimal("10000"), DiscountType.PERCENTAGE, Decimal("120"))
        assert exc_info.value.field == "max_discount"

    def test_fixed_amount_above_hundred_is_allowed(self, discount_policy):
        amount = discount_policy.resolve_max_discount(Decimal("10000"), DiscountType.FIXED, Decimal("120"))
        assert amount == Decimal("120")

    def test_package_rejects_percentage_above_hundred(self):
        with pytest.raises(ValueError):
            Package(fees=Decimal("1000"), discount_type=DiscountType.PERCENTAGE,
                    max_discount=Decimal("120"), duration_in_days=30)

    def test_package_needs_exactly_one_duration(self):
        with pytest.raises(ValueError):
            Package(fees=Decimal("1000"), duration_in_days=30, duration_in_months=1)
        with pytest.raises(ValueError):
            Package(fees=Decimal("1000"))


class TestFinalFees:
    def test_percentage_package_with_extra_discount(self, fee_ledger, monthly_package):
        ledger = fee_ledger.open_ledger(MembershipType.REGULAR, monthly_package, Decimal("500"))
        snapshot = fee_ledger.snapshot(ledger)

        assert snapshot.max_discount_amount == Decimal("1000")
        assert snapshot.after_discount == Decimal("9000")
        assert snapshot.final_fees == Decimal("8500")

    def test_each_discount_step_is_floored_at_zero(self, fee_ledger):
        assert fee_ledger.compute_after_discount(Decimal("500"), Decimal("800")) == Decimal("0")
        assert fee_ledger.compute_final_fees(Decimal("1000"), Decimal("200"), Decimal("900")) == Decimal("0")

    @pytest.mark.parametrize("fees", ["0", "1", "999.99", "10000"])
    @pytest.mark.parametrize("max_discount", ["0", "500", "20000"])
    @pytest.mark.parametrize("extra", ["0", "250", "50000"])
    def test_final_fees_never_negative(self, fee_ledger, fees, max_discount, extra):
        final = fee_ledger.compute_final_fees(Decimal(fees), Decimal(max_discount), Decimal(extra))
        assert final >= Decimal("0")

    def test_negative_extra_discount_breaks_precondition(self, fee_ledger):
        with pytest.raises(ValueError):
            fee_ledger.compute_final_fees(Decimal("1000"), Decimal("0"), Decimal("-1"))

    def test_with_extra_discount_rejects_negative(self, fee_ledger, make_ledger):
        result = fee_ledger.with_extra_discount(make_ledger(), Decimal("-10"))
        assert not result
        assert result.code == ErrorCode.INVALID_AMOUNT

    def test_with_extra_discount_rederives_final_fees(self, fee_ledger, make_ledger):
        result = fee_ledger.with_extra_discount(make_ledger(payments=["5000"]), Decimal("1500"))
        snapshot = fee_ledger.snapshot(result.unwrap())
        assert snapshot.final_fees == Decimal("7500")
        assert snapshot.balance == Decimal("2500")


class TestBalanceAndSettlement:
    def test_balance_decreases_as_payments_accumulate(self, fee_ledger):
        final = Decimal("8500")
        balances = [fee_ledger.compute_balance(final, Decimal(paid)) for paid in ("0", "1000", "5000", "8499", "8500", "9000")]

        assert balances == sorted(balances, reverse=True)
        assert balances[:5] == [Decimal("8500"), Decimal("7500"), Decimal("3500"), Decimal("1"), Decimal("0")]
        assert balances[-1] == Decimal("0")

    @pytest.mark.parametrize(
        "final_fees, total_paid, settled",
        [
            ("8500", "8500", True),
            ("8500", "9000", True),
            ("8500", "8499", False),
            ("0", "0", False),
            ("0", "100", False),
        ],
    )
    def test_settled_iff_positive_fees_fully_paid(self, fee_ledger, final_fees, total_paid, settled):
        balance = fee_ledger.compute_balance(Decimal(final_fees), Decimal(total_paid))
        assert fee_ledger.is_settled(Decimal(final_fees), balance) is settled

    @pytest.mark.parametrize(
        "total_paid, status",
        [("0", PaymentStatus.PENDING), ("100", PaymentStatus.PARTIAL), ("8500", PaymentStatus.PAID)],
    )
    def test_payment_status(self, fee_ledger, total_paid, status):
        assert fee_ledger.payment_status(Decimal("8500"), Decimal(total_paid)) == status

    def test_overpayment_is_absorbed_and_reported(self, fee_ledger, make_ledger, caplog):
        ledger = make_ledger(payments=["5000", "4000"])

        with caplog.at_level("WARNING", logger="gym_ledger"):
            snapshot = fee_ledger.snapshot(ledger)

        assert snapshot.balance == Decimal("0")
        assert snapshot.is_settled
        assert snapshot.excess_paid == Decimal("500")
        assert "overpaid" in caplog.text

    def test_snapshot_counts_payments(self, fee_ledger, make_ledger):
        snapshot = fee_ledger.snapshot(make_ledger(payments=["1000", "2000"]))
        assert snapshot.total_paid == Decimal("3000")
        assert snapshot.payment_count == 2
        assert snapshot.payment_status == PaymentStatus.PARTIAL

    def test_snapshot_is_idempotent(self, fee_ledger, make_ledger):
        ledger = make_ledger(payments=["1000", "2500"])
        assert fee_ledger.snapshot(ledger) == fee_ledger.snapshot(ledger)
