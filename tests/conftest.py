"""
Shared fixtures for the engine test suite.
"""

from datetime import date
from decimal import Decimal

import pytest

from gym_ledger.config.settings import Settings
from gym_ledger.schemas.common.enums import DiscountType, MembershipType, PaymentMode
from gym_ledger.schemas.membership.ledger import MembershipLedger, Payment
from gym_ledger.schemas.membership.package import Package
from gym_ledger.services.membership import (
    DiscountPolicyService,
    DualLedgerService,
    FeeLedgerService,
    PaymentValidationService,
)
from gym_ledger.services.payroll import PayrollSettlementService, SalarySlipService
from gym_ledger.services.renewal import RenewalService


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENVIRONMENT="testing", TIMEZONE="Asia/Kolkata")


@pytest.fixture
def discount_policy(settings):
    return DiscountPolicyService(settings)


@pytest.fixture
def fee_ledger(settings, discount_policy):
    return FeeLedgerService(settings, discount_policy)


@pytest.fixture
def dual_ledger(settings, fee_ledger):
    return DualLedgerService(settings, fee_ledger)


@pytest.fixture
def payment_validator(settings, fee_ledger):
    return PaymentValidationService(settings, fee_ledger)


@pytest.fixture
def renewals(settings, fee_ledger):
    return RenewalService(settings, fee_ledger)


@pytest.fixture
def payroll(settings):
    return PayrollSettlementService(settings)


@pytest.fixture
def slips(settings):
    return SalarySlipService(settings)


@pytest.fixture
def monthly_package():
    """₹10,000 package, 10% discount, one month."""
    return Package(
        package_id="pkg-gold",
        package_name="Gold Monthly",
        fees=Decimal("10000"),
        discount_type=DiscountType.PERCENTAGE,
        max_discount=Decimal("10"),
        duration_in_months=1,
    )


@pytest.fixture
def make_ledger():
    """Build a ledger from plain numbers; payments get ids p1, p2, ..."""

    def _make(
        membership_type=MembershipType.REGULAR,
        package_fees="10000",
        max_discount_amount="1000",
        extra_discount="500",
        payments=(),
    ):
        return MembershipLedger(
            membership_type=membership_type,
            package_fees=Decimal(package_fees),
            max_discount_amount=Decimal(max_discount_amount),
            extra_discount=Decimal(extra_discount),
            payments=[
                Payment(
                    id=f"p{index}",
                    amount=Decimal(amount),
                    payment_date=date(2026, 1, index),
                    pay_mode=PaymentMode.CASH,
                )
                for index, amount in enumerate(payments, start=1)
            ],
        )

    return _make
