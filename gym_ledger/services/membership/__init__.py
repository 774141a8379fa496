"""
Membership fee engines.

Provides:
- DiscountPolicyService: package discount resolution
- FeeLedgerService: final fees, balance and settlement per membership type
- DualLedgerService: Regular / PT coordination and default ledger choice
- PaymentValidationService: balance payment cap checks
"""

from gym_ledger.services.membership.discount_policy_service import DiscountPolicyService
from gym_ledger.services.membership.fee_ledger_service import FeeLedgerService
from gym_ledger.services.membership.dual_ledger_service import DualLedgerService
from gym_ledger.services.membership.payment_validation_service import PaymentValidationService

__all__ = [
    "DiscountPolicyService",
    "FeeLedgerService",
    "DualLedgerService",
    "PaymentValidationService",
]
