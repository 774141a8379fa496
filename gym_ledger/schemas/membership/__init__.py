from gym_ledger.schemas.membership.package import Package
from gym_ledger.schemas.membership.ledger import (
    DualLedgerView,
    LedgerSnapshot,
    MemberLedgers,
    MembershipLedger,
    Payment,
)
from gym_ledger.schemas.membership.payment_request import (
    BalancePaymentRequest,
    PaymentValidationOutcome,
)

__all__ = [
    "Package",
    "Payment",
    "MembershipLedger",
    "LedgerSnapshot",
    "MemberLedgers",
    "DualLedgerView",
    "BalancePaymentRequest",
    "PaymentValidationOutcome",
]
