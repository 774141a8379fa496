"""
Settlement engines.

Every engine is a pure, synchronous computation over already-fetched
inputs and reports business-rule violations as a failed ServiceResult.
"""

from gym_ledger.services.base import BaseService, ErrorCode, ServiceResult
from gym_ledger.services.common import LoadState, to_user_message, to_user_title
from gym_ledger.services.membership import (
    DiscountPolicyService,
    DualLedgerService,
    FeeLedgerService,
    PaymentValidationService,
)
from gym_ledger.services.payroll import PayrollSettlementService, SalarySlipService
from gym_ledger.services.renewal import RenewalService

__all__ = [
    "BaseService",
    "ErrorCode",
    "ServiceResult",
    "LoadState",
    "to_user_message",
    "to_user_title",
    "DiscountPolicyService",
    "FeeLedgerService",
    "DualLedgerService",
    "PaymentValidationService",
    "RenewalService",
    "PayrollSettlementService",
    "SalarySlipService",
]
