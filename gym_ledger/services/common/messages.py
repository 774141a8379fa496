"""
Presentation adapter for engine results.

Maps a failed ServiceResult to the sentence shown to the gym owner,
always quoting the exact numeric ceiling the engine reported.
"""

from typing import Optional

from gym_ledger.config.settings import get_settings
from gym_ledger.services.base.service_result import ErrorCode, ServiceResult
from gym_ledger.utils.formatters import CurrencyFormatter


def _money(value) -> str:
    return CurrencyFormatter.format_indian_currency(value, symbol=get_settings().CURRENCY_SYMBOL)


def to_user_title(result: ServiceResult) -> Optional[str]:
    """Short heading for a rejection, None for a successful result."""
    if result.is_success:
        return None
    titles = {
        ErrorCode.INVALID_AMOUNT: "Invalid Amount",
        ErrorCode.EXCEEDS_BALANCE: "Amount Exceeds Balance",
        ErrorCode.DISCOUNT_EXCEEDS_ABSENT: "Invalid Discount Days",
        ErrorCode.INVALID_ATTENDANCE: "Invalid Attendance",
        ErrorCode.MISSING_REQUIRED_FIELD: "Please fill all required fields",
    }
    return titles.get(result.code, "Validation Failed")


def to_user_message(result: ServiceResult) -> Optional[str]:
    """Full user-facing message for a rejection, None for a successful result."""
    if result.is_success:
        return None

    code = result.code
    if code == ErrorCode.EXCEEDS_BALANCE:
        amount = result.detail("amount")
        max_allowed = _money(result.detail("max_allowed"))
        return (
            f"Payment amount ({_money(amount)}) exceeds remaining balance ({max_allowed}). "
            f"Maximum allowed: {max_allowed}"
        )
    if code == ErrorCode.DISCOUNT_EXCEEDS_ABSENT:
        return f"Discount days cannot exceed absent days ({result.detail('max_discount_days')})"
    if code == ErrorCode.INVALID_ATTENDANCE:
        return (
            f"Present days must be between 0 and {result.detail('total_days_in_month')}"
        )
    return result.message
