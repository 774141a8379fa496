"""
Enumeration types used across the engine.
"""

from enum import Enum

__all__ = [
    "DiscountType",
    "MembershipType",
    "PaymentMode",
    "PaymentStatus",
    "RenewalType",
    "IncentiveType",
    "LoadStatus",
]


class DiscountType(str, Enum):
    """How a package's maximum discount is expressed."""

    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class MembershipType(str, Enum):
    """Independent membership tracks a member may hold."""

    REGULAR = "REGULAR"
    PT = "PT"


class PaymentMode(str, Enum):
    """Payment mode enumeration."""

    CASH = "CASH"
    CARD = "CARD"
    UPI = "UPI"
    ONLINE = "ONLINE"
    BANK_TRANSFER = "BANK_TRANSFER"
    CHEQUE = "CHEQUE"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class PaymentStatus(str, Enum):
    """Payment state of a ledger or renewal."""

    PAID = "PAID"
    PARTIAL = "PARTIAL"
    PENDING = "PENDING"


class RenewalType(str, Enum):
    """Renewal timing relative to the current expiry date."""

    EARLY = "EARLY"
    STANDARD = "STANDARD"
    LATE = "LATE"


class IncentiveType(str, Enum):
    """Source of a trainer incentive."""

    PT = "PT"
    PROTEIN = "PROTEIN"
    MEMBER_REFERENCE = "MEMBER_REFERENCE"
    OTHERS = "OTHERS"


class LoadStatus(str, Enum):
    """Availability of externally fetched data."""

    UNLOADED = "UNLOADED"
    LOADED = "LOADED"
    FAILED = "FAILED"
