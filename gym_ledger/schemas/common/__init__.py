from gym_ledger.schemas.common.base import ZERO, BaseSchema, FrozenSchema
from gym_ledger.schemas.common.enums import (
    DiscountType,
    IncentiveType,
    LoadStatus,
    MembershipType,
    PaymentMode,
    PaymentStatus,
    RenewalType,
)

__all__ = [
    "ZERO",
    "BaseSchema",
    "FrozenSchema",
    "DiscountType",
    "IncentiveType",
    "LoadStatus",
    "MembershipType",
    "PaymentMode",
    "PaymentStatus",
    "RenewalType",
]
