from gym_ledger.schemas.renewal.renewal import (
    RenewalClassification,
    RenewalPeriod,
    RenewalQuote,
    RenewalRequest,
)

__all__ = [
    "RenewalClassification",
    "RenewalPeriod",
    "RenewalQuote",
    "RenewalRequest",
]
