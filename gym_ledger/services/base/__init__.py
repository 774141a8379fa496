"""
Base services module for the gym ledger engine.

Provides the ServiceResult outcome type and the BaseService class all
engines derive from.
"""

from gym_ledger.services.base.service_result import (
    ServiceResult,
    ServiceError,
    ErrorCode,
    ErrorSeverity,
    failure,
)

from gym_ledger.services.base.base_service import BaseService


__all__ = [
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    "ErrorSeverity",
    "failure",
    "BaseService",
]
