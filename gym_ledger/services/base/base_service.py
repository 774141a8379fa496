"""
Base service class providing common functionality for all engines.
"""

from typing import Any, Dict, Optional

from gym_ledger.config.settings import Settings, get_settings
from gym_ledger.core.logging import get_logger
from gym_ledger.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)


class BaseService:
    """
    Base engine with common behaviors:
    - Shared logger and settings
    - Consistent rejection reporting via ServiceResult

    Engines hold no mutable state beyond their configuration, so a single
    instance may be shared across threads and requests.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize base service.

        Args:
            settings: Engine settings (defaults to the cached environment settings)
        """
        self.settings: Settings = settings or get_settings()
        self._logger = get_logger(self.__class__.__name__)

    def _reject(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> ServiceResult[Any]:
        """
        Build a failed result and log the rejection.

        Args:
            code: Business-rule error code
            message: Human-readable reason
            field: Input field the rejection refers to
            details: Contextual numbers for the caller

        Returns:
            ServiceResult with failure status and error details
        """
        self._logger.warning(
            f"Rejected: {message}",
            extra={"error_code": code.value, "field": field},
        )
        return ServiceResult.failure(
            ServiceError(
                code=code,
                message=message,
                severity=severity,
                details=details,
                field=field,
            )
        )
