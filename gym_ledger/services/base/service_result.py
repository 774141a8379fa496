"""
Service result patterns for standardized outcome handling.

Every engine reports business-rule violations as a failed ServiceResult
carrying an ErrorCode and the contextual numbers the caller needs to
explain the rejection (for example the exact remaining allowance).
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, TypeVar


class ErrorCode(str, Enum):
    """Error codes for engine operations."""

    # General errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # Ledger errors
    INVALID_AMOUNT = "INVALID_AMOUNT"
    EXCEEDS_BALANCE = "EXCEEDS_BALANCE"

    # Payroll errors
    INVALID_ATTENDANCE = "INVALID_ATTENDANCE"
    DISCOUNT_EXCEEDS_ABSENT = "DISCOUNT_EXCEEDS_ABSENT"


class ErrorSeverity(str, Enum):
    """Error severity levels; an incomplete form is a WARNING, a rejected value an ERROR."""

    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class ServiceError:
    """Represents an engine error with context."""

    code: ErrorCode
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)
        if self.details is None:
            self.details = {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "code": self.code.value,
            "message": self.message,
            "severity": self.severity.value,
            "details": {k: str(v) if v is not None else None for k, v in self.details.items()},
            "field": self.field,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized engine result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
        metadata: Additional context information
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(
            is_success=True,
            data=data,
            message=message,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        error: ServiceError,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(
            is_success=False,
            error=error,
            message=error.message,
            metadata=metadata or {},
        )

    @classmethod
    def missing_field(cls, field: str, label: Optional[str] = None) -> "ServiceResult[TData]":
        """Create a failure for a required selection absent at submission time."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.MISSING_REQUIRED_FIELD,
                message=f"{label or field} is required",
                field=field,
                severity=ErrorSeverity.WARNING,
            )
        )

    @property
    def code(self) -> Optional[ErrorCode]:
        """Error code of a failed result, None on success."""
        return self.error.code if self.error else None

    def detail(self, key: str, default: Any = None) -> Any:
        """Read a contextual value from the error details."""
        if self.error is None:
            return default
        return self.error.details.get(key, default)

    def unwrap(self) -> TData:
        """
        Unwrap the result data or raise exception if failed.

        Raises:
            ValueError: If the result is not successful
        """
        if not self.is_success:
            raise ValueError(f"Cannot unwrap failed result: {self.error.message if self.error else 'Unknown error'}")
        return self.data

    def unwrap_or(self, default: TData) -> TData:
        """Unwrap the result data or return default if failed."""
        return self.data if self.is_success else default

    def map(self, func: Callable[[TData], Any]) -> "ServiceResult":
        """Map the result data through a function if successful."""
        if self.is_success:
            return ServiceResult.success(data=func(self.data), message=self.message, metadata=self.metadata)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        result = {
            "is_success": self.is_success,
            "message": self.message,
            "metadata": self.metadata,
        }

        if self.is_success:
            result["data"] = self.data
        else:
            result["error"] = self.error.to_dict() if self.error else None

        return result

    def __bool__(self) -> bool:
        """Allow boolean evaluation of the result."""
        return self.is_success

    def __repr__(self) -> str:
        status = "Success" if self.is_success else "Failure"
        if self.message:
            return f"ServiceResult({status}: {self.message})"
        return f"ServiceResult({status})"


def failure(
    error_code: ErrorCode,
    message: str,
    field: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
) -> ServiceResult[Any]:
    """Create a failed service result."""
    error = ServiceError(
        code=error_code,
        message=message,
        field=field,
        details=details,
        severity=severity,
    )
    return ServiceResult.failure(error)


__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
    "failure",
]
