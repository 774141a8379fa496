"""
Custom Exceptions for the Gym Ledger engine

Business-rule violations are never raised; they are reported through
ServiceResult. The exceptions here signal caller bugs: inputs that break
the preconditions of a pure calculation.
"""

from typing import Any, Dict, Optional


class BaseAppException(Exception):
    """
    Base exception class for all engine exceptions.

    Provides consistent error information across the engine.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}')"


class PreconditionError(BaseAppException, ValueError):
    """Raised when a calculation receives inputs outside its domain"""

    def __init__(self, field: str, value: Any, constraint: str):
        super().__init__(
            f"{field} {constraint} (got {value})",
            details={"field": field, "value": str(value), "constraint": constraint},
        )
        self.field = field


__all__ = [
    "BaseAppException",
    "PreconditionError",
]
