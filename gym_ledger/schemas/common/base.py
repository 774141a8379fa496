"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

__all__ = [
    "BaseSchema",
    "FrozenSchema",
    "ZERO",
]

ZERO = Decimal("0")


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Input records (packages, payments, attendance) inherit from this.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        # Keep enums as Enum instances to retain full type information;
        # callers can still access `.value` if needed.
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class FrozenSchema(BaseSchema):
    """
    Immutable schema for derived snapshots.

    Snapshots are recomputed from inputs, never patched in place.
    """

    model_config = ConfigDict(frozen=True)
