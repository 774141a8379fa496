"""
Course package schema.

A package is immutable reference data configured by the gym owner: its
fee, its maximum discount policy and its duration.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from gym_ledger.schemas.common.base import BaseSchema
from gym_ledger.schemas.common.enums import DiscountType

__all__ = ["Package"]


class Package(BaseSchema):
    """
    Course package.

    Exactly one of ``duration_in_days`` / ``duration_in_months`` is set.
    """

    package_id: Optional[str] = Field(default=None, description="Package identifier")
    package_name: Optional[str] = Field(default=None, description="Display name")
    fees: Decimal = Field(..., ge=Decimal("0"), description="Package fee")
    discount_type: DiscountType = Field(
        default=DiscountType.FIXED,
        description="Whether max_discount is a percentage of fees or an amount",
    )
    max_discount: Decimal = Field(
        default=Decimal("0"),
        ge=Decimal("0"),
        description="Maximum discount (0-100 for PERCENTAGE, else a currency amount)",
    )
    duration_in_days: Optional[int] = Field(default=None, gt=0)
    duration_in_months: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_package(self) -> "Package":
        """Check the discount range and that exactly one duration is populated."""
        if self.discount_type == DiscountType.PERCENTAGE and self.max_discount > 100:
            raise ValueError("Percentage discount cannot exceed 100")

        has_days = self.duration_in_days is not None
        has_months = self.duration_in_months is not None
        if has_days == has_months:
            raise ValueError(
                "Exactly one of duration_in_days or duration_in_months must be set"
            )
        return self
