"""
Discount Policy Service

Resolves a package's maximum discount into a currency amount.
"""

from decimal import Decimal

from gym_ledger.core.exceptions import PreconditionError
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.common.enums import DiscountType
from gym_ledger.schemas.membership.package import Package
from gym_ledger.services.base import BaseService
from gym_ledger.utils.formatters import to_decimal

HUNDRED = Decimal("100")


class DiscountPolicyService(BaseService):
    """
    Service for resolving package discounts.

    The resolved amount is not clamped to the fee; FeeLedgerService floors
    the discounted fee at zero.
    """

    def resolve_max_discount(
        self,
        fees: Decimal,
        discount_type: DiscountType,
        max_discount: Decimal,
    ) -> Decimal:
        """
        Convert a discount policy into an amount.

        Args:
            fees: Package fee (>= 0)
            discount_type: PERCENTAGE or FIXED
            max_discount: Percentage (0-100) or fixed amount (>= 0)

        Returns:
            Maximum discount as a currency amount

        Raises:
            PreconditionError: If fees or max_discount is negative, or a
                percentage above 100
        """
        fees = to_decimal(fees)
        max_discount = to_decimal(max_discount)
        if fees < ZERO:
            raise PreconditionError("fees", fees, "must not be negative")
        if max_discount < ZERO:
            raise PreconditionError("max_discount", max_discount, "must not be negative")
        if DiscountType(discount_type) == DiscountType.PERCENTAGE and max_discount > HUNDRED:
            raise PreconditionError("max_discount", max_discount, "must not exceed 100 percent")

        if DiscountType(discount_type) == DiscountType.PERCENTAGE:
            amount = fees * max_discount / HUNDRED
        else:
            amount = max_discount

        self._logger.debug(
            "Max discount resolved",
            extra={
                "fees": str(fees),
                "discount_type": DiscountType(discount_type).value,
                "max_discount": str(max_discount),
                "max_discount_amount": str(amount),
            },
        )
        return amount

    def resolve_for_package(self, package: Package) -> Decimal:
        """Maximum discount amount of a package."""
        return self.resolve_max_discount(package.fees, package.discount_type, package.max_discount)
