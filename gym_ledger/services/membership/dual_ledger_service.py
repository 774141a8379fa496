"""
Dual Ledger Service

Combines a member's Regular and PT ledgers and picks the ledger a new
payment should default to.
"""

from typing import Optional, Tuple

from gym_ledger.config.settings import Settings
from gym_ledger.schemas.common.base import ZERO
from gym_ledger.schemas.common.enums import MembershipType
from gym_ledger.schemas.membership.ledger import DualLedgerView, LedgerSnapshot, MemberLedgers
from gym_ledger.services.base import BaseService
from gym_ledger.services.common.load_state import LoadState
from gym_ledger.services.membership.fee_ledger_service import FeeLedgerService


class DualLedgerService(BaseService):
    """
    Service for members holding Regular and/or PT memberships.

    Membership presence is read from the authoritative membership details.
    The member's cached type label is only a placeholder while those
    details are loading, and no default ledger is chosen until they arrive.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fee_ledger: Optional[FeeLedgerService] = None,
    ):
        super().__init__(settings)
        self.fee_ledger = fee_ledger or FeeLedgerService(self.settings)

    def resolve(
        self,
        membership: LoadState[MemberLedgers],
        cached_member_type: Optional[str] = None,
    ) -> DualLedgerView:
        """
        Build the payment-screen view of a member.

        Args:
            membership: Membership details as fetched (or still loading)
            cached_member_type: Type label stored on the member record

        Returns:
            DualLedgerView; authoritative only once membership is loaded
        """
        if not membership.is_loaded:
            has_regular, has_pt = self.placeholder_flags(cached_member_type)
            return DualLedgerView(
                is_authoritative=False,
                is_fees_data_ready=False,
                has_regular_membership=has_regular,
                has_pt_membership=has_pt,
            )

        details = membership.value
        regular = self.fee_ledger.snapshot(details.regular) if details.regular else None
        pt = self.fee_ledger.snapshot(details.pt) if details.pt else None

        stale_label = cached_member_type or details.cached_member_type
        if stale_label and self.placeholder_flags(stale_label) != (regular is not None, pt is not None):
            self._logger.info(
                "Cached member type disagrees with membership details",
                extra={"member_id": details.member_id, "cached_member_type": stale_label},
            )

        return DualLedgerView(
            is_authoritative=True,
            is_fees_data_ready=True,
            has_regular_membership=regular is not None,
            has_pt_membership=pt is not None,
            default_type=self.select_default_type(regular, pt),
            regular=regular,
            pt=pt,
            pending_types=[
                snapshot.membership_type
                for snapshot in (regular, pt)
                if snapshot is not None and snapshot.balance > ZERO
            ],
        )

    @staticmethod
    def select_default_type(
        regular: Optional[LedgerSnapshot],
        pt: Optional[LedgerSnapshot],
    ) -> Optional[MembershipType]:
        """
        Steer a new payment toward the ledger that has money outstanding.

        Precedence: the only ledger held; PT when Regular has nothing to
        charge; PT when only Regular is settled; Regular when only PT is
        settled; otherwise Regular.
        """
        if regular is None and pt is None:
            return None
        if regular is None:
            return MembershipType.PT
        if pt is None:
            return MembershipType.REGULAR

        if regular.final_fees == ZERO and pt.final_fees > ZERO:
            return MembershipType.PT
        if regular.is_settled and not pt.is_settled:
            return MembershipType.PT
        if pt.is_settled and not regular.is_settled:
            return MembershipType.REGULAR
        return MembershipType.REGULAR

    @staticmethod
    def placeholder_flags(cached_member_type: Optional[str]) -> Tuple[bool, bool]:
        """(has_regular, has_pt) implied by labels like REGULAR, PT, REGULAR_PT, PT_MEMBER."""
        if not cached_member_type:
            return False, False
        tokens = cached_member_type.strip().upper().split("_")
        return "REGULAR" in tokens, "PT" in tokens
