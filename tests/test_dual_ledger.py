from decimal import Decimal

import pytest

from gym_ledger.schemas.common.enums import MembershipType
from gym_ledger.schemas.membership.ledger import MemberLedgers
from gym_ledger.services.common import LoadState


@pytest.fixture
def member(make_ledger):
    def _member(regular=None, pt=None, cached_member_type=None):
        return MemberLedgers(
            member_id="m-1",
            regular=make_ledger(MembershipType.REGULAR, **regular) if regular is not None else None,
            pt=make_ledger(MembershipType.PT, **pt) if pt is not None else None,
            cached_member_type=cached_member_type,
        )

    return _member


OPEN = {"payments": ["1000"]}
SETTLED = {"payments": ["8500"]}
FREE = {"package_fees": "0", "max_discount_amount": "0", "extra_discount": "0"}


class TestDefaultLedgerSelection:
    def test_single_membership_wins(self, dual_ledger, member):
        assert dual_ledger.resolve(LoadState.loaded(member(regular=OPEN))).default_type == MembershipType.REGULAR
        assert dual_ledger.resolve(LoadState.loaded(member(pt=OPEN))).default_type == MembershipType.PT

    def test_pt_when_regular_has_nothing_to_charge(self, dual_ledger, member):
        view = dual_ledger.resolve(LoadState.loaded(member(regular=FREE, pt=OPEN)))
        assert view.default_type == MembershipType.PT

    def test_pt_when_only_regular_is_settled(self, dual_ledger, member):
        view = dual_ledger.resolve(LoadState.loaded(member(regular=SETTLED, pt=OPEN)))
        assert view.default_type == MembershipType.PT
        assert view.pending_types == [MembershipType.PT]

    def test_regular_when_only_pt_is_settled(self, dual_ledger, member):
        view = dual_ledger.resolve(LoadState.loaded(member(regular=OPEN, pt=SETTLED)))
        assert view.default_type == MembershipType.REGULAR

    @pytest.mark.parametrize("regular, pt", [(OPEN, OPEN), (SETTLED, SETTLED)])
    def test_regular_otherwise(self, dual_ledger, member, regular, pt):
        view = dual_ledger.resolve(LoadState.loaded(member(regular=regular, pt=pt)))
        assert view.default_type == MembershipType.REGULAR

    def test_no_memberships_means_no_default(self, dual_ledger, member):
        view = dual_ledger.resolve(LoadState.loaded(member()))
        assert view.default_type is None
        assert view.is_fees_data_ready


class TestAuthoritativeSource:
    def test_loading_uses_cached_label_as_placeholder_only(self, dual_ledger):
        view = dual_ledger.resolve(LoadState.unloaded(), cached_member_type="REGULAR_PT")

        assert not view.is_authoritative
        assert not view.is_fees_data_ready
        assert view.has_regular_membership
        assert view.has_pt_membership
        assert view.default_type is None
        assert view.regular is None and view.pt is None

    def test_failed_fetch_is_not_authoritative(self, dual_ledger):
        view = dual_ledger.resolve(LoadState.failed(RuntimeError("timeout")), cached_member_type="PT")
        assert not view.is_authoritative
        assert view.has_pt_membership and not view.has_regular_membership

    def test_loaded_details_override_stale_label(self, dual_ledger, member):
        view = dual_ledger.resolve(
            LoadState.loaded(member(regular=OPEN, pt=OPEN)),
            cached_member_type="REGULAR",
        )
        assert view.is_authoritative
        assert view.has_regular_membership and view.has_pt_membership

    def test_each_ledger_keeps_its_own_balance(self, dual_ledger, member):
        view = dual_ledger.resolve(
            LoadState.loaded(member(regular={"payments": ["5000"]}, pt={"payments": ["8000"]}))
        )
        assert view.regular.balance == Decimal("3500")
        assert view.pt.balance == Decimal("500")

    @pytest.mark.parametrize(
        "label, flags",
        [
            ("REGULAR", (True, False)),
            ("PT", (False, True)),
            ("REGULAR_PT", (True, True)),
            ("PT_MEMBER", (False, True)),
            (None, (False, False)),
        ],
    )
    def test_placeholder_flags(self, dual_ledger, label, flags):
        assert dual_ledger.placeholder_flags(label) == flags


class TestLoadState:
    def test_unloaded_is_distinct_from_loaded_zero(self):
        assert LoadState.unloaded().value_or(None) is None
        assert LoadState.loaded(Decimal("0")).value_or(None) == Decimal("0")

    def test_failed_keeps_error(self):
        state = LoadState.failed("network")
        assert state.is_failed and not state.is_loaded
        assert state.error == "network"
