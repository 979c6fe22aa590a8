"""Unit tests for camp registration status."""

from datetime import timedelta
from uuid import uuid4

import pytest

from campdesk.domain.services import compute_registration_status
from campdesk.domain.value_objects import RegistrationStatus

from tests.conftest import NOW, make_camp


@pytest.fixture
def camp():
    """Registration open from NOW-10d to NOW+10d, camp starts NOW+20d."""
    return make_camp(uuid4(), capacity=10, waitlist_enabled=True)


def test_open_below_capacity(camp) -> None:
    assert compute_registration_status(camp, 3, NOW) == RegistrationStatus.OPEN


def test_at_capacity_with_waitlist(camp) -> None:
    assert compute_registration_status(camp, 10, NOW) == RegistrationStatus.WAITLIST


def test_at_capacity_without_waitlist(camp) -> None:
    camp.waitlist_enabled = False
    assert compute_registration_status(camp, 10, NOW) == RegistrationStatus.FULL


def test_over_capacity_without_waitlist(camp) -> None:
    camp.waitlist_enabled = False
    assert compute_registration_status(camp, 12, NOW) == RegistrationStatus.FULL


def test_not_open_before_window(camp) -> None:
    now = camp.registration_start_date - timedelta(seconds=1)
    assert compute_registration_status(camp, 0, now) == RegistrationStatus.NOT_OPEN


def test_closed_after_window(camp) -> None:
    now = camp.registration_end_date + timedelta(seconds=1)
    assert compute_registration_status(camp, 0, now) == RegistrationStatus.CLOSED


def test_closed_takes_precedence_over_in_progress(camp) -> None:
    """Past both registration end and camp start resolves to closed."""
    now = camp.start_date + timedelta(days=1)
    assert now > camp.registration_end_date
    assert compute_registration_status(camp, 0, now) == RegistrationStatus.CLOSED


def test_in_progress_when_window_still_open() -> None:
    camp = make_camp(
        uuid4(),
        registration_end_date=NOW + timedelta(days=30),
        start_date=NOW - timedelta(days=1),
    )
    assert compute_registration_status(camp, 0, NOW) == RegistrationStatus.IN_PROGRESS


def test_closed_beats_full(camp) -> None:
    camp.waitlist_enabled = False
    now = camp.registration_end_date + timedelta(hours=1)
    assert compute_registration_status(camp, 10, now) == RegistrationStatus.CLOSED


class TestBoundaries:
    """Comparisons are strict: boundary instants fall into the open branch."""

    def test_exactly_at_registration_end_is_open(self, camp) -> None:
        assert compute_registration_status(camp, 0, camp.registration_end_date) == RegistrationStatus.OPEN

    def test_exactly_at_registration_start_is_open(self, camp) -> None:
        assert compute_registration_status(camp, 0, camp.registration_start_date) == RegistrationStatus.OPEN

    def test_exactly_at_camp_start_is_not_in_progress(self) -> None:
        camp = make_camp(
            uuid4(),
            registration_end_date=NOW + timedelta(days=30),
            start_date=NOW,
        )
        assert compute_registration_status(camp, 0, NOW) == RegistrationStatus.OPEN


class TestUnknown:
    @pytest.mark.parametrize(
        "field",
        ["registration_start_date", "registration_end_date", "start_date"],
    )
    def test_missing_date(self, camp, field) -> None:
        setattr(camp, field, None)
        assert compute_registration_status(camp, 0, NOW) == RegistrationStatus.UNKNOWN

    def test_missing_date_wins_over_capacity(self, camp) -> None:
        camp.start_date = None
        camp.capacity = 0
        assert compute_registration_status(camp, 0, NOW) == RegistrationStatus.UNKNOWN


class TestZeroCapacity:
    def test_closed_after_window(self, camp) -> None:
        camp.capacity = 0
        after = camp.registration_end_date + timedelta(days=1)
        assert compute_registration_status(camp, 0, after) == RegistrationStatus.CLOSED

    def test_not_open_before_window(self, camp) -> None:
        camp.capacity = 0
        before = camp.registration_start_date - timedelta(days=1)
        assert compute_registration_status(camp, 0, before) == RegistrationStatus.NOT_OPEN

    @pytest.mark.parametrize(
        ("waitlist_enabled", "expected"),
        [(True, RegistrationStatus.WAITLIST), (False, RegistrationStatus.FULL)],
    )
    def test_inside_window(self, camp, waitlist_enabled, expected) -> None:
        camp.capacity = 0
        camp.waitlist_enabled = waitlist_enabled
        assert compute_registration_status(camp, 0, NOW) == expected


def test_naive_datetimes_treated_as_utc(camp) -> None:
    naive_now = NOW.replace(tzinfo=None)
    assert compute_registration_status(camp, 0, naive_now) == RegistrationStatus.OPEN
