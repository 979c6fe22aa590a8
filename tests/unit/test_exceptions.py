"""Unit tests for domain exceptions."""

import pytest

from campdesk.domain.exceptions import (
    CampDeskError,
    CampFull,
    Conflict,
    DuplicateAssignment,
    DuplicatePermission,
    NotFound,
    PermissionDenied,
    RegistrationClosed,
    RegistrationConflict,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc",
    [PermissionDenied, NotFound, ValidationError, Conflict, RegistrationConflict],
)
def test_inherits_campdesk_error(exc) -> None:
    assert issubclass(exc, CampDeskError)


def test_duplicates_are_conflicts() -> None:
    assert issubclass(DuplicatePermission, Conflict)
    assert issubclass(DuplicateAssignment, Conflict)


def test_registration_conflict_codes() -> None:
    """Capacity and window conflicts carry distinct machine-readable codes."""
    assert CampFull("full").code == "CAMP_FULL"
    assert RegistrationClosed("closed").code == "REGISTRATION_CLOSED"
    assert issubclass(CampFull, RegistrationConflict)
    assert issubclass(RegistrationClosed, RegistrationConflict)


def test_raise_not_found_catchable_as_campdesk_error() -> None:
    """NotFound can be caught as CampDeskError."""
    with pytest.raises(CampDeskError):
        raise NotFound("Camp", "123")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "Only camp creators can manage permissions"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
