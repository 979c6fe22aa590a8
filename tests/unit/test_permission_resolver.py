"""Unit tests for effective permission resolution."""

from datetime import timedelta
from uuid import uuid4

from campdesk.domain.services import DENIED, resolve_permission, select_permission_sets
from campdesk.domain.value_objects import UserRole

from tests.conftest import NOW, make_assignment, make_set, make_user


class TestRoleDefaults:
    def test_default_set_for_role_applies(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        defaults = make_set(
            org, "Coach Defaults", [("camps", "view", True, "organization")], UserRole.COACH
        )

        result = resolve_permission(coach, "camps", "view", [defaults], [])

        assert result.allowed is True
        assert result.scope == "organization"
        assert result.permission_set_id == defaults.id

    def test_other_role_default_ignored(self) -> None:
        org = uuid4()
        volunteer = make_user(UserRole.VOLUNTEER, org)
        coach_defaults = make_set(
            org, "Coach Defaults", [("camps", "view", True, "organization")], UserRole.COACH
        )

        assert resolve_permission(volunteer, "camps", "view", [coach_defaults], []) == DENIED

    def test_non_default_set_with_role_ignored(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        draft = make_set(
            org, "Draft", [("camps", "view", True, "organization")], UserRole.COACH
        )
        draft.is_default = False

        assert resolve_permission(coach, "camps", "view", [draft], []).allowed is False


class TestFailClosed:
    def test_no_sets_denied(self) -> None:
        user = make_user(UserRole.MANAGER, uuid4())
        assert resolve_permission(user, "camps", "delete", [], []) == DENIED

    def test_missing_entry_denied(self) -> None:
        org = uuid4()
        manager = make_user(UserRole.MANAGER, org)
        defaults = make_set(
            org, "Manager", [("camps", "view", True, "organization")], UserRole.MANAGER
        )

        result = resolve_permission(manager, "camps", "delete", [defaults], [])

        assert result.allowed is False
        assert result.scope is None

    def test_unknown_role_denied(self) -> None:
        org = uuid4()
        legacy = make_user(UserRole.UNKNOWN, org)
        sets = [
            make_set(org, "Coach", [("camps", "view", True, "all")], UserRole.COACH),
            make_set(org, "Custom", [("camps", "view", True, "all")]),
        ]

        assert select_permission_sets(legacy, sets, []) == []
        assert resolve_permission(legacy, "camps", "view", sets, []) == DENIED

    def test_explicit_deny_entry(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        defaults = make_set(
            org, "Coach", [("payments", "view", False, "organization")], UserRole.COACH
        )

        result = resolve_permission(coach, "payments", "view", [defaults], [])

        assert result.allowed is False
        assert result.permission_set_id == defaults.id


class TestAssignments:
    def test_assignment_overrides_role_default(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        defaults = make_set(
            org, "Coach", [("camps", "edit", False, "organization")], UserRole.COACH
        )
        senior = make_set(org, "Senior Coach", [("camps", "edit", True, "own")])

        result = resolve_permission(
            coach, "camps", "edit", [defaults, senior], [make_assignment(coach, senior)]
        )

        assert result.allowed is True
        assert result.scope == "own"
        assert result.permission_set_id == senior.id

    def test_assignment_without_entry_does_not_fall_back_to_defaults(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        defaults = make_set(
            org, "Coach", [("camps", "view", True, "organization")], UserRole.COACH
        )
        narrow = make_set(org, "Narrow", [("sessions", "view", True, "own")])

        result = resolve_permission(
            coach, "camps", "view", [defaults, narrow], [make_assignment(coach, narrow)]
        )

        assert result == DENIED

    def test_earliest_assignment_with_entry_wins(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        first = make_set(org, "First", [("sessions", "view", True, "own")])
        second = make_set(org, "Second", [("camps", "view", False, "all")])
        third = make_set(org, "Third", [("camps", "view", True, "all")])
        assignments = [
            make_assignment(coach, third, NOW + timedelta(minutes=2)),
            make_assignment(coach, first, NOW),
            make_assignment(coach, second, NOW + timedelta(minutes=1)),
        ]

        result = resolve_permission(coach, "camps", "view", [first, second, third], assignments)

        assert result.allowed is False
        assert result.permission_set_id == second.id

    def test_other_users_assignments_ignored(self) -> None:
        org = uuid4()
        coach = make_user(UserRole.COACH, org)
        other = make_user(UserRole.COACH, org)
        defaults = make_set(
            org, "Coach", [("camps", "view", True, "organization")], UserRole.COACH
        )
        custom = make_set(org, "Custom", [("camps", "view", False, "own")])

        result = resolve_permission(
            coach, "camps", "view", [defaults, custom], [make_assignment(other, custom)]
        )

        assert result.allowed is True
        assert result.permission_set_id == defaults.id


def test_undated_assignment_ranks_after_dated() -> None:
    org = uuid4()
    coach = make_user(UserRole.COACH, org)
    deny = make_set(org, "Locked", [("camps", "edit", False, "organization")])
    allow = make_set(org, "Senior", [("camps", "edit", True, "own")])
    assignments = [make_assignment(coach, deny, created_at=None), make_assignment(coach, allow)]

    assert select_permission_sets(coach, [deny, allow], assignments) == [allow, deny]
    assert resolve_permission(coach, "camps", "edit", [deny, allow], assignments).allowed is True
