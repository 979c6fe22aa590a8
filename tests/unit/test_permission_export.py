"""Unit tests for the permission summary CSV export."""

import csv
import io
from uuid import uuid4

from campdesk.application.services.permission_export import (
    CSV_CONTENT_TYPE,
    CSV_FILENAME,
    export_permissions_csv,
)
from campdesk.domain.value_objects import UserRole

from tests.conftest import make_set


def test_coach_defaults_scenario() -> None:
    coach = make_set(
        uuid4(),
        "Coach Defaults",
        [("camps", "view", True, "organization")],
        UserRole.COACH,
    )

    lines = export_permissions_csv([coach]).splitlines()

    assert lines == [
        "Resource,Action,Role,Allowed,Scope",
        '"Camps","View","Coach","true","Organization"',
    ]


def test_labels_and_booleans() -> None:
    org = uuid4()
    sets = [
        make_set(
            org,
            "Creator",
            [("custom_fields", "delete", False, "own")],
            UserRole.CAMP_CREATOR,
        ),
        make_set(org, "Custom", [("custom_fields", "delete", True, "all")]),
    ]

    lines = export_permissions_csv(sets).splitlines()

    assert lines[1:] == [
        '"Custom Fields","Delete","Camp Creator","false","Own"',
        '"Custom Fields","Delete","Custom","true","All"',
    ]


def test_embedded_quotes_are_doubled() -> None:
    permission_set = make_set(uuid4(), "Legacy", [('say "hi"', "view", True, "all")])

    text = export_permissions_csv([permission_set])

    assert '"say ""hi"""' in text
    rows = list(csv.reader(io.StringIO(text)))
    assert rows[1][0] == 'say "hi"'


def test_empty_export_is_header_only() -> None:
    assert export_permissions_csv([]) == "Resource,Action,Role,Allowed,Scope\n"


def test_download_metadata() -> None:
    assert CSV_CONTENT_TYPE == "text/csv;charset=utf-8"
    assert CSV_FILENAME == "permissions_summary.csv"
