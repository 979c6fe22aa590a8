"""CSV export of the by-resource permission summary."""

import csv
import io
from collections.abc import Iterable

from campdesk.application.services.permission_projections import group_by_resource
from campdesk.domain.entities import PermissionSet
from campdesk.domain.value_objects import (
    action_label,
    format_role,
    resource_label,
    scope_label,
)

CSV_HEADER = ("Resource", "Action", "Role", "Allowed", "Scope")
CSV_CONTENT_TYPE = "text/csv;charset=utf-8"
CSV_FILENAME = "permissions_summary.csv"


def export_permissions_csv(permission_sets: Iterable[PermissionSet]) -> str:
    """One quoted row per (resource, action, role). Quotes inside fields are doubled."""
    buf = io.StringIO()
    buf.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for group in group_by_resource(permission_sets):
        for action_group in group.actions:
            for row in action_group.rows:
                writer.writerow(
                    (
                        resource_label(group.resource),
                        action_label(action_group.action),
                        format_role(row.role),
                        "true" if row.allowed else "false",
                        scope_label(row.scope),
                    )
                )
    return buf.getvalue()
