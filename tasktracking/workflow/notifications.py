"""User-facing notifications for task status changes.

Lookups are purely presentational: they do not check whether the
transition is legal, so the UI can preview a notification before the
change is committed.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from tasktracking.workflow.state_machine import Status, coerce_status


class Severity(str, enum.Enum):
    success = "success"
    warning = "warning"
    error = "error"


@dataclass(frozen=True, slots=True)
class NotificationDescriptor:
    """Toast content shown after a status change."""

    title: str
    description: str
    severity: Severity


# Each entry maps the task title to (title, description, severity).
_Template = Callable[[str], NotificationDescriptor]


def _template(title: str, description: str, severity: Severity) -> _Template:
    def render(task_title: str) -> NotificationDescriptor:
        return NotificationDescriptor(
            title=title,
            description=description.format(task=task_title),
            severity=severity,
        )

    return render


STATUS_CHANGE_NOTIFICATIONS: Mapping[tuple[Status, Status], _Template] = MappingProxyType({
    (Status.awaiting_approval, Status.in_progress): _template(
        "Task Approved & Started",
        '"{task}" has been approved and work has begun',
        Severity.success,
    ),
    (Status.awaiting_approval, Status.approved): _template(
        "Task Approved",
        '"{task}" has been approved and is ready to start',
        Severity.success,
    ),
    (Status.approved, Status.in_progress): _template(
        "Work Started",
        'Work has begun on "{task}"',
        Severity.success,
    ),
    (Status.in_progress, Status.blocked): _template(
        "Task Blocked",
        '"{task}" is now blocked and needs attention',
        Severity.warning,
    ),
    (Status.in_progress, Status.pending_review): _template(
        "Ready for Review",
        '"{task}" is ready for review',
        Severity.success,
    ),
    (Status.pending_review, Status.done): _template(
        "Task Completed",
        '"{task}" has been completed successfully',
        Severity.success,
    ),
})

ANY_TO_CANCELLED_NOTIFICATION = _template(
    "Task Cancelled",
    '"{task}" has been cancelled',
    Severity.warning,
)


def get_status_change_notification(
    from_status: Status | str,
    to_status: Status | str,
    task_title: str,
) -> NotificationDescriptor:
    """Return the notification for a status change.

    Falls back to the cancellation notification when the destination is
    ``cancelled`` and to a generic "Status Updated" notification otherwise.
    """
    from_status, to_status = coerce_status(from_status), coerce_status(to_status)

    template = STATUS_CHANGE_NOTIFICATIONS.get((from_status, to_status))
    if template is None and to_status is Status.cancelled:
        template = ANY_TO_CANCELLED_NOTIFICATION
    if template is not None:
        return template(task_title)

    return NotificationDescriptor(
        title="Status Updated",
        description=f'"{task_title}" status changed to {to_status.value}',
        severity=Severity.success,
    )
