"""Task status state machine.

States: awaiting_approval → in_progress → pending_review → done
        in_progress ↔ blocked / on_hold, pending_review → rework → in_progress
        any non-terminal state → cancelled

``approved`` is a legacy entry point; new tasks skip it and go straight
from ``awaiting_approval`` to ``in_progress``.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping

from tasktracking.workflow.exceptions import InvalidStatusError


class Status(str, enum.Enum):
    awaiting_approval = "awaiting_approval"
    approved = "approved"
    in_progress = "in_progress"
    pending_review = "pending_review"
    rework = "rework"
    blocked = "blocked"
    on_hold = "on_hold"
    done = "done"
    cancelled = "cancelled"


# Destination order drives button order in the UI.
VALID_TRANSITIONS: Mapping[Status, tuple[Status, ...]] = MappingProxyType({
    Status.awaiting_approval: (Status.in_progress, Status.cancelled),
    Status.approved: (Status.in_progress, Status.cancelled),
    Status.in_progress: (
        Status.pending_review,
        Status.blocked,
        Status.on_hold,
        Status.cancelled,
    ),
    Status.pending_review: (Status.done, Status.rework, Status.cancelled),
    Status.rework: (Status.in_progress, Status.cancelled),
    Status.blocked: (Status.in_progress, Status.cancelled),
    Status.on_hold: (Status.in_progress, Status.cancelled),
    Status.done: (),       # terminal
    Status.cancelled: (),  # terminal
})

TERMINAL_STATUSES: frozenset[Status] = frozenset(
    s for s, targets in VALID_TRANSITIONS.items() if not targets
)


def coerce_status(value: Status | str) -> Status:
    """Return ``value`` as a Status, raising InvalidStatusError if unknown."""
    if isinstance(value, Status):
        return value
    try:
        return Status(value)
    except ValueError:
        raise InvalidStatusError(value) from None


def is_valid_transition(from_status: Status | str, to_status: Status | str) -> bool:
    """Check whether ``to_status`` is a structurally legal next state."""
    return coerce_status(to_status) in VALID_TRANSITIONS[coerce_status(from_status)]


def get_valid_next_statuses(from_status: Status | str) -> list[Status]:
    """Return the statuses reachable from ``from_status`` in declaration order."""
    return list(VALID_TRANSITIONS[coerce_status(from_status)])


def is_terminal(status: Status | str) -> bool:
    return coerce_status(status) in TERMINAL_STATUSES


def should_auto_transition(
    current: Status | str,
    *,
    is_overdue: bool = False,
    has_blocking_issues: bool = False,
    all_subtasks_complete: bool = False,
) -> Status | None:
    """Suggest an automatic status change for a task, or None.

    Overdue work in progress is moved to ``blocked``; a task under review
    whose subtasks are all complete is moved to ``done``.
    ``has_blocking_issues`` is accepted for callers that report it but does
    not trigger a change on its own.
    """
    current = coerce_status(current)

    if is_overdue and current is Status.in_progress:
        return Status.blocked

    if all_subtasks_complete and current is Status.pending_review:
        return Status.done

    return None
