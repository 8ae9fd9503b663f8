"""Display metadata for task statuses and the actions that lead to them."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tasktracking.workflow.state_machine import Status, get_valid_next_statuses

STATUS_LABELS: Mapping[Status, str] = MappingProxyType({
    Status.awaiting_approval: "Awaiting Approval",
    Status.approved: "Approved",
    Status.in_progress: "In Progress",
    Status.pending_review: "Pending Review",
    Status.rework: "Rework",
    Status.blocked: "Blocked",
    Status.on_hold: "On Hold",
    Status.done: "Done",
    Status.cancelled: "Cancelled",
})

STATUS_COLORS: Mapping[Status, str] = MappingProxyType({
    Status.awaiting_approval: "bg-yellow-100 text-yellow-800 border-yellow-200",
    Status.approved: "bg-green-100 text-green-800 border-green-200",
    Status.in_progress: "bg-blue-100 text-blue-800 border-blue-200",
    Status.pending_review: "bg-purple-100 text-purple-800 border-purple-200",
    Status.rework: "bg-orange-100 text-orange-800 border-orange-200",
    Status.blocked: "bg-red-100 text-red-800 border-red-200",
    Status.on_hold: "bg-gray-100 text-gray-800 border-gray-200",
    Status.done: "bg-emerald-100 text-emerald-800 border-emerald-200",
    Status.cancelled: "bg-slate-100 text-slate-800 border-slate-200",
})


@dataclass(frozen=True, slots=True)
class ButtonDescriptor:
    """An action button that moves a task into ``status``."""

    status: Status
    label: str
    variant: str
    color_classes: str


# Keyed by the destination status the button moves the task into.
TRANSITION_BUTTONS: Mapping[Status, ButtonDescriptor] = MappingProxyType({
    Status.awaiting_approval: ButtonDescriptor(
        Status.awaiting_approval, "Submit for Approval", "outline",
        "bg-blue-100 text-blue-800 border-blue-200 hover:bg-blue-200",
    ),
    Status.approved: ButtonDescriptor(
        Status.approved, "Approve", "outline",
        "bg-green-100 text-green-800 border-green-200 hover:bg-green-200",
    ),
    Status.in_progress: ButtonDescriptor(
        Status.in_progress, "Approve & Start", "outline",
        "bg-blue-100 text-blue-800 border-blue-200 hover:bg-blue-200",
    ),
    Status.pending_review: ButtonDescriptor(
        Status.pending_review, "Ready for Review", "outline",
        "bg-purple-100 text-purple-800 border-purple-200 hover:bg-purple-200",
    ),
    Status.rework: ButtonDescriptor(
        Status.rework, "Request Rework", "outline",
        "bg-yellow-100 text-yellow-800 border-yellow-200 hover:bg-yellow-200",
    ),
    Status.blocked: ButtonDescriptor(
        Status.blocked, "Mark Blocked", "outline",
        "bg-orange-100 text-orange-800 border-orange-200 hover:bg-orange-200",
    ),
    Status.on_hold: ButtonDescriptor(
        Status.on_hold, "Put On Hold", "outline",
        "bg-amber-100 text-amber-800 border-amber-200 hover:bg-amber-200",
    ),
    Status.done: ButtonDescriptor(
        Status.done, "Mark Complete", "outline",
        "bg-emerald-100 text-emerald-800 border-emerald-200 hover:bg-emerald-200",
    ),
    Status.cancelled: ButtonDescriptor(
        Status.cancelled, "Cancel", "destructive",
        "bg-gray-100 text-gray-800 border-gray-200 hover:bg-gray-200",
    ),
})


def get_status_transition_buttons(current: Status | str) -> list[ButtonDescriptor]:
    """Return one button per valid next status, in transition-table order."""
    return [TRANSITION_BUTTONS[s] for s in get_valid_next_statuses(current)]
