"""Task status workflow engine."""

from tasktracking.workflow.buttons import (
    STATUS_COLORS,
    STATUS_LABELS,
    ButtonDescriptor,
    get_status_transition_buttons,
)
from tasktracking.workflow.exceptions import (
    InvalidStatusError,
    TransitionRejectedError,
    WorkflowError,
)
from tasktracking.workflow.notifications import (
    NotificationDescriptor,
    Severity,
    get_status_change_notification,
)
from tasktracking.workflow.rules import (
    Role,
    TransitionContext,
    TransitionResult,
    TransitionRule,
    require_transition,
    validate_transition,
)
from tasktracking.workflow.state_machine import (
    TERMINAL_STATUSES,
    VALID_TRANSITIONS,
    Status,
    get_valid_next_statuses,
    is_terminal,
    is_valid_transition,
    should_auto_transition,
)

__all__ = [
    "STATUS_COLORS",
    "STATUS_LABELS",
    "TERMINAL_STATUSES",
    "VALID_TRANSITIONS",
    "ButtonDescriptor",
    "InvalidStatusError",
    "NotificationDescriptor",
    "Role",
    "Severity",
    "Status",
    "TransitionContext",
    "TransitionRejectedError",
    "TransitionResult",
    "TransitionRule",
    "WorkflowError",
    "get_status_change_notification",
    "get_status_transition_buttons",
    "get_valid_next_statuses",
    "is_terminal",
    "is_valid_transition",
    "require_transition",
    "should_auto_transition",
    "validate_transition",
]
