"""Preconditions attached to individual status transitions.

A transition must first be legal in the state machine; the rule for the
``(from, to)`` pair (or the cancellation rule shared by every source status)
then gates it on the acting user's role, on the task having an assignee and
on the presence of an explanatory comment.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tasktracking.logging_config import get_logger
from tasktracking.workflow.exceptions import TransitionRejectedError
from tasktracking.workflow.state_machine import Status, coerce_status, is_valid_transition

logger = get_logger(__name__)


class Role(str, enum.Enum):
    """Role labels known to the rule table.

    Roles are compared as plain strings, so callers may pass labels that are
    not listed here; they simply never satisfy a role gate.
    """

    admin = "admin"
    manager = "manager"
    team_lead = "team_lead"
    assignee = "assignee"
    user = "user"


@dataclass(frozen=True, slots=True)
class TransitionContext:
    """Facts about the acting user and the task, supplied per call."""

    user_role: str | None = None
    has_assignee: bool = False
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class TransitionRule:
    # requires_approval is descriptive; allowed_roles is the actual gate.
    requires_approval: bool = False
    requires_assignee: bool = False
    requires_comment: bool = False
    allowed_roles: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class TransitionResult:
    valid: bool
    reason: str | None = None


_MANAGERS = (Role.admin.value, Role.manager.value, Role.team_lead.value)

TRANSITION_RULES: Mapping[tuple[Status, Status], TransitionRule] = MappingProxyType({
    (Status.awaiting_approval, Status.in_progress): TransitionRule(
        requires_approval=True,
        requires_assignee=True,
        allowed_roles=_MANAGERS,
    ),
    (Status.approved, Status.in_progress): TransitionRule(requires_assignee=True),
    (Status.pending_review, Status.done): TransitionRule(
        allowed_roles=(*_MANAGERS, Role.assignee.value),
    ),
    (Status.pending_review, Status.rework): TransitionRule(
        requires_comment=True,
        allowed_roles=_MANAGERS,
    ),
    (Status.in_progress, Status.blocked): TransitionRule(requires_comment=True),
    (Status.in_progress, Status.on_hold): TransitionRule(requires_comment=True),
})

# Applies to every source status when no exact-pair rule exists.
ANY_TO_CANCELLED_RULE = TransitionRule(requires_comment=True)


def get_transition_rule(from_status: Status | str, to_status: Status | str) -> TransitionRule | None:
    """Return the rule governing a transition, falling back to the cancellation rule."""
    from_status, to_status = coerce_status(from_status), coerce_status(to_status)
    rule = TRANSITION_RULES.get((from_status, to_status))
    if rule is None and to_status is Status.cancelled:
        rule = ANY_TO_CANCELLED_RULE
    return rule


def validate_transition(
    from_status: Status | str,
    to_status: Status | str,
    context: TransitionContext | None = None,
) -> TransitionResult:
    """Decide whether a status change is permitted.

    Checks run in a fixed order and the first failure is reported:
    structural legality, role, assignee, comment. Rejections are returned,
    never raised; only unknown status values raise InvalidStatusError.
    """
    from_status, to_status = coerce_status(from_status), coerce_status(to_status)
    context = context or TransitionContext()

    if not is_valid_transition(from_status, to_status):
        return _reject(
            from_status, to_status,
            f"Cannot transition from {from_status.value} to {to_status.value}",
        )

    rule = get_transition_rule(from_status, to_status)
    if rule is None:
        return _accept(from_status, to_status)

    if rule.allowed_roles and context.user_role:
        if context.user_role not in rule.allowed_roles:
            return _reject(
                from_status, to_status,
                f"This action requires one of these roles: {', '.join(rule.allowed_roles)}",
            )

    if rule.requires_assignee and not context.has_assignee:
        return _reject(
            from_status, to_status,
            "This action requires the task to have an assignee",
        )

    if rule.requires_comment and not (context.comment or "").strip():
        return _reject(
            from_status, to_status,
            "This action requires a comment explaining the reason",
        )

    return _accept(from_status, to_status)


def require_transition(
    from_status: Status | str,
    to_status: Status | str,
    context: TransitionContext | None = None,
) -> None:
    """Validate a transition, raising TransitionRejectedError if it is refused."""
    result = validate_transition(from_status, to_status, context)
    if not result.valid:
        raise TransitionRejectedError(
            coerce_status(from_status).value,
            coerce_status(to_status).value,
            result.reason or "",
        )


def _accept(from_status: Status, to_status: Status) -> TransitionResult:
    logger.debug("transition_validated", from_status=from_status.value, to_status=to_status.value)
    return TransitionResult(valid=True)


def _reject(from_status: Status, to_status: Status, reason: str) -> TransitionResult:
    logger.debug(
        "transition_rejected",
        from_status=from_status.value,
        to_status=to_status.value,
        reason=reason,
    )
    return TransitionResult(valid=False, reason=reason)
