"""Workflow endpoints: status catalogue, transition checks and notifications.

These endpoints hold no task state. The task API calls
``POST /workflow/transitions`` with the stored status before persisting an
update and the UI uses the remaining endpoints to render available actions
and toasts.
"""

from fastapi import APIRouter, Depends

from tasktracking.config import WorkflowSettings, get_settings
from tasktracking.logging_config import bind_transition_context, get_logger
from tasktracking.schemas import (
    AutoTransitionRequest,
    AutoTransitionResponse,
    ButtonResponse,
    NotificationPreviewRequest,
    NotificationResponse,
    StatusResponse,
    StatusTransitionsResponse,
    TransitionAcceptedResponse,
    TransitionRequest,
    ValidationResponse,
)
from tasktracking.workflow import (
    STATUS_COLORS,
    STATUS_LABELS,
    Status,
    TransitionContext,
    get_status_change_notification,
    get_status_transition_buttons,
    get_valid_next_statuses,
    is_terminal,
    require_transition,
    should_auto_transition,
    validate_transition,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/workflow", tags=["workflow"])


def _context(body: TransitionRequest, settings: WorkflowSettings) -> TransitionContext:
    user_role = body.user_role or settings.default_user_role
    bind_transition_context(body.from_status, body.to_status, user_role)
    return TransitionContext(
        user_role=user_role,
        has_assignee=body.has_assignee,
        comment=body.comment,
    )


def _notification(body: TransitionRequest, settings: WorkflowSettings) -> NotificationResponse:
    notification = get_status_change_notification(
        body.from_status,
        body.to_status,
        body.task_title or settings.default_task_title,
    )
    return NotificationResponse.model_validate(notification)


@router.get("/statuses", response_model=list[StatusResponse])
async def list_statuses():
    """List every task status with display metadata and valid next statuses."""
    return [
        StatusResponse(
            status=s,
            label=STATUS_LABELS[s],
            color_classes=STATUS_COLORS[s],
            is_terminal=is_terminal(s),
            next_statuses=get_valid_next_statuses(s),
        )
        for s in Status
    ]


@router.get("/statuses/{task_status}/transitions", response_model=StatusTransitionsResponse)
async def get_status_transitions(task_status: Status):
    """Return the statuses reachable from ``task_status`` and their buttons."""
    return StatusTransitionsResponse(
        status=task_status,
        next_statuses=get_valid_next_statuses(task_status),
        buttons=[
            ButtonResponse.model_validate(b)
            for b in get_status_transition_buttons(task_status)
        ],
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate_status_change(
    body: TransitionRequest,
    settings: WorkflowSettings = Depends(get_settings),
):
    """Report whether a status change is permitted without rejecting the request."""
    result = validate_transition(body.from_status, body.to_status, _context(body, settings))
    if not result.valid:
        return ValidationResponse(valid=False, reason=result.reason)
    return ValidationResponse(valid=True, notification=_notification(body, settings))


@router.post("/transitions", response_model=TransitionAcceptedResponse)
async def check_status_change(
    body: TransitionRequest,
    settings: WorkflowSettings = Depends(get_settings),
):
    """Accept a status change or reject it with 400 and the reason.

    Rejections propagate as ``TransitionRejectedError`` to the application's
    workflow error handler.
    """
    require_transition(body.from_status, body.to_status, _context(body, settings))
    logger.info("status_change_accepted")
    return TransitionAcceptedResponse(
        from_status=body.from_status,
        to_status=body.to_status,
        notification=_notification(body, settings),
    )


@router.post("/notifications/preview", response_model=NotificationResponse)
async def preview_notification(body: NotificationPreviewRequest):
    """Return the notification for a status change, legal or not."""
    notification = get_status_change_notification(
        body.from_status, body.to_status, body.task_title,
    )
    return NotificationResponse.model_validate(notification)


@router.post("/auto-transition", response_model=AutoTransitionResponse)
async def suggest_auto_transition(body: AutoTransitionRequest):
    """Suggest an automatic status change for an overdue or finished task."""
    next_status = should_auto_transition(
        body.current_status,
        is_overdue=body.is_overdue,
        has_blocking_issues=body.has_blocking_issues,
        all_subtasks_complete=body.all_subtasks_complete,
    )
    if next_status is not None:
        logger.info(
            "auto_transition_suggested",
            current_status=body.current_status.value,
            next_status=next_status.value,
        )
    return AutoTransitionResponse(current_status=body.current_status, next_status=next_status)
