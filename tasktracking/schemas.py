"""Pydantic v2 request/response schemas for the workflow endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from tasktracking.workflow import Severity, Status


# ---------------------------------------------------------------------------
# Statuses
# ---------------------------------------------------------------------------


class ButtonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    status: Status
    label: str
    variant: str
    color_classes: str


class StatusResponse(BaseModel):
    status: Status
    label: str
    color_classes: str
    is_terminal: bool
    next_statuses: list[Status] = Field(default_factory=list)


class StatusTransitionsResponse(BaseModel):
    status: Status
    next_statuses: list[Status] = Field(default_factory=list)
    buttons: list[ButtonResponse] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    description: str
    severity: Severity


class TransitionRequest(BaseModel):
    from_status: Status
    to_status: Status
    user_role: str | None = Field(default=None, max_length=50)
    has_assignee: bool = False
    comment: str | None = Field(default=None, max_length=10_000)
    task_title: str | None = Field(default=None, max_length=500)


class ValidationResponse(BaseModel):
    valid: bool
    reason: str | None = None
    notification: NotificationResponse | None = None


class TransitionAcceptedResponse(BaseModel):
    from_status: Status
    to_status: Status
    notification: NotificationResponse


class NotificationPreviewRequest(BaseModel):
    from_status: Status
    to_status: Status
    task_title: str = Field(..., min_length=1, max_length=500)


# ---------------------------------------------------------------------------
# Automation
# ---------------------------------------------------------------------------


class AutoTransitionRequest(BaseModel):
    current_status: Status
    is_overdue: bool = False
    has_blocking_issues: bool = False
    all_subtasks_complete: bool = False


class AutoTransitionResponse(BaseModel):
    current_status: Status
    next_status: Status | None = None
