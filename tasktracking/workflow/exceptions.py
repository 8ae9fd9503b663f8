"""Custom exceptions for the task workflow engine."""

from fastapi import status


class WorkflowError(Exception):
    """Base exception for workflow engine errors."""

    def __init__(self, message: str, error_type: str = "workflow_error"):
        self.message = message
        self.error_type = error_type
        super().__init__(message)


class InvalidStatusError(WorkflowError, ValueError):
    """Raised when a value is not one of the known task statuses.

    This points at corrupted stored data or a programming error in the
    caller, so it is raised rather than returned as a soft rejection.
    """

    def __init__(self, value: object):
        super().__init__(
            f"Unknown task status: {value!r}",
            "invalid_status",
        )
        self.value = value


class TransitionRejectedError(WorkflowError):
    """Raised when a status change is refused by the workflow."""

    def __init__(self, from_status: str, to_status: str, reason: str):
        super().__init__(reason, "transition_rejected")
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason


ERROR_STATUS_CODES = {
    "invalid_status": status.HTTP_422_UNPROCESSABLE_CONTENT,
    "transition_rejected": status.HTTP_400_BAD_REQUEST,
}


def http_status_for(error: WorkflowError) -> int:
    return ERROR_STATUS_CODES.get(error.error_type, status.HTTP_400_BAD_REQUEST)
