"""Configuration for the task workflow service."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from tasktracking.workflow import Role


class WorkflowSettings(BaseSettings):
    """Settings for the workflow service."""

    model_config = {"env_prefix": "TASKTRACKING_", "case_sensitive": False}

    # Service
    service_name: str = Field(
        default="tasktracking",
        description="Service name bound to every log entry",
    )
    api_prefix: str = Field(
        default="/api",
        description="Prefix for all API routers",
    )
    debug: bool = Field(
        default=False,
        description="Expose error details in 500 responses",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="json",
        description="'json' for structured output, anything else for console",
    )

    # HTTP
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Origins allowed by the CORS middleware",
    )

    # Workflow
    default_user_role: str = Field(
        default=Role.user.value,
        description="Role assumed when a request does not name one",
    )
    default_task_title: str = Field(
        default="Untitled task",
        description="Title used in notifications when a request omits one",
    )


@lru_cache
def get_settings() -> WorkflowSettings:
    """Get cached workflow settings."""
    return WorkflowSettings()
