"""structlog setup and per-request log context for the workflow service.

Every log line written while a request is handled carries ``request_id``.
Transition endpoints also bind the status pair and the effective role, so
the engine's ``transition_validated`` / ``transition_rejected`` debug events
can be traced back to the request that caused them.
"""

import logging
import sys
from enum import Enum

import structlog

REQUEST_CONTEXT_KEYS = ("request_id", "user_role", "from_status", "to_status")


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    service_name: str = "tasktracking",
) -> None:
    """
    Configure structlog for the workflow service.

    Args:
        level: Minimum level name, e.g. ``DEBUG`` to see every rule decision
        json_format: JSON lines when True, coloured console output otherwise
        service_name: Bound as ``service`` on every entry
    """
    threshold = _level_number(level)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=threshold)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str) -> None:
    structlog.contextvars.bind_contextvars(request_id=request_id)


def bind_transition_context(
    from_status: Enum | str,
    to_status: Enum | str,
    user_role: str | None,
) -> None:
    """Bind the status change under evaluation to subsequent log entries.

    Enum members are logged by value. A missing role is left unbound.
    """
    context = {
        "from_status": getattr(from_status, "value", from_status),
        "to_status": getattr(to_status, "value", to_status),
    }
    if user_role:
        context["user_role"] = user_role
    structlog.contextvars.bind_contextvars(**context)


def clear_request_context() -> None:
    """Drop everything bound for the current request."""
    structlog.contextvars.unbind_contextvars(*REQUEST_CONTEXT_KEYS)
