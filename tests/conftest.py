"""Global pytest fixtures for the task workflow service.

This module provides shared fixtures for testing including:
- Transition contexts for common actors
- An async HTTP client bound to the FastAPI app
- Settings cache isolation
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tasktracking.workflow import TransitionContext


# ===========================================
# TRANSITION CONTEXT FIXTURES
# ===========================================


@pytest.fixture
def admin_context() -> TransitionContext:
    """Admin acting on an assigned task, no comment."""
    return TransitionContext(user_role="admin", has_assignee=True)


@pytest.fixture
def member_context() -> TransitionContext:
    """Non-privileged member acting on an assigned task, no comment."""
    return TransitionContext(user_role="member", has_assignee=True)


@pytest.fixture
def transition_payload() -> dict[str, Any]:
    """Request body for an admin approving and starting an assigned task."""
    return {
        "from_status": "awaiting_approval",
        "to_status": "in_progress",
        "user_role": "admin",
        "has_assignee": True,
        "task_title": "Fix bug",
    }


# ===========================================
# HTTP CLIENT FIXTURES
# ===========================================


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for API testing."""
    from tasktracking.main import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ===========================================
# CLEANUP FIXTURES
# ===========================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env overrides in one test do not leak."""
    from tasktracking.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
