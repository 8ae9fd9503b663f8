"""Task tracking workflow FastAPI application."""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasktracking.config import get_settings
from tasktracking.logging_config import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)
from tasktracking.routes.workflow import router as workflow_router
from tasktracking.workflow import WorkflowError
from tasktracking.workflow.exceptions import http_status_for

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging on startup."""
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )

    logger.info("application_started", api_prefix=settings.api_prefix)
    yield
    logger.info("shutdown_complete")


def create_app() -> FastAPI:
    """Build the FastAPI application from the current settings."""
    settings = get_settings()

    app = FastAPI(
        title="Task Tracking Workflow",
        description="Task status workflow: transition checks and notifications",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        bind_request_context(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(WorkflowError)
    async def workflow_exception_handler(request: Request, exc: WorkflowError):
        logger.warning("workflow_error", error_type=exc.error_type, detail=exc.message)
        return JSONResponse(
            status_code=http_status_for(exc),
            content={"error": exc.error_type, "detail": exc.message},
        )

    app.include_router(workflow_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "service": settings.service_name}

    return app


app = create_app()
