"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import roster
from roster.api.dependencies import close_student_service, init_student_service
from roster.api.models import APIResponse
from roster.api.routes import students
from roster.students import (
    StudentError,
    StudentExistsError,
    StudentNotFoundError,
    StudentValidationError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    init_student_service()
    logger.info("Student service ready (in-memory roster)")
    yield
    # Shutdown
    close_student_service()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Roster API",
        description="REST API for managing a roster of student records",
        version=roster.__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, exc: StudentNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(StudentExistsError)
    async def student_exists_handler(_request: Request, exc: StudentExistsError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(StudentValidationError)
    async def student_validation_handler(
        _request: Request, exc: StudentValidationError
    ) -> JSONResponse:
        return _error(422, str(exc))

    @app.exception_handler(StudentError)
    async def student_error_handler(_request: Request, exc: StudentError) -> JSONResponse:
        logger.error("Unhandled student error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Include routers
    app.include_router(students.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
