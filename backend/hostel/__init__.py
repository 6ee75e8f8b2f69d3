"""FastAPI application factory for the hostel management backend."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aiosqlite import connect as aiosqlite_connect
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hostel.auth import AuthError, AuthQueries, Authenticator, configure_auth_router
from hostel.common import DatabaseError
from hostel.students import StudentQueries, configure_student_router

from .config import AppConfig, configure_logging, load_config_from_env

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

LOGGER = logging.getLogger(__name__)

API_TITLE = "Hostel Management API"


def _error_response(exc: AuthError | DatabaseError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Render domain errors as ``{"message": ...}`` bodies.

    :param app: The application to register the handlers on
    :return: The same application
    """

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(DatabaseError)
    async def database_error_handler(
        request: Request,
        exc: DatabaseError,
    ) -> JSONResponse:
        return _error_response(exc)

    return app


def configure_fastapi_app(config: AppConfig) -> FastAPI:
    """Configure and return the FastAPI application.

    :param config: Application configuration
    :return: Configured FastAPI application
    """
    if not Path(config.db_path).parent.exists():
        Path(config.db_path).parent.mkdir(parents=True, exist_ok=True)
        LOGGER.info(
            "Created directory for database at %s",
            Path(config.db_path).parent,
        )

    if not Path(config.db_path).exists():
        LOGGER.info("Database file does not exist at %s", config.db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
        """Application lifespan manager.

        Opens the database connection and wires the routers to it.
        """
        LOGGER.info("%s is starting with database %s", API_TITLE, config.db_path)

        async with aiosqlite_connect(
            config.db_path,
            timeout=config.db_timeout,
        ) as db_connection:
            auth_queries = AuthQueries(db_connection)
            student_queries = StudentQueries(db_connection)

            await auth_queries.initialize_tables()
            await student_queries.initialize_tables()

            auth_router = configure_auth_router(
                APIRouter(),
                Authenticator(auth_queries),
            )
            student_router = configure_student_router(APIRouter(), student_queries)

            app.include_router(auth_router, tags=["auth"])
            app.include_router(student_router, tags=["students"])

            yield

            LOGGER.info("%s is shutting down", API_TITLE)

    app = FastAPI(
        title=API_TITLE,
        version="0.1.0",
        lifespan=lifespan,
        root_path=config.root_path,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/")
    def read_root() -> str:
        return API_TITLE

    return app


def create_app(env_file: str | None = os.environ.get("ENV_FILE", ".env")) -> FastAPI:
    """Create and configure the FastAPI application.

    The default here is for uvicorn command line usage, in which case the user
    should set ENV_FILE environment variable if they want a different file.

    :param env_file: Optional path to the environment configuration file
    :return: Configured FastAPI application
    """
    config = load_config_from_env(env_file)
    configure_logging(config)
    return configure_fastapi_app(config)


__all__ = [
    "AppConfig",
    "configure_fastapi_app",
    "create_app",
    "load_config_from_env",
    "register_exception_handlers",
]
