"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from usercrud_backend.api.routers import users_router
from usercrud_backend.database import (
    StoreError,
    UnavailableUserRepository,
    UserRepository,
    create_user_repository,
)
from usercrud_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

API_TITLE = "User CRUD API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API documentation for User CRUD application"
GREETING = "Hello World!"


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _format_validation_errors(exc)
    logger.error("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"message": message})


def create_api(
    repository: UserRepository | None = None,
    *,
    settings: BackendSettings | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    When ``repository`` is omitted one is built from ``MONGO_URI``. A store
    that cannot be reached at startup is logged and the application keeps
    serving; requests then fail individually with the store's error.
    """

    config = settings or get_settings()
    if repository is None:
        try:
            repository = create_user_repository(config.mongo_uri)
        except StoreError as exc:
            logger.exception("Error configuring the user store")
            repository = UnavailableUserRepository(exc)
    user_repository: UserRepository = repository

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            user_repository.connect()
        except StoreError:
            logger.exception("Error connecting to the user store")
        yield
        user_repository.close()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.user_repository = user_repository
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)

    @app.get("/", response_class=PlainTextResponse, tags=["Root"])
    def read_root() -> str:
        """Return the service greeting."""
        return GREETING

    app.include_router(users_router)
    return app
