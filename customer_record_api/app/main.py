"""
Main entrypoint for the Customer Record API.

``create_app`` assembles the FastAPI application: logging, CORS,
exception handlers, the customer routes and a lifespan that opens the
SQLite store once at startup and closes it at shutdown.  A module-level
``app`` is created at import time so it can be served directly::

    uvicorn customer_record_api.app.main:app --port 5000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import CustomerStore
from .core.errors import CustomerServiceError, StoreError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and framework exceptions to ``{"error": ...}`` bodies."""

    @app.exception_handler(CustomerServiceError)
    async def service_error_handler(request: Request, exc: CustomerServiceError) -> JSONResponse:
        if isinstance(exc, StoreError):
            logger.error("Store error on %s %s: %s", request.method, request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON or wrong field types in the request body.
        errors = exc.errors()
        detail = errors[0].get("msg") if errors else "Invalid request"
        return _error(status.HTTP_400_BAD_REQUEST, f"Invalid request: {detail}")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module-level
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured application.  The store is opened when the
        lifespan starts, so tests must enter the ``TestClient`` context.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = CustomerStore(app_settings.database_url).open()
        app.state.store = store
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()
