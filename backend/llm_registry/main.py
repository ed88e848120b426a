"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from llm_registry.api.routes.v1 import v1_router
from llm_registry.core.config import settings
from llm_registry.core.exceptions import AppException
from llm_registry.core.logfire_setup import instrument_app, setup_logfire
from llm_registry.providers.registry import get_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the model registry before serving.

    A ConfigurationError propagates out of startup so the process never
    reports ready without a usable model.
    """
    registry = get_registry()
    logger.info("Serving %d providers", len(registry.models))
    yield


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert domain exceptions into JSON error responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.code, "message": exc.message, "details": exc.details}},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logfire()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.include_router(v1_router, prefix=settings.API_V1_STR)

    instrument_app(app)
    return app


app = create_app()
