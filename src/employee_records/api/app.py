"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator, Iterable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_records.api.routes import (
    DEFAULT_DESCRIPTORS,
    ResourceDescriptor,
    build_resources_router,
    employees_router,
    health_router,
)
from employee_records.config import get_settings
from employee_records.storage import RecordNotFoundError, Storage, create_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    if app.state.storage is None:
        app.state.storage = create_storage(get_settings())
        logger.info("Using %s storage", app.state.storage.backend)
    yield
    # Shutdown
    app.state.storage.close()


def create_app(
    storage: Storage | None = None,
    descriptors: Iterable[ResourceDescriptor] = DEFAULT_DESCRIPTORS,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Without ``storage`` the engine configured in settings is built at
    startup.
    """
    app = FastAPI(
        title="Employee Records API",
        description="Employee record store with per-employee child collections",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.storage = storage

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render HTTP errors as {"error": message}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed or invalid request bodies are client errors."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle records that fail validation after a merge."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(
        request: Request, exc: RecordNotFoundError
    ) -> JSONResponse:
        """Handle updates of missing records."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": f"{exc.label} not found"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(employees_router, prefix="/api")
    app.include_router(build_resources_router(descriptors), prefix="/api")

    return app


# Default app instance for uvicorn
app = create_app()
