"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from my_movie_list import __version__
from my_movie_list.api import api_router
from my_movie_list.config import get_settings
from my_movie_list.database import create_tables, engine
from my_movie_list.services.base import APIError, APINotFoundError, RateLimitError
from my_movie_list.services.errors import (
    AuthenticationError,
    ConflictError,
    DataIntegrityError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    ServiceError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()

# Most specific kinds first
SERVICE_ERROR_STATUS_CODES: list[tuple[type[ServiceError], int]] = [
    (InvalidArgumentError, 400),
    (AuthenticationError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (DataIntegrityError, 500),
]


def status_code_for(exc: ServiceError) -> int:
    """Map a service error kind to an HTTP status code."""
    for kind, status_code in SERVICE_ERROR_STATUS_CODES:
        if isinstance(exc, kind):
            return status_code
    return 500


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - runs on startup and shutdown."""
    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info("Database: %s", settings.database_url.split("///")[-1])  # Hide path details
    logger.info(
        "Watchmode API: %s", "configured" if settings.watchmode_api_key else "NOT CONFIGURED"
    )

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    if ":memory:" in settings.database_url:
        # Nothing to migrate; the schema has to exist on the shared connection
        await create_tables(engine)
        logger.info("Created tables in in-memory database")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


@app.exception_handler(ServiceError)
async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Handle service-level errors globally."""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.exception_handler(APINotFoundError)
async def api_not_found_error_handler(_request: Request, exc: APINotFoundError) -> JSONResponse:
    """Handle APINotFoundError exceptions globally."""
    return JSONResponse(
        status_code=404,
        content={"detail": str(exc) or "Resource not found"},
    )


@app.exception_handler(RateLimitError)
async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    """Handle RateLimitError exceptions globally."""
    headers = {}
    if exc.retry_after:
        headers["Retry-After"] = str(exc.retry_after)
    return JSONResponse(
        status_code=429,
        content={"detail": str(exc) or "Rate limit exceeded"},
        headers=headers,
    )


@app.exception_handler(APIError)
async def api_error_handler(_request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions globally."""
    return JSONResponse(
        status_code=exc.status_code or 500,
        content={"detail": str(exc) or "External API error"},
    )


# Include API router
app.include_router(api_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the API is running."""
    return {"status": "healthy", "version": __version__}
