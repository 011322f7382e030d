"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests build their own instance with their own Settings

2. Lifespan Events
   - startup: open the Database (engine + session factory) and keep it
     on app.state, optionally create tables
   - shutdown: dispose the engine's connection pool

3. Exception Handlers
   - Request validation errors → 400 with the list of invalid fields
   - Domain errors → 404 / 409
   - Database errors → generic 500, details only in the logs
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bookstore import __version__
from bookstore.config import Settings, get_settings
from bookstore.database import Database
from bookstore.exceptions import BookConflictError, BookNotFoundError
from bookstore.routers import books_router

logger = logging.getLogger(__name__)


# =============================================================================
# Logging Configuration
# =============================================================================
def configure_logging(settings: Settings) -> None:
    """Configure root logging once, at the level from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """
    Flatten Pydantic errors into [{"field": ..., "message": ...}].

    Error locations look like ("body", "pages") or ("path", "isbn"); the
    first element only says where the value came from, so it is dropped.
    Errors about the body as a whole keep "body" as their field.
    """
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        field = ".".join(location[1:]) or (location[0] if location else "request")
        errors.append({"field": field, "message": error.get("msg", "Invalid value")})
    return errors


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown

    A Database passed to create_app() belongs to the caller and is left
    open on shutdown; one created here is disposed here.
    """
    settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name} ({settings.environment})...")

    owns_database = app.state.database is None
    if owns_database:
        app.state.database = Database.from_settings(settings)
    database: Database = app.state.database
    logger.info(f"Using {database!r}")

    if settings.auto_create_tables:
        logger.info("Creating missing tables")
        database.create_tables()

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    if owns_database:
        database.dispose()
        app.state.database = None


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use (defaults to get_settings())
        database: Existing storage client to use instead of creating one
            from settings at startup

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookstore API

A RESTful API for managing books, keyed by ISBN.

### Features
- **Books**: create, list, fetch, update and delete
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Answer invalid requests with 400 instead of FastAPI's default 422.

        Validation runs before the handler, so nothing has touched the
        database at this point.
        """
        errors = format_validation_errors(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Validation failed", "errors": errors},
        )

    @app.exception_handler(BookNotFoundError)
    async def not_found_exception_handler(
        request: Request,
        exc: BookNotFoundError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    @app.exception_handler(BookConflictError)
    async def conflict_exception_handler(
        request: Request,
        exc: BookConflictError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": exc.message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database is reachable.",
    )
    def health_check(request: Request) -> dict:
        """
        Health check endpoint.

        Used by load balancers and monitoring. Always answers 200; the
        database field says whether queries would currently work.
        """
        database: Database = request.app.state.database
        database_ok = database.ping()

        return {
            "status": "healthy" if database_ok else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "environment": settings.environment,
            "database": "ok" if database_ok else "unavailable",
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "books": "/books",
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app
# The database is only opened when the app starts, not at import time.

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m bookstore.main

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
