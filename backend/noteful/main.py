"""
Noteful Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       error translation and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance that
       owns its own engine and session factory (app.state).
Who:   Called by uvicorn (uvicorn noteful.main:app) and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Access Log → GZip → CORS  │
    │                                                     │
    │  Routes:                                            │
    │    {prefix}/folders[/{folder_id}]                   │
    │    {prefix}/notes[/{note_id}]                       │
    │    /health                                          │
    │                                                     │
    │  Exception Handlers → {"error": {"message": ...}}   │
    │    ValidationError / bad body → 400                 │
    │    NotFoundError / unknown route → 404              │
    │    SQLAlchemyError / anything else → 500 (opaque)   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, config validation, optional table creation
    Shutdown: dispose the engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from noteful import __version__
from noteful.config import settings
from noteful.database import (
    build_engine,
    build_session_factory,
    create_tables,
    dispose_engine,
)
from noteful.exceptions import NotefulError, NotFoundError, ValidationError
from noteful.middleware.logging import RequestLoggingMiddleware
from noteful.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from noteful.routes import folders, health, notes
from noteful.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup (before any other initialization).
    Format:  %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # These log every connection/statement at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup sequence:
        1. Setup logging
        2. Validate critical configuration
        3. Create tables if DB_CREATE_TABLES is set

    Shutdown sequence:
        1. Dispose the app's database engine
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Noteful Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health will report the store as disconnected
        logger.error("Configuration error: %s", str(e))

    if settings.db_create_tables:
        await create_tables(app.state.engine)
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Noteful Backend shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    """Every error leaves the API as {"error": {"message": ...}}."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.from_message(message).model_dump(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (body isn't the expected shape)
        NotFoundError           → 404 Not Found
        HTTPException           → its own status (unknown route, bad method)
        SQLAlchemyError         → 500 (store failure, details logged only)
        NotefulError (base)     → 500
        Exception (fallback)    → 500

    Exception handlers never expose internal details (stack traces, SQL)
    in the response body.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        # Client mistakes are routine; not logged as errors
        logger.info("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = "Invalid request body"
        errors = exc.errors()
        if errors:
            loc = [part for part in errors[0].get("loc", ()) if part != "body"]
            if loc and isinstance(loc[-1], str):
                message = f"Invalid '{loc[-1]}' in request body"
        logger.info("[%s] Malformed request: %s", request_id_var.get(""), errors)
        return error_response(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s", rid, str(exc), exc_info=True)
        return error_response(500, "An internal error occurred. Please try again later.")

    @app.exception_handler(NotefulError)
    async def handle_noteful_error(request: Request, exc: NotefulError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(500, "An internal error occurred. Please try again later.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace is logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(
            500, "An unexpected error occurred. Please try again or contact support."
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database_url: Overrides settings.database_url (tests pass a SQLite file).

    The engine is created here (not at import time of the database module)
    and stored on app.state together with its session factory; every request
    session comes from that factory via get_db_session.
    """
    app = FastAPI(
        title="Noteful API",
        description="Folders and notes, over a small JSON CRUD API.",
        version=__version__,
        lifespan=lifespan,
    )

    engine = build_engine(database_url)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(folders.router, prefix=settings.api_prefix)
    app.include_router(notes.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


# uvicorn expects `noteful.main:app` to be importable
app = create_app()
