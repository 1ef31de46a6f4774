"""
Sycamore Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling, and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌──────┐          │
    │  │  Req ID  │→│  Logging    │→│ GZip │→│ CORS │          │
    │  └──────────┘ └─────────────┘ └──────┘ └──────┘          │
    │                                                          │
    │  Routes:                                                 │
    │  GET /api/docs                 GET /health               │
    │  GET /api/mobile/members/test  GET /api/mobile/members/search │
    │  GET|POST /api/mobile/members/seed                       │
    │                                                          │
    │  Exception Handlers:                                     │
    │  DocumentationNotFound→404 │ Database→500 │ other→500    │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, open the connection pool (app.state.database)
    Shutdown: dispose the pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import Database
from app.exceptions import DatabaseError, DocumentationNotFoundError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import docs, health, members

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once during startup, before any other initialization.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party libraries log every operation at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Owns the connection pool for the lifetime of the process.

    Code before `yield` runs on startup, code after on shutdown.
    """
    setup_logging()
    logger.info("Sycamore Backend starting up...")

    app.state.database = Database(settings)
    logger.info("Connection pool created")
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Sycamore Backend shutting down...")
    await app.state.database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for the fixed error envelopes.

    Handler map:
        DocumentationNotFoundError → 404 {success: false, error}  (not logged)
        DatabaseError              → 500 {message}                (logged)
        Exception (fallback)       → 500 generic message          (logged with trace)

    Exception handlers NEVER expose internal details in the response.
    """

    @app.exception_handler(DocumentationNotFoundError)
    async def handle_documentation_not_found(request: Request, exc: DocumentationNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"success": False, "error": exc.message},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Database error: public message only, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"message": exc.message},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all: stack trace goes to the log, never to the client.

        Runs in Starlette's outermost error middleware, after RequestIDMiddleware
        has unwound, so the ID comes from request.state and the header is set here.
        """
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
            headers={"X-Request-ID": rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fresh instance each call, so tests can build isolated apps
    and override dependencies without touching module state.
    """
    app = FastAPI(
        title="Sycamore API",
        description="Member and documentation endpoints for the Sycamore admin dashboard.",
        version=__version__,
        docs_url="/swagger",      # /api/docs is the documentation-file endpoint
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(docs.router)
    app.include_router(members.router)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
