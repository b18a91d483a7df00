"""
ReliefHub Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers, routers and
       the document store; run() starts uvicorn on the configured port.
Who:   uvicorn (``uvicorn reliefhub.main:app``) or the ``reliefhub`` script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │ Req ID   │→│  Logging    │→│  CORS            │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes (/api/v1):                                  │
    │  register · login · supplies · donors ·             │
    │  community · volunteer            and GET /         │
    │                                                     │
    │  Exception Handlers:                                │
    │  Conflict→400 │ Unauthorized→401 │ DB/other→500     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → store.connect() (ping + indexes)
    Shutdown: store.disconnect()
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from reliefhub import __version__
from reliefhub.config import settings
from reliefhub.database import DocumentStore
from reliefhub.exceptions import (
    ConflictError,
    DatabaseError,
    ReliefHubError,
    UnauthorizedError,
)
from reliefhub.middleware.logging import RequestLoggingMiddleware
from reliefhub.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from reliefhub.routes import auth, community, donors, health, supplies, volunteers

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the document store on startup and close it on shutdown.

    A store that cannot be reached aborts startup: the server never starts
    listening without a database behind it. Configuration warnings, on the
    other hand, are logged and startup continues.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("ReliefHub Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    store: DocumentStore = app.state.store
    await store.connect()

    logger.info("Server is running on http://%s:%d", settings.host, settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("ReliefHub Backend shutting down...")
    await store.disconnect()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_body(error: str, message: str, request_id: Optional[str] = None) -> dict:
    return {
        "success": False,
        "error": error,
        "message": message,
        "request_id": request_id_var.get("") if request_id is None else request_id,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and error envelopes.

    Handler hierarchy:
        ConflictError        → 400 (duplicate registration)
        UnauthorizedError    → 401 (bad credentials)
        DatabaseError        → 500 (store unreachable / not connected)
        PyMongoError         → 500 (driver failure mid-request)
        ReliefHubError       → 500 (catch-all for custom)
        Exception            → 500 (everything else, e.g. malformed ObjectId)

    Internal details (connection strings, stack traces) are logged only.
    """

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return JSONResponse(status_code=400, content=error_body("conflict", exc.message))

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return JSONResponse(status_code=401, content=error_body("unauthorized", exc.message))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=error_body("server_error", "An internal error occurred. Please try again later."),
        )

    @app.exception_handler(PyMongoError)
    async def handle_driver_error(request: Request, exc: PyMongoError):
        logger.error(
            "[%s] Document store failure: %s", request_id_var.get(""), exc, exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=error_body("server_error", "An internal error occurred. Please try again later."),
        )

    @app.exception_handler(ReliefHubError)
    async def handle_app_error(request: Request, exc: ReliefHubError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content=error_body("server_error", exc.message))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside RequestIDMiddleware, so the header is set here
        rid = request_id_var.get("") or request.headers.get(REQUEST_ID_HEADER, "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
                request_id=rid,
            ),
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Document store to serve from. Defaults to a new DocumentStore
               built from settings; tests pass an in-memory replacement.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="ReliefHub API",
        description="Registration, login, and records for supplies, donors, "
                    "community posts and volunteers.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store or DocumentStore(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(supplies.router)
    app.include_router(donors.router)
    app.include_router(community.router)
    app.include_router(volunteers.router)
    app.include_router(health.router)

    return app


# uvicorn expects `reliefhub.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
