"""
LinkHub Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware registration, route mounting,
       and the MongoDB connection lifecycle in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn linkhub.main:app`, or the `linkhub` console script)
       and the test suite, which passes its own DocumentStore.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐         │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │         │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘         │
    │                                                      │
    │  Routes:                                             │
    │  /users  /connections  /posts  /messages  /health    │
    │                                                      │
    │  Exception Handlers:                                 │
    │  NotFound→404 │ Storage→500 │ anything else→500      │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the DocumentStore from settings (unless one was injected)
    3. Ping MongoDB; on failure log and abort startup (process exits)

    Shutdown:
    1. Close the MongoDB client (only if this app created it)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from linkhub import __version__
from linkhub.config import settings
from linkhub.database import DocumentStore
from linkhub.exceptions import LinkHubError, NotFoundError, StorageError
from linkhub.middleware.logging import RequestLoggingMiddleware
from linkhub.middleware.request_id import RequestIDMiddleware, request_id_var
from linkhub.routes import connections, health, messages, posts, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before the database connection is attempted.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The driver logs every heartbeat at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the MongoDB connection on startup and close it on shutdown.

    A store already attached to `app.state` (injected through create_app)
    is used as-is and left open; its owner closes it.

    Raises:
        StorageError: MongoDB did not answer the startup ping. uvicorn
                      reports the failed startup and the process exits.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("LinkHub Backend starting up...")

    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        store = DocumentStore.from_settings(settings)
        try:
            await store.ping()
        except Exception as e:
            logger.error("Error connecting to MongoDB at %s: %s", settings.mongo_url, str(e))
            store.close()
            raise StorageError(action="connecting to", resource="MongoDB", reason=str(e)) from e
        app.state.store = store
        logger.info("Connected to MongoDB (database '%s')", store.database_name)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("LinkHub Backend shutting down...")
    if owns_store:
        app.state.store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: Optional[dict] = None) -> dict:
    body = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        NotFoundError   → 404 Not Found
        StorageError    → 500 with "Error {action} {resource}"
        LinkHubError    → 500 (catch-all for custom)
        Exception       → 500 (unexpected errors)

    Driver error text only reaches the client when the raising service
    asked for it (post creation); otherwise it is logged server-side only.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body("not_found", exc.message))

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            "[%s] %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("storage_error", exc.message, exc.public_details),
        )

    @app.exception_handler(LinkHubError)
    async def handle_app_error(request: Request, exc: LinkHubError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content=_error_body("server_error", exc.message))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", "An unexpected error occurred."),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: DocumentStore to serve from. When omitted, the lifespan builds
               one from settings at startup.
    """
    app = FastAPI(
        title="LinkHub API",
        description=(
            "CRUD API over users, connections, posts and messages stored in MongoDB."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if store is not None:
        app.state.store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute
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

    app.include_router(users.router)
    app.include_router(connections.router)
    app.include_router(posts.router)
    app.include_router(messages.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured host/port."""
    import uvicorn

    uvicorn.run(
        "linkhub.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `linkhub.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
