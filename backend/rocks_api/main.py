"""
Rocks API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes logging setup, middleware registration, route mounting
       and error mapping in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (rocks_api.main:app) and by `python -m rocks_api`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │   Req ID     │→│    Logging      │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────┐ ┌──────────────────────┐ ┌──────────────┐ │
    │  │ GET /│ │ GET /rocks[/..[/..]] │ │ GET /calc..  │ │
    │  └──────┘ └──────────────────────┘ └──────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ RocksAPIError→500 │ *→500     │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rocks_api import __version__
from rocks_api.config import settings
from rocks_api.exceptions import NotFoundError, RocksAPIError
from rocks_api.middleware.logging import RequestLoggingMiddleware
from rocks_api.middleware.request_id import RequestIDMiddleware, request_id_var
from rocks_api.routes import calculator, rocks, root

logger = logging.getLogger(__name__)

# Pinned at INFO with its own stdout handler: the banner is printed whatever LOG_LEVEL says
startup_logger = logging.getLogger("rocks_api.startup")


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout, so container runtimes capture it without extra setup.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # RequestLoggingMiddleware already writes an access line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    startup_handler = logging.StreamHandler(sys.stdout)
    startup_handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%dT%H:%M:%S"))
    startup_logger.handlers[:] = [startup_handler]
    startup_logger.setLevel(logging.INFO)
    startup_logger.propagate = False


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce the listening port.
    Shutdown: log it. There are no resources to release.

    The banner names the configured PORT, which is what `python -m rocks_api`
    binds to. A bare `uvicorn rocks_api.main:app --port N` does not pass its
    port to the app; set PORT=N alongside it to keep the banner truthful.
    """
    setup_logging()
    startup_logger.info("Server listening on port %d", settings.port)
    logger.debug("%s %s, docs at /docs", settings.app_name, __version__)

    yield

    logger.info("%s shutting down", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, exc: RocksAPIError, rid: str, details: bool = True) -> dict:
    body = {"error": error, "message": exc.message, "request_id": rid}
    if details and exc.context:
        body["details"] = exc.context
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        NotFoundError           → 404 Not Found (includes RockNotFoundError)
        RocksAPIError (base)    → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Stack traces are logged server-side only, never returned.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(status_code=404, content=_error_body("not_found", exc, rid))

    @app.exception_handler(RocksAPIError)
    async def handle_app_error(request: Request, exc: RocksAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc, rid, details=False),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500 body, full stack trace in the log."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "A greeting, a fixed collection of rock names, and a four-operator "
            "calculator."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID wraps Logging, so the ID is set
    # before the access line is written.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(rocks.router)
    app.include_router(calculator.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `rocks_api.main:app` to be importable
app = create_app()
