"""
Roster Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns exactly one UserService.
Who:   Called by uvicorn (uvicorn roster.main:app) or the `roster` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌──────────────────────┐  │
    │  │ /users CRUD          │ │ GET / , GET /health  │  │
    │  └──────────────────────┘ └──────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ NotFound→404 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  app.state.user_service: the in-memory store        │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster import __version__
from roster.config import settings
from roster.exceptions import NotFoundError, RosterError, ValidationError
from roster.middleware import RequestIDMiddleware, RequestLoggingMiddleware, request_id_var
from roster.routes import health, users
from roster.services.user_service import UserService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # roster.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging on startup; report store size on shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Roster Backend %s starting up...", __version__)
    logger.info("Store holds %d users", len(app.state.user_service))
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("API docs: http://%s:%d/docs", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    # Nothing to flush: the store is in-memory and dies with the process
    logger.info(
        "Roster Backend shutting down (%d users discarded)",
        len(app.state.user_service),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler table:
        ValidationError         → 400 {"statusCode", "message": [...], "error"}
        RequestValidationError  → 400 (unparseable JSON body), same shape
        HTTPException           → its status (unknown route, bad method, unreadable body)
        NotFoundError           → 404 {"statusCode", "message", "error"}
        RosterError (base)      → its own status_code
        Exception (fallback)    → 500, no internal details
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        messages = [error.get("msg", "Invalid request") for error in exc.errors()]
        logger.warning("[%s] Malformed request: %s", rid, messages)
        error = ValidationError(messages)
        return JSONResponse(status_code=error.status_code, content=jsonable_encoder(error.to_response()))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Errors raised by the framework itself, in the same body shape."""
        reason = HTTPStatus(exc.status_code).phrase
        message = exc.detail
        if exc.status_code in (404, 405) and message == reason:
            message = f"Cannot {request.method} {request.url.path}"
        return JSONResponse(
            status_code=exc.status_code,
            content={"statusCode": exc.status_code, "message": message, "error": reason},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RosterError)
    async def handle_roster_error(request: Request, exc: RosterError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: the stack trace goes to the log, never to the client."""
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"statusCode": 500, "message": "Internal server error"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(user_service: Optional[UserService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        user_service: Store the app should serve. When omitted a new one is
                      created, seeded unless settings.seed_users is false.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    if user_service is None:
        user_service = UserService() if settings.seed_users else UserService(seed=[])

    app = FastAPI(
        title="Roster API",
        description="CRUD API over an in-memory collection of teachers, students and admins.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.user_service = user_service

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(users.router)

    return app


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    uvicorn.run(
        "roster.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `roster.main:app` to be importable
app = create_app()
