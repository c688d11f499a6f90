# 📄 File: devconnect/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts DevConnect, connects it to the database, plugs in
# all the web endpoints, and turns any error into a clear, consistent reply.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan-managed document store, app-scoped
# settings/security collaborators, CORS and request-context middleware, slowapi wiring,
# router registration and the JSON error envelope for every exception path.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn, slowapi
# - devconnect.shared.config.settings
# - devconnect.shared.infrastructure.database (MongoDocumentStore)
# - devconnect.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - `devconnect` console script
# - tests (create_application with an in-memory store)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Dict, Optional
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from devconnect.api.v1 import API_TAGS
from devconnect.api.v1.router import api_v1_router
from devconnect.shared.config.settings import Settings, get_settings
from devconnect.shared.core.exceptions import DevConnectException, is_server_error
from devconnect.shared.core.rate_limiter import limiter
from devconnect.shared.core.security import SecurityManager
from devconnect.shared.infrastructure.database import DocumentStore, MongoDocumentStore
from devconnect.shared.utils.logging import (
    log_context,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Connects the document store (creating its indexes) on startup and
    closes it on shutdown.
    """
    settings: Settings = app.state.settings
    store: DocumentStore = app.state.store

    log_startup_event(settings.APP_NAME, settings.APP_VERSION,
                      extra={"environment": settings.ENVIRONMENT})

    try:
        await store.connect()
        logger.info("✅ Document store connected")
    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    try:
        yield  # Application is running
    finally:
        logger.info("🔄 DevConnect API shutting down...")
        try:
            await store.close()
            logger.info("✅ Document store closed")
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}")
        log_shutdown_event(settings.APP_NAME)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": jsonable_encoder(details or {}),
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
    )


def create_application(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        store: Document store to use, defaults to MongoDB from settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # App-scoped collaborators resolved by devconnect.shared.core.dependencies
    app.state.settings = settings
    app.state.store = store or MongoDocumentStore(
        settings.MONGODB_URL,
        settings.MONGODB_DATABASE,
        server_selection_timeout_ms=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )
    app.state.security = SecurityManager(settings)

    # Rate limiting
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id):
            response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        return response

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(DevConnectException)
    async def devconnect_exception_handler(
        request: Request,
        exc: DevConnectException
    ) -> JSONResponse:
        """Handle custom DevConnect application exceptions."""
        if is_server_error(exc):
            logger.error(f"{exc.error_code}: {exc.message} {exc.details}", exc_info=exc)
            return _error_response(
                request,
                exc.status_code,
                exc.error_code,
                "An internal server error occurred",
                exc.details if settings.DEBUG else None,
            )

        return _error_response(request, exc.status_code, exc.error_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Render request-schema failures as 400 in the common envelope."""
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())[1:]),
                "message": error.get("msg"),
            }
            for error in exc.errors()
        ]
        return _error_response(
            request,
            400,
            "VALIDATION_ERROR",
            errors[0]["message"] if errors else "Invalid request",
            {"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        code = "NOT_FOUND" if exc.status_code == 404 else f"HTTP_{exc.status_code}"
        return _error_response(request, exc.status_code, code, str(exc.detail),
                               {"path": request.url.path})

    @app.exception_handler(Exception)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return _error_response(
            request,
            500,
            "INTERNAL_SERVER_ERROR",
            "An internal server error occurred",
            {"error_type": type(exc).__name__} if settings.DEBUG else None,
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn.

    Used by the ``devconnect`` console script and ``python -m devconnect.main``.
    """
    settings = get_settings()
    uvicorn.run(
        "devconnect.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
