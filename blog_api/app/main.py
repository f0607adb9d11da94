"""
Main entrypoint for the Blog Posts API.

This module assembles the FastAPI application, sets up logging,
builds the post store and service, and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the
app here makes it easy to run with uvicorn, e.g.::

    uvicorn blog_api.app.main:app --port 8080

Every error response has the body ``{"error": ..., "message": ...}``.
The exception handlers registered below produce that shape for
``HTTPException`` raised by the endpoints, for request validation
failures (reported as 400, not FastAPI's default 422) and for
unexpected errors.
"""

import logging
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import DataLoadError
from .core.loader import DataLoader
from .core.logging_config import setup_logging
from .core.store import PostStore
from .services.post_service import PostService

logger = logging.getLogger(__name__)

_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "validation_error",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal_error",
}


def _error_body(error: str, message: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error}
    if message:
        body["message"] = message
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        body = _error_body(exc.detail["error"], exc.detail.get("message"))
    else:
        body = _error_body(_ERROR_CODES.get(exc.status_code, "http_error"), str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any((err.get("loc") or ("",))[0] == "path" for err in errors):
        message = "Invalid post ID format"
    else:
        parts = []
        for err in errors:
            field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
            parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
        message = "; ".join(parts) or "Invalid request body"
    logger.warning("Invalid request %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("validation_error", message),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("internal_error", "Internal server error"),
    )


def create_app(settings: Optional[Settings] = None, store: Optional[PostStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment.
    store : Optional[PostStore]
        Store to serve.  A fresh, empty store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store and the
        service are available as ``app.state.post_store`` and
        ``app.state.post_service``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.post_store = store if store is not None else PostStore()
    app.state.post_service = PostService(app.state.post_store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["POST", "GET", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health", tags=["system"])
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        if not settings.load_data:
            logger.info("Initial data loading disabled")
            return
        try:
            DataLoader(app.state.post_store).load_from_file(settings.data_file)
        except DataLoadError as exc:
            logger.warning("Failed to load initial data, starting with empty store: %s", exc)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Blog Posts API stopped with %d posts in memory", len(app.state.post_store))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
