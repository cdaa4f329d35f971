"""
Store API application factory.

Run with ``uvicorn assets_manager.api.main:create_app --factory``.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config.settings import Settings, get_settings
from ..container import Container
from ..exceptions import AssetsManagerError, error_for_status
from ..utils.structured_logging import configure_logging, get_logger
from . import api_router

logger = get_logger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


def _validation_payload(exc: RequestValidationError) -> Dict[str, Any]:
    """First pydantic error as ``{"error", "type", "field"}``."""
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request", "type": "ValidationError", "field": None}
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = str(first.get("msg", "Invalid value"))
    if message.startswith(VALUE_ERROR_PREFIX):
        message = message[len(VALUE_ERROR_PREFIX):]
    return {
        "error": message,
        "type": "ValidationError",
        "field": location[-1] if location else None,
    }


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AssetsManagerError)
    async def handle_app_error(request: Request, exc: AssetsManagerError) -> JSONResponse:
        logger.warning(
            "Request failed",
            path=request.url.path,
            error_type=exc.error_code,
            field=exc.field,
            operation="handle_app_error",
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        payload = _validation_payload(exc)
        logger.warning(
            "Request validation failed",
            path=request.url.path,
            field=payload["field"],
            operation="handle_request_validation",
        )
        return JSONResponse(status_code=400, content=payload)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error = error_for_status(exc.status_code, str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error",
            path=request.url.path,
            error_type=type(exc).__name__,
            operation="handle_unexpected",
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "type": "TransientError", "field": None},
        )


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """Build the store API around a configured container."""
    settings = settings or get_settings()
    configure_logging(level=settings.app.log_level, json_output=settings.app.is_production)

    if container is None:
        container = Container()
        container.configure(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        container.cleanup()

    app = FastAPI(
        title="AssetsManager API",
        description="Financial particulars, statistics and profiles",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    logger.info("API ready", environment=settings.app.environment.value, operation="create_app")
    return app


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    uvicorn.run(
        "assets_manager.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=settings.app.is_development,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()
