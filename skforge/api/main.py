# skforge/api/main.py
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from .dependencies import get_config_sync, cleanup_dependencies
from .routes import blueprints, stacks, search, driver, spa
from .schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup
    yield
    # Shutdown
    await cleanup_dependencies()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance with routes, middleware, and error handlers.
    """
    config = get_config_sync()

    app = FastAPI(
        title="SKForge Blueprint API",
        description="Blueprint catalog, search and driver.md builder",
        version=__version__,
        lifespan=lifespan,
        debug=config.api.debug,
    )

    # Error bodies are always {"error": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    # Global Exception Handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "error_id": error_id},
        )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=False,
        allow_methods=config.api.cors_methods,
        allow_headers=config.api.cors_headers,
    )

    # Preflight: every OPTIONS request is answered here with 204
    @app.middleware("http")
    async def preflight_middleware(request: Request, call_next):
        if request.method != "OPTIONS":
            return await call_next(request)

        headers = {
            "Access-Control-Allow-Methods": ", ".join(config.api.cors_methods),
            "Access-Control-Allow-Headers": ", ".join(config.api.cors_headers),
        }
        origin = request.headers.get("origin")
        if "*" in config.api.cors_origins:
            headers["Access-Control-Allow-Origin"] = "*"
        elif origin in config.api.cors_origins:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Vary"] = "Origin"
        return Response(status_code=204, headers=headers)

    # Include routers
    app.include_router(blueprints.router, prefix="/api/blueprints", tags=["blueprints"])
    app.include_router(stacks.router, prefix="/api/stacks", tags=["stacks"])
    app.include_router(search.router, prefix="/api/search", tags=["search"])
    app.include_router(driver.router, prefix="/api/generate-driver", tags=["driver"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
        }

    # Must stay last: matches every remaining path
    app.include_router(spa.router)

    return app


# Default app instance for uvicorn
app = create_app()
