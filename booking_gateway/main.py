"""
Booking Gateway - Main Application
Relays UI requests to the agenda backend, aggregates page-load data and
holds transient UI notifications
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from booking_gateway.config import Settings, get_settings
from booking_gateway.routes import health, notifications, pages, passthrough
from booking_gateway.services.notification_store import NotificationStore
from booking_gateway.utils.backend_client import BackendClient
from booking_gateway.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    settings: Settings = app.state.settings
    logger.info("Starting Booking Gateway", backend=settings.private_api_base)
    settings.log_config()

    backend_client = BackendClient(settings.private_api_base, timeout=settings.backend_timeout_seconds)
    await backend_client.start()
    app.state.backend_client = backend_client
    app.state.notification_store = NotificationStore(default_ttl_ms=settings.notification_ttl_ms)

    yield

    app.state.notification_store.clear()
    await backend_client.stop()
    logger.info("Booking Gateway shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application"""
    settings = settings or get_settings()
    setup_logging(settings.logging_config_path, settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Relays the agenda UI to its backend service",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        logger.info("Request received", method=request.method, url=str(request.url))

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code
        )
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Generic error response for anything a route let through"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            error_type=type(exc).__name__,
            method=request.method,
            url=str(request.url),
            exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            }
        )

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
    app.include_router(passthrough.router, prefix="/api", tags=["Backend"])
    app.include_router(pages.router, prefix="/pages", tags=["Pages"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": "booking-gateway",
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "booking_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
