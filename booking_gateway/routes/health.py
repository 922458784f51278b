"""
Health check routes for the booking gateway
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from booking_gateway.utils.backend_client import BackendClient
from booking_gateway.utils.dependencies import get_backend_client

router = APIRouter()

SERVICE_NAME = "booking-gateway"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    return {
        "service": SERVICE_NAME,
        "status": "healthy",
        "timestamp": _timestamp(),
        "version": request.app.version
    }


@router.get("/health/detailed")
async def detailed_health_check(request: Request, backend: BackendClient = Depends(get_backend_client)):
    """Detailed health check with backend reachability"""
    backend_status = await backend.health_check()
    return {
        "service": SERVICE_NAME,
        "status": "healthy" if backend_status == "healthy" else "degraded",
        "timestamp": _timestamp(),
        "version": request.app.version,
        "components": {
            "backend": {
                "status": backend_status,
                "url": backend.base_url
            },
            "notifications": {
                "live": len(request.app.state.notification_store)
            }
        }
    }
