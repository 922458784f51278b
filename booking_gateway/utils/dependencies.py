"""
FastAPI dependencies
Application-scoped objects created in the lifespan and shared by the routes
"""

from fastapi import Request

from booking_gateway.services.notification_store import NotificationStore
from booking_gateway.utils.backend_client import BackendClient


def get_backend_client(request: Request) -> BackendClient:
    """Backend client started in the application lifespan"""
    return request.app.state.backend_client


def get_notification_store(request: Request) -> NotificationStore:
    """Notification store of the running UI session"""
    return request.app.state.notification_store
