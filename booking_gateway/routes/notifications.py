"""
Notification Routes
Push, list and dismiss transient UI notifications
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from booking_gateway.models.notification import NotificationCreate, NotificationResponse
from booking_gateway.services.notification_store import NotificationStore
from booking_gateway.utils.dependencies import get_notification_store
from booking_gateway.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(store: NotificationStore = Depends(get_notification_store)):
    """Live notifications, newest first"""
    return [n.to_dict() for n in store.notifications]


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def push_notification(
    payload: NotificationCreate,
    store: NotificationStore = Depends(get_notification_store),
):
    notification = store.push(payload.message, type=payload.type, ttl_ms=payload.ttl_ms)
    logger.debug("Notification pushed", id=notification.id, type=notification.type.value)
    return notification.to_dict()


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_notification(
    notification_id: int,
    store: NotificationStore = Depends(get_notification_store),
):
    """Remove a notification before it expires"""
    if not store.dismiss(notification_id):
        raise HTTPException(status_code=404, detail=f"Notification {notification_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
