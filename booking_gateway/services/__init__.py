"""
Booking gateway services
"""

from .notification_store import NotificationStore
from .page_loader import PageData, ResourceFetch, load_page, load_resource

__all__ = [
    "NotificationStore",
    "PageData",
    "ResourceFetch",
    "load_page",
    "load_resource",
]
