"""
Notification Models
Transient UI messages held by the notification store
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    """Severity of a notification"""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """A live notification"""
    id: int
    message: str
    type: NotificationType
    ttl_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'message': self.message,
            'type': self.type.value,
            'ttl_ms': self.ttl_ms
        }


class NotificationCreate(BaseModel):
    """Request body for pushing a notification"""
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.SUCCESS
    ttl_ms: Optional[int] = Field(None, gt=0, description="Time to live in milliseconds")


class NotificationResponse(BaseModel):
    id: int
    message: str
    type: NotificationType
    ttl_ms: int
