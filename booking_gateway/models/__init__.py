"""
Data models for the booking gateway
"""

from .notification import Notification, NotificationCreate, NotificationResponse, NotificationType
from .resources import Agendamento, Cliente, NovoAgendamento, Servico

__all__ = [
    "Notification",
    "NotificationCreate",
    "NotificationResponse",
    "NotificationType",
    "Agendamento",
    "Cliente",
    "NovoAgendamento",
    "Servico",
]
