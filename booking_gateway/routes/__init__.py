"""
API routes for the booking gateway
"""

from . import health, notifications, pages, passthrough

__all__ = ["health", "notifications", "pages", "passthrough"]
