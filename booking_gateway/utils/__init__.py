"""
Shared utilities for the booking gateway
"""

from .backend_client import BackendClient, BackendResponse
from .logger import get_logger, setup_logging

__all__ = [
    "BackendClient",
    "BackendResponse",
    "get_logger",
    "setup_logging",
]
