"""
Booking Gateway

Request-forwarding and client-state layer between the agenda UI and its
backend service.
"""

__version__ = "1.0.0"
