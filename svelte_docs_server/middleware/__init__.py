"""ASGI middleware for the HTTP transport."""

from .request_logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]
