"""Request logging middleware.

Tags every HTTP response with a request id and logs its status and
latency, using the pure ASGI pattern.
"""

import logging
import time
from uuid import uuid4

from ..config import settings

logger = logging.getLogger(__name__)

# Liveness probes are polled constantly
QUIET_PATHS = ("/health", "/ready")


class RequestLoggingMiddleware:
    """
    Add a request id and basic security headers, then log the request.

    Headers added:
        - X-Request-Id: Unique request identifier for tracing
        - X-Content-Type-Options: nosniff
        - Strict-Transport-Security: (non-debug only)
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid4())
        start_time = time.perf_counter()
        status_code = 500

        async def send_with_headers(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                headers.append((b"x-content-type-options", b"nosniff"))
                if not settings.debug:
                    headers.append(
                        (b"strict-transport-security", b"max-age=31536000; includeSubDomains")
                    )
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_headers)
        finally:
            path = scope.get("path", "")
            if path not in QUIET_PATHS:
                latency_ms = int((time.perf_counter() - start_time) * 1000)
                logger.info(
                    f"{scope.get('method', '')} {path} -> {status_code} ({latency_ms}ms) [{request_id}]"
                )
