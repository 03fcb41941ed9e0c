"""Custom middleware helpers for the B2B marketplace backend."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable


logger = logging.getLogger("b2bBackend.requests")


class RequestLoggingMiddleware:
    """Log one line per API request and tag the response with a request id.

    The id is taken from an incoming ``X-Request-ID`` header when a gateway
    already assigned one, otherwise a new UUID is generated. Bearer tokens are
    never logged.
    """

    header_name = "X-Request-ID"

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        request.request_id = request_id  # type: ignore[attr-defined]
        started = time.monotonic()

        response = self.get_response(request)

        elapsed_ms = (time.monotonic() - started) * 1000
        if request.path.startswith("/api/"):
            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "%s %s -> %s in %.1fms [request_id=%s]",
                request.method,
                request.path,
                response.status_code,
                elapsed_ms,
                request_id,
            )
        response[self.header_name] = request_id
        return response
