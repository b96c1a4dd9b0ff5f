"""
Request ID middleware for request tracking.
"""

import re
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from parrain.infrastructure.monitoring.logger import set_request_id

REQUEST_ID_HEADER = "X-Request-ID"

# Client IDs end up in log lines and response headers
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def incoming_request_id(request: Request) -> Optional[str]:
    """Caller-supplied request ID, or None when absent or malformed."""
    value = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if _VALID_REQUEST_ID.match(value):
        return value
    return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and track request IDs.

    Reuses a well-formed X-Request-ID from the caller, otherwise a UUID is
    generated. The ID is stored on request.state, bound to the logging
    context and echoed in the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request with ID tracking.

        Args:
            request: FastAPI request
            call_next: Next middleware/handler

        Returns:
            Response with X-Request-ID header
        """
        request_id = set_request_id(incoming_request_id(request))
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id

        return response
