"""
Rocks API — Request ID Middleware
===================================

What:  Assigns an ID to each incoming request and echoes it in the response.
Why:   Lets a client quote the X-Request-ID of a confusing response and lets
       us find every log line belonging to that request.
How:   Reuses a client-supplied X-Request-ID header or generates a short
       UUID, stores it in a ContextVar, returns it as a response header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ── Context Variable ──────────────────────────────────────────────────────
# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. If the client sent X-Request-ID, use it
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in ContextVar (loggers, exception handlers) and request.state
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
