"""
Rocks API — Request Logging Middleware
========================================

What:  One access-log line for every HTTP request.
How:   Times the downstream call, then logs the matched route template
       (e.g. /rocks/{index}) together with the path parameters that filled
       it, so all rock lookups group under one template in the logs.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Example line:
    GET /rocks/{index} index=42 404 0.8ms [a1b2c3d4]

Requests that match no route are logged under their raw path.
Query strings and headers are never logged.
"""

import logging
import time
from typing import Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from rocks_api.middleware.request_id import request_id_var

logger = logging.getLogger("rocks_api.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def matched_route(request: Request) -> Tuple[str, str]:
    """
    Return (template, params) for the route that handled `request`.

    The router records the matched route in the shared ASGI scope, so this
    is only meaningful after the downstream app has run.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None) or request.url.path
    params = " ".join(
        f"{name}={value}" for name, value in request.scope.get("path_params", {}).items()
    )
    return template, params


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs route template, path parameters, status and duration per request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        template, params = matched_route(request)
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s%s %d %.1fms [%s]",
            request.method,
            template,
            f" {params}" if params else "",
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "route": template,
                "path_params": params,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
