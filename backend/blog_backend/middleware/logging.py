"""
Blog Backend: Request Logging Middleware
==========================================

What:  One access log line per HTTP request, with page renders and the API
       calls they trigger told apart.
How:   Times the downstream call and logs on completion. Requests carrying
       X-Blog-View are API hops made by a page render; they are logged with
       source="view" and the page path, at DEBUG unless they fail, so a
       normal page load shows a single INFO line.
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses the request ID and view path).

Example (page load that hit a missing post):
    WARNING api GET /api/posts/9 500 3.1ms [1f3a9c2e] for page /posts/9
    WARNING GET /posts/9 500 5.4ms [1f3a9c2e] from 127.0.0.1

Request bodies (post titles and content) are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from blog_backend.middleware.request_id import request_id_var, request_view_var

logger = logging.getLogger("blog_backend.access")

SKIPPED_PATHS = {"/health"}


def level_for_status(status: int, view_hop: bool = False) -> int:
    """5xx → ERROR, 4xx → WARNING; successes are INFO, or DEBUG for view hops."""
    if status >= 500:
        # The page that made the call logs the same failure at its own level
        return logging.WARNING if view_hop else logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.DEBUG if view_hop else logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration for every request but /health."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        rid = request_id_var.get("")
        view_path = request_view_var.get("")
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        status = response.status_code
        fields = {
            "request_id": rid,
            "method": request.method,
            "path": path,
            "status": status,
            "duration_ms": duration_ms,
            "source": "view" if view_path else "client",
            "view_path": view_path,
        }

        if view_path:
            logger.log(
                level_for_status(status, view_hop=True),
                "api %s %s %d %.1fms [%s] for page %s",
                request.method, path, status, duration_ms, rid, view_path,
                extra=fields,
            )
        else:
            client_ip = request.client.host if request.client else "unknown"
            fields["client_ip"] = client_ip
            logger.log(
                level_for_status(status),
                "%s %s %d %.1fms [%s] from %s",
                request.method, path, status, duration_ms, rid, client_ip,
                extra=fields,
            )

        return response
