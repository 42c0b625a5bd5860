"""
Blog Backend: Request ID Middleware
=====================================

What:  Assigns an ID to each incoming request and returns it in X-Request-ID.
How:   Reuses the client's X-Request-ID when present, otherwise generates a
       short UUID; stores it in a ContextVar for loggers and error handlers.
Who:   Applied to every request via Starlette middleware.

View hops:
    A page render (GET /posts/3) makes its own API call (GET /api/posts/3).
    PostsClient sends that call with the page's X-Request-ID and with
    X-Blog-View naming the page path. Both requests therefore share one ID,
    and request_view_var tells the API side which page it is serving.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Set by PostsClient on API calls made while rendering a page
VIEW_HOP_HEADER = "X-Blog-View"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Page path that issued this API call; empty for browser/external requests
request_view_var: ContextVar[str] = ContextVar("request_view", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an ID and, for view hops, the originating page.

    Behavior:
        1. X-Request-ID from the caller, or a fresh 8-char hex ID
        2. X-Blog-View from the caller (PostsClient only), else empty
        3. Both stored in ContextVars and on request.state
        4. X-Request-ID echoed on the response
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        view_path = request.headers.get(VIEW_HOP_HEADER, "")

        request_id_var.set(rid)
        request_view_var.set(view_path)
        request.state.request_id = rid
        request.state.view_path = view_path

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
