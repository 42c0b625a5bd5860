"""
Blog Backend: Posts API Client
================================

What:  Thin httpx wrapper the HTML views use to talk to the posts API.
How:   One method per API route; JSON bodies are returned as plain dicts so
       the templates render exactly what the API sent.
Who:   Injected into the view handlers by get_posts_client().

Target selection:
    API_BASE_URL set   → requests go over the network to that base URL
    API_BASE_URL empty → requests go to this same application in-process
                         through httpx.ASGITransport
"""

import logging
from typing import Any, AsyncGenerator, Dict, List, Union
from urllib.parse import quote

import httpx
from fastapi import Request

from blog_backend.config import settings
from blog_backend.exceptions import ApiClientError
from blog_backend.middleware.request_id import (
    REQUEST_ID_HEADER,
    VIEW_HOP_HEADER,
    request_id_var,
)

logger = logging.getLogger(__name__)

# Host used when the client is routed through ASGITransport; never resolved.
IN_PROCESS_BASE_URL = "http://blog.internal"


def _error_message(response: httpx.Response) -> str:
    """The API's `message` field when the body is a JSON error, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return response.text


class PostsClient:
    """
    Async client for /api/posts.

    Raises ApiClientError for any non-2xx answer or transport failure; the
    error carries the upstream status code (502 when nothing came back).
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def list_posts(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/posts")

    async def get_post(self, post_id: Union[int, str]) -> Dict[str, Any]:
        # Quoted as a single path segment: "1?x" must not turn into a query string
        return await self._request("GET", f"/api/posts/{quote(str(post_id), safe='')}")

    async def create_post(self, title: str, content: str) -> Dict[str, Any]:
        return await self._request(
            "POST", "/api/posts", json={"title": title, "content": content}
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Posts API unreachable: %s %s: %s", method, url, e)
            raise ApiClientError(
                status_code=502,
                message=str(e) or type(e).__name__,
                context={"method": method, "url": url},
            ) from e

        if response.is_error:
            raise ApiClientError(
                status_code=response.status_code,
                message=_error_message(response),
                context={"method": method, "url": url},
            )
        return response.json()


def build_http_client(request: Request) -> httpx.AsyncClient:
    """
    Create the httpx client for one view request.

    Every API call it makes carries the page's request ID and the page path
    in X-Blog-View, so the access log attributes the call to the page.
    """
    headers = {VIEW_HOP_HEADER: request.url.path}
    rid = request_id_var.get("")
    if rid:
        headers[REQUEST_ID_HEADER] = rid

    if settings.api_base_url:
        return httpx.AsyncClient(base_url=settings.api_base_url, headers=headers)
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=request.app),
        base_url=IN_PROCESS_BASE_URL,
        headers=headers,
    )


async def get_posts_client(request: Request) -> AsyncGenerator[PostsClient, None]:
    """FastAPI dependency yielding a PostsClient bound to a per-request httpx client."""
    async with build_http_client(request) as http:
        yield PostsClient(http)
