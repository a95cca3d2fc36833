# mangaloom/types.py
"""Core type definitions for the mangaloom client.

This module defines the data structure for a single outgoing request and the
type aliases for the request hooks that can be registered through settings.
"""

from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field


class RequestData(BaseModel):
    """Encapsulates the data for one HTTP request."""

    method: str
    url: str
    params: list[tuple[str, str]] | None = None
    json_data: Any | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def build_request(self, client: httpx.AsyncClient) -> httpx.Request:
        """Builds the request through `client`, so its default headers and
        timeout apply.
        """
        return client.build_request(
            method=self.method,
            url=self.url,
            params=self.params,
            json=self.json_data,
            headers=self.headers,
        )


PreRequestHook = Callable[
    [str, str, list[tuple[str, str]] | None, httpx.Headers], None
]
"""Type alias for a pre-request hook.

Pre-request hooks are called before a request is sent, after the endpoint
has been resolved. They can be used for logging or to add headers.

Args:
    method (str): The HTTP method of the request (e.g., "GET", "POST").
    url (str): The full URL of the request, without the query string.
    params (list[tuple[str, str]] | None): A mutable list of encoded query
        pairs. Hooks can modify this list in place.
    headers (httpx.Headers): A mutable `httpx.Headers` object. Hooks can
        modify this object in place.
"""

PostRequestHook = Callable[[httpx.Response, Any, int], None]
"""Type alias for a post-request hook.

Post-request hooks are called after a response was received and decoded.

Args:
    response (httpx.Response): The raw `httpx.Response` object.
    decoded (Any): The decoded result returned to the caller.
    attempts (int): The number of attempts made. Always 1, requests are
        never retried.
"""
