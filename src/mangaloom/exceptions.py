"""Custom exception classes for the mangaloom library."""

from collections.abc import Sequence

import httpx

from .models.errors import ApiErrorRecord


class MangaloomError(Exception):
    """Base exception class for all mangaloom errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            # Prefer response info if available
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class TransportError(MangaloomError):
    """Represents a failure of the HTTP layer (connection, DNS, TLS, protocol).

    No response was received, so only the request is attached.
    """

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class TimeoutError(TransportError):
    """Represents a request timeout error.

    Raised when an HTTP request does not complete within the configured timeout.
    """


class NetworkError(TransportError):
    """Represents a network connection error (e.g., DNS resolution failure, connection refused)."""


class MalformedResponseError(MangaloomError):
    """The response body is not valid JSON, lacks a recognizable `result` tag,
    or does not match the expected payload shape."""


class ApiError(MangaloomError):
    """Represents an error reported by the API.

    Raised for `{"result": "error", "errors": [...]}` envelopes and for
    4xx/5xx responses whose body is not an error envelope (in which case
    `errors` is empty).

    Attributes:
        errors: The structured error records sent by the API.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: Sequence[ApiErrorRecord] = (),
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.errors: list[ApiErrorRecord] = list(errors)

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response, falling back to the first error record."""
        if self.response is not None:
            return self.response.status_code
        if self.errors:
            return self.errors[0].status
        return None


class MissingCredentialsError(MangaloomError):
    """Raised locally when an operation needs a session or refresh token and
    none is stored. No request is sent."""

    def __init__(self, message: str = "No authentication tokens are stored."):
        super().__init__(message)


class PingError(MangaloomError):
    """The liveness endpoint answered with something other than the expected literal."""


class ConfigurationError(MangaloomError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)
