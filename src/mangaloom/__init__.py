"""mangaloom: A typed asynchronous Python client for the MangaDex API."""

from .constants import MANGALOOM_VERSION

__version__ = MANGALOOM_VERSION

from .auth import SessionTokenAuth, TokenStore
from .client import MangaloomClient
from .config import ApiSettings, get_settings
from .endpoints import ENDPOINT_DEFINITIONS, Endpoint, EndpointDefinition, ResponseShape, bind
from .exceptions import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
    MangaloomError,
    MissingCredentialsError,
    NetworkError,
    PingError,
    TimeoutError,
    TransportError,
)
from .log_config import configure_logging
from .models import (
    ApiErrorRecord,
    AuthTokens,
    CheckTokenResponse,
    Manga,
    MangaData,
    MangaQuery,
    ResourceType,
)
from .unwrapper import EnvelopeUnwrapper, Err, Ok, Page

__all__ = [
    # Core Client
    "MangaloomClient",
    "ApiSettings",
    "get_settings",
    "configure_logging",
    "TokenStore",
    "SessionTokenAuth",
    # Endpoints & envelopes
    "ENDPOINT_DEFINITIONS",
    "Endpoint",
    "EndpointDefinition",
    "ResponseShape",
    "bind",
    "EnvelopeUnwrapper",
    "Ok",
    "Err",
    "Page",
    # Exceptions
    "MangaloomError",
    "ApiError",
    "ConfigurationError",
    "MalformedResponseError",
    "MissingCredentialsError",
    "NetworkError",
    "PingError",
    "TimeoutError",
    "TransportError",
    # Key Models
    "ApiErrorRecord",
    "AuthTokens",
    "CheckTokenResponse",
    "Manga",
    "MangaData",
    "MangaQuery",
    "ResourceType",
]
