"""Constants used throughout the mangaloom library.

This module defines the API base URL, default client settings and the
user agent sent with every request.
"""

MANGADEX_API_BASE_URL = "https://api.mangadex.org"

# Default settings
DEFAULT_TIMEOUT: float = 30.0  # Default request timeout in seconds
DEFAULT_PAGE_SIZE: int = 10  # Page size the API applies when none is given

MANGALOOM_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"mangaloom/{MANGALOOM_VERSION}"

# Literal body returned by GET /ping
PING_RESPONSE: str = "pong"
