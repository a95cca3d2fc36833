# mangaloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, MANGADEX_API_BASE_URL
from .types import PostRequestHook, PreRequestHook


class ApiSettings(BaseSettings):
    """
    Manages user-configurable settings for the mangaloom client,
    primarily loaded from environment variables or a .env file.

    Settings are loaded from environment variables (prefixed with 'MANGALOOM_')
    or .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),  # Look in both .env and secrets.env
        env_file_encoding="utf-8",
        # Environment variables should be prefixed, e.g., MANGALOOM_USERNAME
        env_prefix="MANGALOOM_",
        extra="ignore",  # Ignore extra fields found in environment
        case_sensitive=False,
        arbitrary_types_allowed=True,  # Allow hook callables
    )

    # --- Client Behavior Settings ---
    base_url: str = Field(
        default=MANGADEX_API_BASE_URL, description="Base URL of the MangaDex API"
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )
    log_level: str = Field(
        default="INFO", description="Default level for configure_logging"
    )

    # --- Account credentials (defaults for `login`) ---
    username: str | None = Field(
        default=None, description="MangaDex account username (optional)"
    )
    password: str | None = Field(
        default=None, description="MangaDex account password (optional)"
    )

    # --- Hook Settings ---
    pre_request_hooks: list[PreRequestHook] = Field(
        default_factory=list,
        description="List of hooks to call before a request is made.",
    )
    post_request_hooks: list[PostRequestHook] = Field(
        default_factory=list,
        description="List of hooks to call after a response is received and decoded.",
    )


@lru_cache
def get_settings() -> ApiSettings:
    """
    Provides access to the client settings.

    Settings are loaded from environment variables (prefixed with 'MANGALOOM_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        ApiSettings: The settings instance.
    """
    return ApiSettings()
