import asyncio

import httpx

from .exceptions import MissingCredentialsError
from .log_config import logger
from .models.auth import AuthTokens


class TokenStore:
    """Holds the session/refresh token pair of one client.

    The pair is an immutable `AuthTokens` value that is only ever replaced or
    cleared as a whole, so readers that take a single snapshot never observe a
    half-updated pair.

    Credential lifecycle operations (login, logout, refresh, set) hold `lock`
    across their whole read-send-replace sequence. The lock is not re-entrant;
    ordinary requests read the snapshot without taking it.

    Attributes:
        lock: Serializes credential lifecycle operations.
    """

    def __init__(self, tokens: AuthTokens | None = None):
        self._tokens: AuthTokens | None = tokens
        self.lock = asyncio.Lock()

    @property
    def tokens(self) -> AuthTokens | None:
        return self._tokens

    def replace(self, tokens: AuthTokens | None) -> None:
        """Swap in a new pair (or clear it). Callers must hold `lock`."""
        if not self.lock.locked():
            logger.warning("TokenStore.replace called without holding the lock.")
        self._tokens = tokens
        logger.debug(
            "Stored credentials cleared." if tokens is None else "Stored credentials replaced."
        )

    def __repr__(self) -> str:
        state = "set" if self._tokens is not None else "empty"
        return f"TokenStore({state})"


class SessionTokenAuth:
    """Attaches the stored session token as a Bearer token.

    The token is attached to every request when one is stored, whether or not
    the endpoint requires it. An auth-required request with no stored token
    fails locally before anything is sent.

    Attributes:
        _store: The token store read on every request.
    """

    def __init__(self, store: TokenStore):
        self._store = store
        logger.debug("SessionTokenAuth initialized.")

    async def async_authenticate(
        self, request: httpx.Request, *, requires_auth: bool = False
    ) -> None:
        """Adds `Authorization: Bearer <session>` when a token is stored.

        Raises:
            MissingCredentialsError: If `requires_auth` and no token is stored.
        """
        tokens = self._store.tokens
        if tokens is None:
            if requires_auth:
                raise MissingCredentialsError(
                    f"{request.method} {request.url.path} requires a session token; log in first."
                )
            logger.trace("No session token stored, sending request unauthenticated.")
            return
        logger.trace("Authenticating request using SessionTokenAuth.")
        request.headers["Authorization"] = f"Bearer {tokens.session}"

    async def async_close(self) -> None:
        """No resources to close, this method is a no-op."""
