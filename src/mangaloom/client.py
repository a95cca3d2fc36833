"""Asynchronous client for the MangaDex REST API.

This module provides `MangaloomClient`, which owns the HTTP transport, the
session/refresh token pair and the generic dispatcher that executes any
`Endpoint` from the endpoint table. Resource clients for the different API
areas (manga, chapters, covers, ...) are exposed as properties.
"""

import ssl
from http import HTTPStatus
from typing import Any, Self

import certifi
import httpx

from .auth import SessionTokenAuth, TokenStore
from .config import ApiSettings, get_settings
from .constants import PING_RESPONSE
from .endpoints import Endpoint, ResponseShape, bind
from .exceptions import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
    MissingCredentialsError,
    NetworkError,
    PingError,
    TimeoutError,
    TransportError,
)
from .log_config import logger
from .models.auth import (
    AuthTokens,
    CheckTokenResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from .resources import (
    AccountClient,
    AuthorClient,
    ChapterClient,
    CoverClient,
    CustomListClient,
    GroupClient,
    MangaClient,
    MiscClient,
    UserClient,
)
from .types import RequestData
from .unwrapper import RESULT_ERROR, RESULT_KEY, EnvelopeUnwrapper


class MangaloomClient:
    """Asynchronous client for the MangaDex API.

    Every call makes at most one network round trip: there is no caching,
    retrying or automatic token refresh. Credentials live in a `TokenStore`
    owned by this instance and only change through `login`, `logout`,
    `refresh` and `set_tokens`.

    Typical usage:
    ```python
    async with MangaloomClient() as client:
        await client.login("user", "password")
        page = await client.manga.list(MangaQuery(title="Solo Leveling"))
        for manga in page.ok_values():
            print(manga.data.attributes.title)
    ```

    Attributes:
        manga (MangaClient): Manga, tag, feed and reading-status endpoints.
        chapter (ChapterClient): Chapter endpoints.
        cover (CoverClient): Cover art endpoints.
        author (AuthorClient): Author endpoints.
        group (GroupClient): Scanlation group endpoints.
        custom_list (CustomListClient): Custom list endpoints.
        user (UserClient): User endpoints.
        account (AccountClient): Account creation and recovery endpoints.
        misc (MiscClient): At-home, legacy mapping, report and captcha endpoints.
        _settings (ApiSettings): The resolved settings for this client instance.
        _token_store (TokenStore): The credential store.
        _should_close_client (bool): Whether this instance owns `_http_client`.
    """

    def __init__(
        self,
        settings: ApiSettings | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        tokens: AuthTokens | None = None,
    ):
        """Initializes the MangaloomClient.

        Args:
            settings: Optional `ApiSettings`. If `None`, settings are loaded via
                `mangaloom.config.get_settings()`.
            base_url: Overrides `settings.base_url`.
            http_client: Optional pre-configured `httpx.AsyncClient`. It is not
                closed by `aclose()`.
            tokens: Optional previously saved token pair to start with.
        """
        self._settings: ApiSettings = settings or get_settings()
        self._base_url: str = (base_url or self._settings.base_url).rstrip("/")
        self._unwrapper = EnvelopeUnwrapper()
        self._token_store = TokenStore(tokens)
        self._auth = SessionTokenAuth(self._token_store)

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        self._manga = MangaClient(api_client=self)
        self._chapter = ChapterClient(api_client=self)
        self._cover = CoverClient(api_client=self)
        self._author = AuthorClient(api_client=self)
        self._group = GroupClient(api_client=self)
        self._custom_list = CustomListClient(api_client=self)
        self._user = UserClient(api_client=self)
        self._account = AccountClient(api_client=self)
        self._misc = MiscClient(api_client=self)

        logger.debug(f"MangaloomClient initialized for {self._base_url}")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings."""
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError) as e:
            verify_ssl = True
            logger.warning(
                f"Failed to load certifi CA bundle ({e}). Using default SSL verification."
            )

        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    # --- Resource clients ---

    @property
    def manga(self) -> MangaClient:
        return self._manga

    @property
    def chapter(self) -> ChapterClient:
        return self._chapter

    @property
    def cover(self) -> CoverClient:
        return self._cover

    @property
    def author(self) -> AuthorClient:
        return self._author

    @property
    def group(self) -> GroupClient:
        return self._group

    @property
    def custom_list(self) -> CustomListClient:
        return self._custom_list

    @property
    def user(self) -> UserClient:
        return self._user

    @property
    def account(self) -> AccountClient:
        return self._account

    @property
    def misc(self) -> MiscClient:
        return self._misc

    @property
    def unwrapper(self) -> EnvelopeUnwrapper:
        return self._unwrapper

    # --- Dispatch ---

    async def _send(self, endpoint: Endpoint) -> httpx.Response:
        """Run pre-request hooks, authenticate and send one request.

        Raises:
            MissingCredentialsError: Before anything is sent, if the endpoint
                requires auth and no session token is stored.
            TimeoutError: If the request times out.
            NetworkError: For connection-level failures.
            TransportError: For any other transport failure.
        """
        request_data = RequestData(
            method=endpoint.method,
            url=f"{self._base_url}/{endpoint.path.lstrip('/')}",
            params=list(endpoint.query) if endpoint.query else None,
            json_data=endpoint.body,
        )

        if self._settings.pre_request_hooks:
            hook_params = request_data.params
            hook_headers = httpx.Headers(request_data.headers)
            logger.debug(
                f"Executing {len(self._settings.pre_request_hooks)} pre-request hooks "
                f"for {request_data.method} {request_data.url}"
            )
            for hook in self._settings.pre_request_hooks:
                try:
                    hook(request_data.method, request_data.url, hook_params, hook_headers)
                except Exception as e:
                    logger.error(
                        f"Error executing pre-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                    )
            request_data.params = hook_params
            request_data.headers = {k: v for k, v in hook_headers.items()}

        request = request_data.build_request(self._http_client)
        await self._auth.async_authenticate(request, requires_auth=endpoint.requires_auth)

        if not request.headers.get("User-Agent"):
            request.headers["User-Agent"] = self._settings.user_agent

        logger.debug(f"Sending request: {request.method} {request.url}")
        if request.content:
            # Bodies may carry passwords or refresh tokens; log the size only.
            logger.trace(f"Request Body: {len(request.content)} bytes")

        try:
            response = await self._http_client.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(f"Network error for {request.url}: {e}", request=request) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise TransportError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        logger.trace(f"Response Headers: {response.headers}")
        return response

    def _decode(self, endpoint: Endpoint, response: httpx.Response) -> Any:
        is_error_status = response.status_code >= HTTPStatus.BAD_REQUEST
        try:
            response_json = response.json()
        except ValueError as e:
            if is_error_status:
                raise ApiError(
                    f"API request failed with status {response.status_code}",
                    response=response,
                ) from e
            raise MalformedResponseError(
                "Response body is not valid JSON", response=response
            ) from e

        if is_error_status:
            if isinstance(response_json, dict) and response_json.get(RESULT_KEY) == RESULT_ERROR:
                self._unwrapper.unwrap_single_item(response_json, response=response)
            raise ApiError(
                f"API request failed with status {response.status_code}",
                response=response,
            )

        payload_type = endpoint.payload_type
        match endpoint.shape:
            case ResponseShape.SINGLE:
                return self._unwrapper.unwrap_single_item(
                    response_json, payload_type, response=response
                )
            case ResponseShape.DISCARD:
                self._unwrapper.unwrap_single_item(response_json, response=response)
                return None
            case ResponseShape.PAGE:
                return self._unwrapper.unwrap_results(
                    response_json, payload_type, response=response
                )
            case ResponseShape.COLLECTION:
                return self._unwrapper.unwrap_collection(
                    response_json, payload_type, response=response
                )
            case ResponseShape.RAW:
                return self._unwrapper.unwrap_raw(response_json, payload_type)
        raise ConfigurationError(f"Unsupported response shape: {endpoint.shape!r}")

    def _run_post_request_hooks(self, response: httpx.Response, decoded: Any) -> None:
        if not self._settings.post_request_hooks:
            return
        logger.debug(
            f"Executing {len(self._settings.post_request_hooks)} post-request hooks "
            f"for {response.request.method} {response.request.url}"
        )
        for hook in self._settings.post_request_hooks:
            try:
                hook(response, decoded, 1)
            except Exception as e:
                logger.error(
                    f"Error executing post-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                )

    async def dispatch(self, endpoint: Endpoint) -> Any:
        """Execute one endpoint and decode its response.

        Args:
            endpoint: A bound `Endpoint`, usually from `endpoints.bind(...)`.

        Returns:
            The decoded result for the endpoint's response shape: the payload
            for `single`, None for `discard`, a `Page` for `page`, a list of
            `Ok`/`Err` for `collection` and the validated document for `raw`.

        Raises:
            MissingCredentialsError: If auth is required and no token is stored.
            TransportError: On transport failures (incl. `TimeoutError`, `NetworkError`).
            ApiError: On an error envelope or a 4xx/5xx response.
            MalformedResponseError: On a non-JSON, untagged or invalid 2xx body.
        """
        response = await self._send(endpoint)
        try:
            decoded = self._decode(endpoint, response)
        except MalformedResponseError as e:
            if e.response is None:
                e.response = response
            logger.error(f"Malformed response for {endpoint.method} {endpoint.path}: {e.message}")
            raise
        except ApiError as e:
            logger.error(f"API error for {endpoint.method} {endpoint.path}: {e}")
            raise
        self._run_post_request_hooks(response, decoded)
        return decoded

    async def call(self, name: str, **kwargs: Any) -> Any:
        """Bind the table row `name` with `kwargs` and dispatch it.

        Example:
            >>> await client.call("manga.get", id=manga_id)
        """
        return await self.dispatch(bind(name, **kwargs))

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: list[tuple[str, str]] | None = None,
        body: Any = None,
        requires_auth: bool = False,
        shape: ResponseShape = ResponseShape.SINGLE,
        payload_type: Any = None,
    ) -> Any:
        """Dispatch an ad-hoc endpoint that is not part of the table."""
        endpoint = Endpoint(
            method=method,
            path=path,
            query=query,
            body=body,
            requires_auth=requires_auth,
            shape=shape,
            payload_type=payload_type,
        )
        return await self.dispatch(endpoint)

    # --- Credential lifecycle ---

    @property
    def tokens(self) -> AuthTokens | None:
        """The currently stored token pair, if any."""
        return self._token_store.tokens

    async def set_tokens(self, tokens: AuthTokens | None) -> None:
        """Replace (or clear) the stored pair, e.g. to restore a saved session."""
        async with self._token_store.lock:
            self._token_store.replace(tokens)

    async def login(
        self, username: str | None = None, password: str | None = None
    ) -> AuthTokens:
        """Log in and store the returned token pair.

        Credentials default to `settings.username` / `settings.password`. On
        failure the previously stored pair is left untouched.

        Raises:
            ConfigurationError: If no username or password is available.
            ApiError: If the API rejects the credentials.
        """
        username = username or self._settings.username
        password = password or self._settings.password
        if not username or not password:
            raise ConfigurationError("login requires a username and a password.")

        async with self._token_store.lock:
            result: LoginResponse = await self.dispatch(
                bind("auth.login", body=LoginRequest(username=username, password=password))
            )
            self._token_store.replace(result.token)
        logger.info(f"Logged in as {username}.")
        return result.token

    async def logout(self) -> None:
        """Invalidate the session remotely, then clear the stored pair.

        If the remote call fails the stored pair is kept.

        Raises:
            MissingCredentialsError: If no session token is stored (nothing is sent).
        """
        async with self._token_store.lock:
            if self._token_store.tokens is None:
                raise MissingCredentialsError("Cannot log out: no session token stored.")
            await self.dispatch(bind("auth.logout"))
            self._token_store.replace(None)
        logger.info("Logged out.")

    async def refresh(self) -> RefreshTokenResponse:
        """Exchange the stored refresh token for a new token pair.

        Raises:
            MissingCredentialsError: If no refresh token is stored (nothing is sent).
        """
        async with self._token_store.lock:
            tokens = self._token_store.tokens
            if tokens is None:
                raise MissingCredentialsError("Cannot refresh: no refresh token stored.")
            result: RefreshTokenResponse = await self.dispatch(
                bind("auth.refresh", body=RefreshTokenRequest(token=tokens.refresh))
            )
            self._token_store.replace(result.token)
        logger.info("Session token refreshed.")
        return result

    async def check_token(self) -> CheckTokenResponse:
        """Return the permissions attached to the stored session token."""
        return await self.call("auth.check")

    async def ping(self) -> None:
        """Check that the API is reachable.

        Raises:
            PingError: If the body is not the literal `pong`.
        """
        response = await self._send(bind("ping"))
        if response.text != PING_RESPONSE:
            raise PingError(
                f"Unexpected ping response: {response.text[:100]!r}", response=response
            )
        self._run_post_request_hooks(response, response.text)
        logger.debug("Ping succeeded.")

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug("MangaloomClient internal HTTP client closed.")
        await self._auth.async_close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
