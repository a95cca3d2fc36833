"""Models for the `/auth` endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class AuthTokens(BaseModel):
    """The session/refresh token pair returned on login and refresh.

    Instances are immutable; the client replaces the whole pair at once.

    Attributes:
        session: Short-lived bearer token (about 15 minutes).
        refresh: Long-lived token (about one month) used only to obtain a new pair.
    """

    session: str
    refresh: str

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "AuthTokens(session='***', refresh='***')"


class LoginRequest(BaseModel):
    """Body of `POST /auth/login`.

    The API accepts usernames of 1 to 64 and passwords of 8 to 1024 characters;
    lengths are checked server side.
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"LoginRequest(username={self.username!r}, password='***')"


class LoginResponse(BaseModel):
    token: AuthTokens

    model_config = ConfigDict(extra="allow")


class RefreshTokenRequest(BaseModel):
    """Body of `POST /auth/refresh`; `token` must be the refresh token."""

    token: str


class RefreshTokenResponse(BaseModel):
    token: AuthTokens
    message: str | None = None

    model_config = ConfigDict(extra="allow")


class CheckTokenResponse(BaseModel):
    """Permissions of the logged-in user, from `GET /auth/check`."""

    isAuthenticated: bool
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")
