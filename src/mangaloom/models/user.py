"""Pydantic models for users and account management."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import ApiData, ApiObject, OrderType


class UserAttributes(BaseModel):
    username: str
    roles: list[str] = Field(default_factory=list)
    version: int

    model_config = ConfigDict(extra="allow")


User = ApiObject[UserAttributes]
UserData = ApiData[User]


class UserOrder(BaseModel):
    username: OrderType | None = None

    model_config = ConfigDict(extra="forbid")


class UserQuery(BaseModel):
    """Filter model for `GET /user`."""

    limit: int | None = None
    offset: int | None = None
    ids: list[UUID] = Field(default_factory=list)
    username: str | None = None
    order: UserOrder | None = None

    model_config = ConfigDict(extra="forbid")


class UpdatePassword(BaseModel):
    oldPassword: str
    newPassword: str

    model_config = ConfigDict(extra="forbid")

    def __repr__(self) -> str:
        return "UpdatePassword(oldPassword='***', newPassword='***')"


class UpdateEmail(BaseModel):
    email: str

    model_config = ConfigDict(extra="forbid")


class CreateAccount(BaseModel):
    """Body of `POST /account/create`."""

    username: str
    password: str
    email: str

    model_config = ConfigDict(extra="forbid")

    def __repr__(self) -> str:
        return f"CreateAccount(username={self.username!r}, password='***', email={self.email!r})"


class EmailRequest(BaseModel):
    """Body of `POST /account/activate/resend` and `POST /account/recover`."""

    email: str

    model_config = ConfigDict(extra="forbid")


class CompleteAccountRecover(BaseModel):
    newPassword: str

    model_config = ConfigDict(extra="forbid")


class AccountActivateResponse(BaseModel):
    result: str | None = None

    model_config = ConfigDict(extra="allow")
