# mangaloom/resources/user_client.py
"""Clients for the MangaDex user and account endpoints."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..models.user import (
    CompleteAccountRecover,
    CreateAccount,
    EmailRequest,
    UpdateEmail,
    UpdatePassword,
    UserData,
    UserQuery,
)
from ..unwrapper import Page
from .base_client import BaseResourceClient


class UserClient(BaseResourceClient):
    """Client for `/user`. Everything except `get` requires a session token."""

    async def list(self, query: UserQuery | Mapping[str, Any] | None = None) -> Page:
        return await self._call("user.list", query=query)

    async def get(self, user_id: UUID | str) -> UserData:
        return await self._call("user.get", id=user_id)

    async def me(self) -> UserData:
        """The logged-in user."""
        return await self._call("user.me")

    async def delete(self, user_id: UUID | str) -> None:
        """Request deletion of an account; it is confirmed by `approve_deletion`."""
        await self._call("user.delete", id=user_id)

    async def approve_deletion(self, code: UUID | str) -> None:
        await self._call("user.approve_deletion", code=code)

    async def update_password(self, old_password: str, new_password: str) -> None:
        await self._call(
            "user.update_password",
            body=UpdatePassword(oldPassword=old_password, newPassword=new_password),
        )

    async def update_email(self, email: str) -> None:
        await self._call("user.update_email", body=UpdateEmail(email=email))

    async def followed(self, limit: int | None = None, offset: int | None = None) -> Page:
        """Users followed by the logged-in user."""
        return await self._call("user.followed", query={"limit": limit, "offset": offset})


class AccountClient(BaseResourceClient):
    """Client for `/account`: sign-up, activation and password recovery."""

    async def create(self, username: str, password: str, email: str) -> UserData:
        return await self._call(
            "account.create",
            body=CreateAccount(username=username, password=password, email=email),
        )

    async def activate(self, code: str) -> None:
        await self._call("account.activate", code=code)

    async def resend_activation(self, email: str) -> None:
        await self._call("account.resend_activation", body=EmailRequest(email=email))

    async def recover(self, email: str) -> None:
        """Send a recovery code to `email`."""
        await self._call("account.recover", body=EmailRequest(email=email))

    async def complete_recover(self, code: str, new_password: str) -> None:
        await self._call(
            "account.complete_recover",
            code=code,
            body=CompleteAccountRecover(newPassword=new_password),
        )
