# mangaloom/resources/group_client.py
"""Client for the MangaDex scanlation group endpoints."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..models.group import GroupQuery, GroupRequest, ScanlationGroupData
from ..unwrapper import Page
from .base_client import BaseResourceClient


class GroupClient(BaseResourceClient):
    async def list(self, query: GroupQuery | Mapping[str, Any] | None = None) -> Page:
        return await self._call("group.list", query=query)

    async def get(self, group_id: UUID | str) -> ScanlationGroupData:
        return await self._call("group.get", id=group_id)

    async def create(self, group: GroupRequest) -> ScanlationGroupData:
        return await self._call("group.create", body=group)

    async def update(self, group_id: UUID | str, group: GroupRequest) -> ScanlationGroupData:
        return await self._call("group.update", id=group_id, body=group)

    async def delete(self, group_id: UUID | str) -> None:
        await self._call("group.delete", id=group_id)

    async def follow(self, group_id: UUID | str) -> None:
        await self._call("group.follow", id=group_id)

    async def unfollow(self, group_id: UUID | str) -> None:
        await self._call("group.unfollow", id=group_id)

    async def followed(self, limit: int | None = None, offset: int | None = None) -> Page:
        """List the groups followed by the logged-in user."""
        return await self._call("group.followed", query={"limit": limit, "offset": offset})
