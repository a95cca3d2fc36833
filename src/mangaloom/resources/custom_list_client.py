# mangaloom/resources/custom_list_client.py
"""Client for user-curated custom lists (`/list`)."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..models.custom_list import CustomListData, CustomListRequest
from ..models.manga import FeedQuery
from ..unwrapper import Page
from .base_client import BaseResourceClient


class CustomListClient(BaseResourceClient):
    async def create(self, custom_list: CustomListRequest) -> CustomListData:
        return await self._call("list.create", body=custom_list)

    async def get(self, list_id: UUID | str) -> CustomListData:
        return await self._call("list.get", id=list_id)

    async def update(
        self, list_id: UUID | str, custom_list: CustomListRequest
    ) -> CustomListData:
        return await self._call("list.update", id=list_id, body=custom_list)

    async def delete(self, list_id: UUID | str) -> None:
        await self._call("list.delete", id=list_id)

    async def add_manga(self, list_id: UUID | str, manga_id: UUID | str) -> None:
        await self._call("list.add_manga", manga_id=manga_id, list_id=list_id)

    async def remove_manga(self, list_id: UUID | str, manga_id: UUID | str) -> None:
        await self._call("list.remove_manga", manga_id=manga_id, list_id=list_id)

    async def mine(self, limit: int | None = None, offset: int | None = None) -> Page:
        """Lists owned by the logged-in user."""
        return await self._call("list.mine", query={"limit": limit, "offset": offset})

    async def of_user(
        self, user_id: UUID | str, limit: int | None = None, offset: int | None = None
    ) -> Page:
        return await self._call(
            "list.of_user", id=user_id, query={"limit": limit, "offset": offset}
        )

    async def feed(
        self, list_id: UUID | str, query: FeedQuery | Mapping[str, Any] | None = None
    ) -> Page:
        """Recent chapters of the manga in a list."""
        return await self._call("list.feed", id=list_id, query=query)
