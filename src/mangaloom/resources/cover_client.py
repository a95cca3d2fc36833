# mangaloom/resources/cover_client.py
"""Client for the MangaDex cover art endpoints.

Uploading covers needs multipart requests and is not supported.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..models.cover import CoverData, CoverEdit, CoverQuery
from ..unwrapper import Page
from .base_client import BaseResourceClient


class CoverClient(BaseResourceClient):
    async def list(self, query: CoverQuery | Mapping[str, Any] | None = None) -> Page:
        return await self._call("cover.list", query=query)

    async def get(self, cover_id: UUID | str) -> CoverData:
        return await self._call("cover.get", id=cover_id)

    async def edit(self, cover_id: UUID | str, cover: CoverEdit) -> CoverData:
        return await self._call("cover.edit", id=cover_id, body=cover)

    async def delete(self, cover_id: UUID | str) -> None:
        await self._call("cover.delete", id=cover_id)
