# mangaloom/resources/chapter_client.py
"""Client for the MangaDex chapter endpoints."""

from collections.abc import AsyncIterator, Mapping
from typing import Any
from uuid import UUID

from ..constants import DEFAULT_PAGE_SIZE
from ..models.chapter import ChapterData, ChapterQuery, ChapterUpdate
from ..unwrapper import Page
from .base_client import BaseResourceClient


class ChapterClient(BaseResourceClient):
    async def list(self, query: ChapterQuery | Mapping[str, Any] | None = None) -> Page:
        return await self._call("chapter.list", query=query)

    def iterate(
        self,
        query: ChapterQuery | Mapping[str, Any] | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> AsyncIterator[ChapterData]:
        return self._iterate("chapter.list", query, page_size=page_size)

    async def get(self, chapter_id: UUID | str) -> ChapterData:
        return await self._call("chapter.get", id=chapter_id)

    async def update(self, chapter_id: UUID | str, chapter: ChapterUpdate) -> ChapterData:
        return await self._call("chapter.update", id=chapter_id, body=chapter)

    async def delete(self, chapter_id: UUID | str) -> None:
        await self._call("chapter.delete", id=chapter_id)

    async def mark_read(self, chapter_id: UUID | str) -> None:
        await self._call("chapter.mark_read", id=chapter_id)

    async def mark_unread(self, chapter_id: UUID | str) -> None:
        await self._call("chapter.mark_unread", id=chapter_id)
