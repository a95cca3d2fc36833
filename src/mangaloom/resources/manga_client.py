# mangaloom/resources/manga_client.py
"""Client for the MangaDex manga endpoints.

Covers listing, CRUD, following, feeds, tags, read markers, reading status
and the volume/chapter aggregate of a manga.
"""

from collections.abc import AsyncIterator, Mapping
from typing import Any
from uuid import UUID

from ..constants import DEFAULT_PAGE_SIZE
from ..log_config import logger
from ..models.manga import (
    AggregateQuery,
    BatchReadMarkersQuery,
    FeedQuery,
    MangaAggregate,
    MangaData,
    MangaQuery,
    MangaReadingStatus,
    MangaReadingStatusBody,
    MangaReadingStatuses,
    MangaRequest,
    ReadingStatusQuery,
    ReadMarkersData,
)
from ..unwrapper import Envelope, Page
from .base_client import BaseResourceClient

Query = MangaQuery | Mapping[str, Any] | None


class MangaClient(BaseResourceClient):
    """Client for `/manga` and the followed-manga endpoints."""

    def iterate(
        self, query: Query = None, *, page_size: int = DEFAULT_PAGE_SIZE
    ) -> AsyncIterator[MangaData]:
        """Yield every manga matching `query`, page by page."""
        return self._iterate("manga.list", query, page_size=page_size)

    async def get(self, manga_id: UUID | str) -> MangaData:
        logger.info(f"Fetching manga with ID: {manga_id}")
        return await self._call("manga.get", id=manga_id)

    async def random(self) -> MangaData:
        return await self._call("manga.random")

    async def create(self, manga: MangaRequest) -> MangaData:
        return await self._call("manga.create", body=manga)

    async def update(self, manga_id: UUID | str, manga: MangaRequest) -> MangaData:
        return await self._call("manga.update", id=manga_id, body=manga)

    async def delete(self, manga_id: UUID | str) -> None:
        await self._call("manga.delete", id=manga_id)

    async def follow(self, manga_id: UUID | str) -> None:
        await self._call("manga.follow", id=manga_id)

    async def unfollow(self, manga_id: UUID | str) -> None:
        await self._call("manga.unfollow", id=manga_id)

    async def feed(
        self, manga_id: UUID | str, query: FeedQuery | Mapping[str, Any] | None = None
    ) -> Page:
        """List the chapters of a manga."""
        return await self._call("manga.feed", id=manga_id, query=query)

    async def tags(self) -> list[Envelope]:
        """List every tag; each element is an `Ok` holding a `TagData`."""
        return await self._call("manga.tags")

    async def read_markers(self, manga_id: UUID | str) -> list[UUID]:
        """Ids of the chapters of `manga_id` the logged-in user has read."""
        result: ReadMarkersData = await self._call("manga.read_markers", id=manga_id)
        return result.data

    async def batch_read_markers(self, manga_ids: list[UUID | str]) -> list[UUID]:
        result: ReadMarkersData = await self._call(
            "manga.batch_read_markers", query=BatchReadMarkersQuery(ids=manga_ids)
        )
        return result.data

    async def reading_statuses(
        self, status: MangaReadingStatus | None = None
    ) -> dict[UUID, MangaReadingStatus]:
        """Reading status of every followed manga, optionally filtered by status."""
        result: MangaReadingStatuses = await self._call(
            "manga.reading_statuses", query=ReadingStatusQuery(status=status)
        )
        return result.statuses

    async def reading_status(self, manga_id: UUID | str) -> MangaReadingStatus | None:
        result: MangaReadingStatusBody = await self._call(
            "manga.reading_status", id=manga_id
        )
        return result.status

    async def update_reading_status(
        self, manga_id: UUID | str, status: MangaReadingStatus | None
    ) -> None:
        """Set the reading status of a manga; `None` removes it."""
        await self._call(
            "manga.update_reading_status",
            id=manga_id,
            body=MangaReadingStatusBody(status=status),
        )

    async def aggregate(
        self, manga_id: UUID | str, translated_language: list[str] | None = None
    ) -> MangaAggregate:
        query = AggregateQuery(translatedLanguage=translated_language or [])
        return await self._call("manga.aggregate", id=manga_id, query=query)

    async def followed(self, limit: int | None = None, offset: int | None = None) -> Page:
        """List the manga followed by the logged-in user."""
        return await self._call(
            "manga.followed", query={"limit": limit, "offset": offset}
        )

    async def followed_feed(
        self, query: FeedQuery | Mapping[str, Any] | None = None
    ) -> Page:
        """List recent chapters of the manga followed by the logged-in user."""
        return await self._call("manga.followed_feed", query=query)

    # Keep last: shadows the builtin `list` for the rest of the class body.
    async def list(self, query: Query = None) -> Page:
        return await self._call("manga.list", query=query)
