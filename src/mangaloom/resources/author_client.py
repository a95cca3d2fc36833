# mangaloom/resources/author_client.py
"""Client for the MangaDex author endpoints."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..models.author import AuthorData, AuthorQuery, AuthorRequest
from ..unwrapper import Page
from .base_client import BaseResourceClient


class AuthorClient(BaseResourceClient):
    async def list(self, query: AuthorQuery | Mapping[str, Any] | None = None) -> Page:
        return await self._call("author.list", query=query)

    async def get(self, author_id: UUID | str) -> AuthorData:
        return await self._call("author.get", id=author_id)

    async def create(self, author: AuthorRequest) -> AuthorData:
        return await self._call("author.create", body=author)

    async def update(self, author_id: UUID | str, author: AuthorRequest) -> AuthorData:
        return await self._call("author.update", id=author_id, body=author)

    async def delete(self, author_id: UUID | str) -> None:
        await self._call("author.delete", id=author_id)
