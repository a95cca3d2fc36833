"""Pydantic models for chapters."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import ApiData, ApiObject, OrderType


class ChapterAttributes(BaseModel):
    """Attributes of a chapter entity.

    Older API revisions embedded page file names (`hash`, `data`, `dataSaver`);
    those fields are optional so both shapes validate.
    """

    title: str | None = None
    volume: str | None = None
    chapter: str | None = None
    pages: int | None = None
    translatedLanguage: str
    hash: str | None = None
    data: list[str] = Field(default_factory=list)
    dataSaver: list[str] = Field(default_factory=list)
    uploader: UUID | None = None
    externalUrl: str | None = None
    version: int
    createdAt: datetime
    updatedAt: datetime
    publishAt: datetime | None = None

    model_config = ConfigDict(extra="allow")


Chapter = ApiObject[ChapterAttributes]
ChapterData = ApiData[Chapter]


class ChapterOrder(BaseModel):
    createdAt: OrderType | None = None
    updatedAt: OrderType | None = None
    publishAt: OrderType | None = None
    volume: OrderType | None = None
    chapter: OrderType | None = None

    model_config = ConfigDict(extra="forbid")


class ChapterQuery(BaseModel):
    """Filter model for `GET /chapter`."""

    limit: int | None = None
    offset: int | None = None
    ids: list[UUID] = Field(default_factory=list)
    title: str | None = None
    groups: list[UUID] = Field(default_factory=list)
    uploader: UUID | None = None
    manga: UUID | None = None
    volume: str | None = None
    chapter: str | None = None
    translatedLanguage: list[str] = Field(default_factory=list)
    createdAtSince: datetime | None = None
    updatedAtSince: datetime | None = None
    publishAtSince: datetime | None = None
    order: ChapterOrder | None = None

    model_config = ConfigDict(extra="forbid")


class ChapterUpdate(BaseModel):
    """Body of `PUT /chapter/{id}`."""

    title: str | None = None
    volume: str | None = None
    chapter: str | None = None
    translatedLanguage: str | None = None
    version: int = Field(ge=1)

    model_config = ConfigDict(extra="forbid")
