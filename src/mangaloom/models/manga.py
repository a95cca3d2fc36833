"""Pydantic models for manga, tags, reading status and manga feeds.

Reference: https://api.mangadex.org/docs/
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .common import (
    ApiData,
    ApiObject,
    LenientLocalizedString,
    LocalizedString,
    OrderType,
)


class TagMode(str, Enum):
    AND = "AND"
    OR = "OR"


class MangaStatus(str, Enum):
    ONGOING = "ongoing"
    COMPLETED = "completed"
    HIATUS = "hiatus"
    CANCELLED = "cancelled"


class Demographic(str, Enum):
    SHOUNEN = "shounen"
    SHOUJO = "shoujo"
    JOSEI = "josei"
    SEINEN = "seinen"
    NONE = "none"


class ContentRating(str, Enum):
    SAFE = "safe"
    SUGGESTIVE = "suggestive"
    EROTICA = "erotica"
    PORNOGRAPHIC = "pornographic"


class MangaReadingStatus(str, Enum):
    READING = "reading"
    ON_HOLD = "on_hold"
    PLAN_TO_READ = "plan_to_read"
    DROPPED = "dropped"
    RE_READING = "re_reading"
    COMPLETED = "completed"


class TagAttributes(BaseModel):
    name: LocalizedString
    description: LenientLocalizedString = Field(default_factory=dict)
    group: str
    version: int

    model_config = ConfigDict(extra="allow")


Tag = ApiObject[TagAttributes]
TagData = ApiData[Tag]


class Links(BaseModel):
    """External site ids for a manga (AniList, MyAnimeList, raw, ...).

    Unknown site keys are kept as extra fields.
    """

    al: str | None = None
    ap: str | None = None
    bw: str | None = None
    mu: str | None = None
    nu: str | None = None
    kt: str | None = None
    amz: str | None = None
    ebj: str | None = None
    mal: str | None = None
    raw: str | None = None
    engtl: str | None = None

    model_config = ConfigDict(extra="allow")


def _null_as_links(value: Any) -> Any:
    return {} if value is None or value == [] else value


class MangaAttributes(BaseModel):
    """Attributes of a manga entity."""

    title: LocalizedString
    altTitles: list[LocalizedString] = Field(default_factory=list)
    description: LenientLocalizedString = Field(default_factory=dict)
    links: Annotated[Links, BeforeValidator(_null_as_links)] = Field(
        default_factory=Links
    )
    originalLanguage: str
    lastVolume: str | None = None
    lastChapter: str | None = None
    publicationDemographic: Demographic | None = None
    status: MangaStatus | None = None
    year: int | None = None
    contentRating: ContentRating | None = None
    tags: list[Tag] = Field(default_factory=list)
    version: int
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(extra="allow")


Manga = ApiObject[MangaAttributes]
MangaData = ApiData[Manga]


class MangaOrder(BaseModel):
    createdAt: OrderType | None = None
    updatedAt: OrderType | None = None

    model_config = ConfigDict(extra="forbid")


class MangaQuery(BaseModel):
    """Filter model for `GET /manga`."""

    limit: int | None = None
    offset: int | None = None
    title: str | None = None
    authors: list[UUID] = Field(default_factory=list)
    artists: list[UUID] = Field(default_factory=list)
    year: int | None = None
    includedTags: list[UUID] = Field(default_factory=list)
    includedTagsMode: TagMode | None = None
    excludedTags: list[UUID] = Field(default_factory=list)
    excludedTagsMode: TagMode | None = None
    status: list[MangaStatus] = Field(default_factory=list)
    originalLanguage: list[str] = Field(default_factory=list)
    publicationDemographic: list[Demographic] = Field(default_factory=list)
    ids: list[UUID] = Field(default_factory=list)
    contentRating: list[ContentRating] = Field(default_factory=list)
    createdAtSince: datetime | None = None
    updatedAtSince: datetime | None = None
    order: MangaOrder | None = None

    model_config = ConfigDict(extra="forbid")


class MangaRequest(BaseModel):
    """Body of `POST /manga` and `PUT /manga/{id}`."""

    title: LocalizedString
    altTitles: list[LocalizedString] | None = None
    description: LocalizedString | None = None
    authors: list[UUID] | None = None
    artists: list[UUID] | None = None
    links: Links | None = None
    originalLanguage: str | None = None
    lastVolume: str | None = None
    lastChapter: str | None = None
    publicationDemographic: Demographic | None = None
    status: MangaStatus | None = None
    year: int | None = None
    contentRating: ContentRating | None = None
    modNotes: str | None = None
    version: int = Field(ge=1)

    model_config = ConfigDict(extra="forbid")


class FeedOrder(BaseModel):
    volume: OrderType | None = None
    chapter: OrderType | None = None

    model_config = ConfigDict(extra="forbid")


class FeedQuery(BaseModel):
    """Filter model shared by the manga, followed-manga and custom-list feeds."""

    limit: int | None = None
    offset: int | None = None
    translatedLanguage: list[str] = Field(default_factory=list)
    createdAtSince: datetime | None = None
    updatedAtSince: datetime | None = None
    publishAtSince: datetime | None = None
    order: FeedOrder | None = None

    model_config = ConfigDict(extra="forbid")


ReadMarkersData = ApiData[list[UUID]]
"""Chapter ids marked as read; `data` holds the id list."""


class BatchReadMarkersQuery(BaseModel):
    ids: list[UUID]

    model_config = ConfigDict(extra="forbid")


class ReadingStatusQuery(BaseModel):
    status: MangaReadingStatus | None = None

    model_config = ConfigDict(extra="forbid")


class MangaReadingStatuses(BaseModel):
    """Reading status of every followed manga, keyed by manga id."""

    statuses: dict[UUID, MangaReadingStatus] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class MangaReadingStatusBody(BaseModel):
    """Response of `GET /manga/{id}/status` and body of the matching POST."""

    status: MangaReadingStatus | None

    model_config = ConfigDict(extra="allow")


class ChapterAggregate(BaseModel):
    chapter: str
    count: int

    model_config = ConfigDict(extra="allow")


class VolumeAggregate(BaseModel):
    volume: str
    count: int
    chapters: Annotated[
        dict[str, ChapterAggregate], BeforeValidator(lambda v: {} if v == [] else v)
    ] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class MangaAggregate(BaseModel):
    """Volume/chapter tree returned by `GET /manga/{id}/aggregate`."""

    volumes: Annotated[
        dict[str, VolumeAggregate], BeforeValidator(lambda v: {} if v == [] else v)
    ] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class AggregateQuery(BaseModel):
    translatedLanguage: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
