"""Pydantic models for cover art."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import ApiData, ApiObject, OrderType


class CoverAttributes(BaseModel):
    volume: str | None = None
    fileName: str
    description: str | None = None
    locale: str | None = None
    version: int
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(extra="allow")


Cover = ApiObject[CoverAttributes]
CoverData = ApiData[Cover]


class CoverOrder(BaseModel):
    createdAt: OrderType | None = None
    updatedAt: OrderType | None = None
    volume: OrderType | None = None

    model_config = ConfigDict(extra="forbid")


class CoverQuery(BaseModel):
    """Filter model for `GET /cover`."""

    limit: int | None = None
    offset: int | None = None
    manga: list[UUID] = Field(default_factory=list)
    ids: list[UUID] = Field(default_factory=list)
    uploaders: list[UUID] = Field(default_factory=list)
    order: CoverOrder | None = None

    model_config = ConfigDict(extra="forbid")


class CoverEdit(BaseModel):
    """Body of `PUT /cover/{id}`."""

    volume: str | None
    description: str | None = None
    version: int = Field(ge=1)

    model_config = ConfigDict(extra="forbid")
