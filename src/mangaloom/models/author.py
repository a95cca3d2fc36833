"""Pydantic models for authors and artists."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import ApiData, ApiObject, OrderType


class AuthorAttributes(BaseModel):
    name: str
    imageUrl: str | None = None
    version: int
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(extra="allow")


Author = ApiObject[AuthorAttributes]
AuthorData = ApiData[Author]


class AuthorOrder(BaseModel):
    name: OrderType | None = None

    model_config = ConfigDict(extra="forbid")


class AuthorQuery(BaseModel):
    """Filter model for `GET /author`."""

    limit: int | None = None
    offset: int | None = None
    ids: list[UUID] = Field(default_factory=list)
    name: str | None = None
    order: AuthorOrder | None = None

    model_config = ConfigDict(extra="forbid")


class AuthorRequest(BaseModel):
    """Body of `POST /author` and `PUT /author/{id}`."""

    name: str
    version: int = Field(default=1, ge=1)

    model_config = ConfigDict(extra="forbid")
