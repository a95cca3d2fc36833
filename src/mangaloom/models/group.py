"""Pydantic models for scanlation groups."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import ApiData, ApiObject
from .user import User


class ScanlationGroupAttributes(BaseModel):
    """Attributes of a scanlation group.

    `leader` is only embedded by older API revisions; current ones expose it
    as a relationship.
    """

    name: str
    leader: User | None = None
    website: str | None = None
    description: str | None = None
    locked: bool | None = None
    version: int
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(extra="allow")


ScanlationGroup = ApiObject[ScanlationGroupAttributes]
ScanlationGroupData = ApiData[ScanlationGroup]


class GroupQuery(BaseModel):
    """Filter model for `GET /group`."""

    limit: int | None = None
    offset: int | None = None
    ids: list[UUID] = Field(default_factory=list)
    name: str | None = None

    model_config = ConfigDict(extra="forbid")


class GroupRequest(BaseModel):
    """Body of `POST /group` and `PUT /group/{id}`."""

    name: str
    leader: UUID | None = None
    members: list[UUID] = Field(default_factory=list)
    version: int = Field(default=1, ge=1)

    model_config = ConfigDict(extra="forbid")
