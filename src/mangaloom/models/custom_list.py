"""Pydantic models for user-curated custom lists."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import ApiData, ApiObject
from .user import User


class CustomListVisibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class CustomListAttributes(BaseModel):
    name: str
    visibility: CustomListVisibility
    owner: User | None = None
    version: int

    model_config = ConfigDict(extra="allow")


CustomList = ApiObject[CustomListAttributes]
CustomListData = ApiData[CustomList]


class CustomListRequest(BaseModel):
    """Body of `POST /list` and `PUT /list/{id}`."""

    name: str
    visibility: CustomListVisibility = CustomListVisibility.PRIVATE
    manga: list[UUID] = Field(default_factory=list)
    version: int = Field(default=1, ge=1)

    model_config = ConfigDict(extra="forbid")
